import io

import pytest

from crocsh.aliases import AliasFile, alias_builtin


@pytest.fixture
def aliases(tmp_path):
    return AliasFile(str(tmp_path / ".alias"))


def test_set_then_read(aliases):
    aliases.set("ll", ["ls", "-l"])
    assert aliases.read() == [("ll", ["ls", "-l"])]


def test_file_format(aliases):
    aliases.set("ll", ["ls", "-l"])
    with open(aliases.path, encoding="utf-8") as handle:
        assert handle.read() == "ll\tls -l\n"


def test_new_alias_keeps_file_sorted(aliases):
    aliases.set("zz", ["pwd"])
    aliases.set("aa", ["ls"])
    aliases.set("mm", ["cat"])
    names = [name for name, _ in aliases.read()]
    assert names == sorted(names)
    assert set(names) == {"aa", "mm", "zz"}


def test_redefinition_replaces_in_place(aliases):
    aliases.set("aa", ["ls"])
    aliases.set("bb", ["pwd"])
    aliases.set("aa", ["echo", "hi"])
    assert aliases.read() == [("aa", ["echo", "hi"]), ("bb", ["pwd"])]


def test_display_and_display_one(aliases):
    aliases.set("ll", ["ls", "-l"])
    out = io.StringIO()
    aliases.display(out)
    assert out.getvalue() == "ll\tls -l\n"
    one = io.StringIO()
    aliases.display_one("ll", one)
    assert one.getvalue() == "ls -l\n"
    missing = io.StringIO()
    aliases.display_one("nope", missing)
    assert missing.getvalue() == ""


def test_remove(aliases):
    aliases.set("aa", ["ls"])
    aliases.set("bb", ["pwd"])
    aliases.remove("aa")
    assert aliases.read() == [("bb", ["pwd"])]


def test_expand_replaces_alias_words(aliases):
    aliases.set("ll", ["ls", "-l"])
    assert aliases.expand("ll foo") == "ls -l foo\n"


def test_expand_without_file_keeps_line(aliases):
    assert aliases.expand("ll foo") == "ll foo"


def test_expand_leaves_alias_command_alone(aliases):
    aliases.set("ll", ["ls"])
    assert aliases.expand("alias ll") == "alias ll"


def test_builtin_alias_sets_and_lists(aliases):
    out, err = io.StringIO(), io.StringIO()
    assert alias_builtin("alias ll ls -l", aliases, out, err) == 0
    assert alias_builtin("alias", aliases, out, err) == 0
    assert out.getvalue() == "ll\tls -l\n"


def test_builtin_unalias_without_args(aliases):
    out, err = io.StringIO(), io.StringIO()
    assert alias_builtin("unalias", aliases, out, err) == 1
    assert err.getvalue() == "unalias: Too few arguments.\n"


def test_builtin_unalias_removes(aliases):
    out, err = io.StringIO(), io.StringIO()
    alias_builtin("alias ll ls", aliases, out, err)
    assert alias_builtin("unalias ll", aliases, out, err) == 0
    assert aliases.read() == []


def test_builtin_ignores_other_commands(aliases):
    assert alias_builtin("ls -l", aliases, io.StringIO(), io.StringIO()) is None