import io

from crocsh.repeat import expand_repeat


def test_repeats_command():
    err = io.StringIO()
    assert expand_repeat("repeat 3 ls", err) == "ls;ls;ls"
    assert err.getvalue() == ""


def test_words_are_joined_without_spaces():
    assert expand_repeat("repeat 2 echo hi", io.StringIO()) == "echohi;echohi"


def test_zero_count_gives_empty_line():
    assert expand_repeat("repeat 0 ls", io.StringIO()) == ""


def test_too_few_arguments():
    err = io.StringIO()
    assert expand_repeat("repeat 2", err) == "\n"
    assert err.getvalue() == "repeat: Too few arguments.\n"


def test_badly_formed_number():
    err = io.StringIO()
    assert expand_repeat("repeat x ls", err) == "\n"
    assert err.getvalue() == "repeat: Badly formed number.\n"


def test_other_lines_unchanged():
    line = "ls -l\n"
    assert expand_repeat(line, io.StringIO()) == line