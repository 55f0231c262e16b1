import pytest

from crocsh.text import (
    env_key_matches,
    has_question,
    has_star,
    is_alphanum,
    join_words,
    parse_event_number,
    parse_leading_number,
)


def test_env_key_matches_exact_key():
    assert env_key_matches("PATH=/usr/bin", "PATH") is True


@pytest.mark.parametrize(
    "entry,name",
    [
        ("PATH=/usr/bin", "PAT"),
        ("PATH=/usr/bin", "PATHS"),
        ("PATH", "PATH"),
        ("HOME=/root", "PATH"),
    ],
)
def test_env_key_matches_rejects(entry, name):
    assert env_key_matches(entry, name) is False


def test_env_key_matches_value_with_equals():
    assert env_key_matches("A=b=c", "A") is True
    assert env_key_matches("A=b=c", "A=b") is False


@pytest.mark.parametrize("char", ["a", "Z", "0", "9", "!"])
def test_is_alphanum_accepts(char):
    assert is_alphanum(char) is True


@pytest.mark.parametrize("char", ["_", "-", " ", "=", "é", "", "ab"])
def test_is_alphanum_rejects(char):
    assert is_alphanum(char) is False


def test_parse_leading_number_reads_prefix():
    assert parse_leading_number("42abc") == 42
    assert parse_leading_number("7") == 7


def test_parse_leading_number_none_without_digits():
    assert parse_leading_number("abc") is None
    assert parse_leading_number("") is None
    assert parse_leading_number("-3") is None


def test_parse_event_number_skips_marker():
    assert parse_event_number("!12") == 12
    assert parse_event_number("5") == 5
    assert parse_event_number("12x") == 12


def test_parse_event_number_none():
    assert parse_event_number("!!") is None
    assert parse_event_number("!x") is None
    assert parse_event_number("") is None


def test_join_words_round_trip():
    words = ["ls", "-l", "/tmp"]
    line = join_words(words)
    assert line.endswith(" ")
    assert line.split() == words
    assert join_words([]) == ""


def test_has_star_and_question():
    assert has_star("*.c") is True
    assert has_star("main.c") is False
    assert has_question("file?.c") is True
    assert has_question("file.c") is False