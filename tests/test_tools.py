import io
import sys

import pytest

from taskbook.tools import (
    InputError,
    bounded_int,
    parse,
    parse_many,
    read,
    read_many,
    read_option,
    read_plain,
    read_plain_many,
    say,
    write,
)

U8 = bounded_int(8, signed=False)
I32 = bounded_int(32, signed=True)


def test_parse_single():
    assert parse("0", U8) == 0
    assert parse("1", I32) == 1
    with pytest.raises(InputError):
        parse("-1", U8)
    with pytest.raises(InputError):
        parse("a", I32)
    with pytest.raises(InputError):
        parse("-", I32)


def test_parse_multiple():
    assert parse_many("7 11 8 6 3 8 9", U8) == [7, 11, 8, 6, 3, 8, 9]
    assert parse_many("7,11,8,6,3,8,9", U8, ",") == [7, 11, 8, 6, 3, 8, 9]
    assert parse_many("7 11 8 6     9", U8) == [7, 11, 8, 6, 9]


def test_bounded_int_limits():
    assert parse("255", U8) == 255
    with pytest.raises(InputError):
        parse("256", U8)
    assert parse("-2147483648", I32) == -(2**31)
    with pytest.raises(InputError):
        parse("2147483648", I32)


def test_parse_many_reports_bad_token():
    with pytest.raises(InputError):
        parse_many("1 x 3", I32)


def test_parse_strips_whitespace_for_strings():
    assert parse("  hello \n") == "hello"


def test_say_indents(capsys):
    say("text")
    assert capsys.readouterr().out == "\ttext\n"


def test_write_has_no_newline(capsys):
    write("abc")
    assert capsys.readouterr().out == "abc"


def test_read_with_prompt(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("42\n"))
    assert read(I32, "Number:") == 42
    assert capsys.readouterr().out == "\tNumber: "


def test_read_without_prompt(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("word\n"))
    assert read() == "word"
    assert capsys.readouterr().out == "\t"


def test_read_many(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 2 3\n"))
    assert read_many(I32, "Numbers:") == [1, 2, 3]


def test_read_option(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("19\n"))
    assert read_option() == 19


def test_read_option_rejects_negative(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("-1\n"))
    with pytest.raises(InputError):
        read_option()


def test_read_plain(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert read_plain(I32) == 5
    assert capsys.readouterr().out == ""


def test_read_plain_many(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5 3 4\n"))
    assert read_plain_many(I32) == [5, 3, 4]