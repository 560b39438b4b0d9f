"""Tests for input helpers."""

import pytest

from aoc2020.inputs import groups, ints, lines, read_text


def test_lines_skip_blanks():
    assert lines("a\n\n b \n") == ["a", " b"]


def test_groups():
    assert groups("a\nb\n\n\nc\n") == [["a", "b"], ["c"]]


def test_groups_without_trailing_newline():
    assert groups("a\n\nb") == [["a"], ["b"]]


def test_ints():
    assert ints("1\n-2\n+3\n") == [1, -2, 3]
    with pytest.raises(ValueError):
        ints("1\nx\n")


def test_read_text(tmp_path):
    path = tmp_path / "day01.txt"
    path.write_text("1721\n979\n", encoding="utf-8")
    assert read_text(path) == "1721\n979\n"
