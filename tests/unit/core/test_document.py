"""Unit tests for core/document.py"""

from numhead.core.document import Position, TextDocument


def test_lines_and_last_line():
    doc = TextDocument("a\nb\n")
    assert doc.get_line(0) == "a"
    assert doc.get_line(1) == "b"
    assert doc.last_line() == 2


def test_empty_document_has_one_line():
    """An empty text still exposes a single empty line."""
    doc = TextDocument()
    assert doc.last_line() == 0
    assert doc.get_line(0) == ""


def test_replace_range_insert():
    doc = TextDocument("a\nb\n")
    doc.replace_range("x\n", Position(1, 0), Position(1, 0))
    assert doc.text == "a\nx\nb\n"


def test_replace_range_whole_line():
    """Replacing [line, next line) swaps exactly one line."""
    doc = TextDocument("a\nb\nc")
    doc.replace_range("B\n", Position(1, 0), Position(2, 0))
    assert doc.text == "a\nB\nc"


def test_replace_range_clamps_past_end():
    """Positions beyond the last line or line end clamp to the text end."""
    doc = TextDocument("a\nb")
    doc.replace_range("Z", Position(1, 0), Position(5, 0))
    assert doc.text == "a\nZ"
    doc.replace_range("!", Position(0, 99), Position(0, 99))
    assert doc.text == "a!\nZ"


def test_crlf_lines_hide_carriage_return():
    """get_line returns line text without the '\\r' of a CRLF ending."""
    doc = TextDocument("---\r\ntitle: T\r\n---\r\n")
    assert doc.get_line(1) == "title: T"
    assert doc.last_line() == 3


def test_crlf_replace_keeps_line_endings():
    """Inserted and replaced lines use the document's CRLF ending."""
    doc = TextDocument("a\r\nb\r\nc\r\n")
    doc.replace_range("x\n", Position(1, 0), Position(1, 0))
    assert doc.text == "a\r\nx\r\nb\r\nc\r\n"
    doc.replace_range("B\n", Position(2, 0), Position(3, 0))
    assert doc.text == "a\r\nx\r\nB\r\nc\r\n"
