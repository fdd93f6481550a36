"""Tests for the Writer layer."""

import pytest

from janconf import ConfigurationError, Document, WriteOptions
from janconf.writer import write_lines, write_text


def _sample():
    server = Document().put("host", "localhost").put("port", 8080, "tcp port")
    return (
        Document()
        .put("name", "demo", "first line\nsecond line")
        .put("server", server, "network")
        .put("debug", False)
    )


# ---------------------------------------------------------------------------
# write_lines
# ---------------------------------------------------------------------------

def test_write_lines_default_options():
    assert write_lines(_sample()) == [
        "# first line",
        "# second line",
        "name: demo",
        "# network",
        "server:",
        "  host: localhost",
        "  # tcp port",
        "  port: 8080",
        "debug: false",
    ]

def test_write_lines_custom_indent_compact():
    lines = write_lines(_sample(), WriteOptions(indent=4, value_space=False))
    assert "name:demo" in lines
    assert "    host:localhost" in lines
    assert "    # tcp port" in lines

def test_nested_indent_accumulates():
    inner = Document().put("leaf", 1)
    doc = Document().put("a", Document().put("b", inner))
    assert write_lines(doc, WriteOptions(indent=1)) == ["a:", " b:", "  leaf: 1"]

def test_empty_document():
    assert write_lines(Document()) == []
    assert write_text(Document()) == ""

def test_empty_group_renders_bare_key():
    doc = Document().put("g", Document()).put("x", 1)
    assert write_lines(doc) == ["g:", "x: 1"]

def test_empty_scalar():
    doc = Document().put("k", "").put("x", 1)
    assert write_lines(doc) == ["k: ", "x: 1"]
    assert write_lines(doc, WriteOptions(value_space=False)) == ["k:", "x:1"]

def test_empty_comment_line():
    assert write_lines(Document().put("k", 1, "")) == ["# ", "k: 1"]


# ---------------------------------------------------------------------------
# write_text
# ---------------------------------------------------------------------------

def test_write_text_joins_lines():
    text = write_text(_sample(), indent=2)
    assert text.splitlines() == write_lines(_sample())
    assert not text.endswith("\n")

def test_write_text_trims_trailing_whitespace():
    assert write_text(Document().put("k", "")) == "k:"

def test_indent_below_one_is_configuration_error():
    with pytest.raises(ConfigurationError):
        write_text(_sample(), indent=0)

def test_configuration_error_on_negative_indent():
    with pytest.raises(ValueError):
        _sample().to_text(indent=-3)

def test_str_uses_defaults():
    doc = _sample()
    assert str(doc) == write_text(doc, indent=2, value_space=True)

def test_to_text_honours_indent():
    doc = Document().put("g", Document().put("a", 1))
    assert doc.to_text(indent=3) == "g:\n   a: 1"

def test_colons_and_hashes_written_verbatim():
    doc = Document().put("k", "a:b # c")
    assert write_text(doc) == "k: a:b # c"
