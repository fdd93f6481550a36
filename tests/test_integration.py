"""End-to-end parse / render tests."""

import pytest

import janconf
from janconf import Document, EntryType

SAMPLE = """\
# key comment
#key2 comment
#key3comment
key: value
# key json comment
key-json: [{"text":"json-value"}]
# group comment
#this group my life
group:
    # enabled comment
    enabled: false
    name:
# empty group comment
empty-group:
key-312312321:
2dots: ::::::::::::
2dots2: ::::::::::
2dots3: : : : : 1 : : 2: sdff: : :1
commented-properties: true
double:
"""


def _built():
    inner = Document().put("deep", "x", "deep comment")
    group = (
        Document()
        .put("a", 1)
        .put("inner", inner, "inner group")
        .put("b", "two words", "multi\nline")
    )
    return (
        Document()
        .put("title", "Round: trip", "top")
        .put("group", group)
        .put("flag", True)
        .put("empty", "")
        .put("hash", "#not-a-comment")
    )


def test_sample_document():
    doc = janconf.loads(SAMPLE)
    assert doc.keys() == [
        "key",
        "key-json",
        "group",
        "empty-group",
        "key-312312321",
        "2dots",
        "2dots2",
        "2dots3",
        "commented-properties",
        "double",
    ]
    assert doc.get_comment("key") == "key comment\nkey2 comment\nkey3comment"
    assert doc.get("key-json") == '[{"text":"json-value"}]'
    assert doc.get_comment("group") == "group comment\nthis group my life"
    assert doc.type_of("group") is EntryType.GROUP
    assert doc.get_group("group").get_comment("enabled") == "enabled comment"
    assert doc.type_of("empty-group") is EntryType.SCALAR
    assert doc.get_comment("empty-group") == "empty group comment"
    assert doc.get("2dots3") == ": : : : 1 : : 2: sdff: : :1"
    assert doc.get_bool("commented-properties") is True
    assert doc.get("double") == ""


def test_sample_rendered_compact():
    text = janconf.loads(SAMPLE).to_text(indent=1, value_space=False)
    assert text.splitlines()[:14] == [
        "# key comment",
        "# key2 comment",
        "# key3comment",
        "key:value",
        "# key json comment",
        'key-json:[{"text":"json-value"}]',
        "# group comment",
        "# this group my life",
        "group:",
        " # enabled comment",
        " enabled:false",
        " name:",
        "# empty group comment",
        "empty-group:",
    ]


@pytest.mark.parametrize("indent", [1, 2, 4])
@pytest.mark.parametrize("value_space", [True, False])
def test_round_trip(indent, value_space):
    doc = _built()
    assert janconf.loads(janconf.dumps(doc, indent, value_space)) == doc


def test_idempotent_render():
    once = janconf.dumps(janconf.loads(SAMPLE))
    twice = janconf.dumps(janconf.loads(once))
    assert once == twice


def test_round_trip_sample():
    doc = janconf.loads(SAMPLE)
    assert janconf.loads(janconf.dumps(doc, indent=3)) == doc


def test_document_parse_classmethod():
    assert Document.parse(SAMPLE) == janconf.loads(SAMPLE)


def test_edit_then_render():
    doc = janconf.loads("a: 1\ng:\n  x: 1\n")
    doc.get_group("g").put("y", 2, "added")
    doc.remove("a")
    assert janconf.dumps(doc) == "g:\n  x: 1\n  # added\n  y: 2"


def test_version_label():
    assert janconf.__version__ == "1.4.4"
    assert janconf.VERSION_BUILD == 102
