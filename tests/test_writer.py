import pytest

from iniconf.names import Entry
from iniconf.parser import IniParser, ParsedEntry
from iniconf.writer import (
    KeyBlock,
    SectionBlock,
    is_multiline_data,
    render_ini,
    render_multiline,
)


def _parse(text, multi_line=False):
    parser = IniParser(text, allow_multiline=multi_line)
    file_comment = parser.read_file_comment()
    return file_comment, list(parser.entries())


@pytest.mark.parametrize("text", ["", "abc", "a b", "x=y"])
def test_is_multiline_data_false(text):
    assert is_multiline_data(text) is False


@pytest.mark.parametrize("text", [" a", "a ", "\ta", "a\nb", "a\rb", "a\t"])
def test_is_multiline_data_true(text):
    assert is_multiline_data(text) is True


def test_render_multiline_empty():
    assert render_multiline("", "\n") == ""


def test_render_multiline_uses_given_newline():
    assert render_multiline("a\nb", "\r\n") == "a\r\nb\r\n"


def test_render_multiline_trailing_newline_gives_empty_line():
    out = render_multiline("a\n", "\n")
    assert out.split("\n") == ["a", "", ""]


def test_render_empty_document_is_one_newline():
    assert render_ini(None, [], newline="\n") == "\n"


def test_render_simple_section():
    sections = [SectionBlock("sec", None, [KeyBlock("k", [Entry("v")])])]
    assert render_ini(None, sections, newline="\n") == "[sec]\nk = v\n\n"


def test_render_without_spaces():
    sections = [SectionBlock("sec", None, [KeyBlock("k", [Entry("v")])])]
    text = render_ini(None, sections, spaces=False, newline="\n")
    assert "k=v\n" in text
    assert " = " not in text


def test_unnamed_section_has_no_header():
    sections = [SectionBlock("", None, [KeyBlock("k", [Entry("v")])])]
    text = render_ini(None, sections, newline="\n")
    assert "[" not in text
    _, entries = _parse(text)
    assert entries == [ParsedEntry("", "k", "v", None)]


def test_round_trip_sections_and_keys():
    sections = [
        SectionBlock("one", None, [KeyBlock("a", [Entry("1")]), KeyBlock("b", [Entry("2")])]),
        SectionBlock("two", None, [KeyBlock("c", [Entry("3")])]),
    ]
    text = render_ini(None, sections, newline="\n")
    _, entries = _parse(text)
    assert entries == [
        ParsedEntry("one", None, None, None),
        ParsedEntry("one", "a", "1", None),
        ParsedEntry("one", "b", "2", None),
        ParsedEntry("two", None, None, None),
        ParsedEntry("two", "c", "3", None),
    ]


def test_round_trip_comments():
    sections = [
        SectionBlock(
            "sec",
            "; section comment",
            [KeyBlock("k", [Entry("v", "; key comment")])],
        )
    ]
    text = render_ini("; file comment", sections, newline="\n")
    file_comment, entries = _parse(text)
    assert file_comment == "; file comment"
    assert entries == [
        ParsedEntry("sec", None, None, "; section comment"),
        ParsedEntry("sec", "k", "v", "; key comment"),
    ]


def test_round_trip_crlf_newline():
    sections = [SectionBlock("sec", None, [KeyBlock("k", [Entry("v")])])]
    text = render_ini("; c", sections, newline="\r\n")
    assert "\n" not in text.replace("\r\n", "")
    file_comment, entries = _parse(text)
    assert file_comment == "; c"
    assert entries[-1] == ParsedEntry("sec", "k", "v", None)


@pytest.mark.parametrize("value", ["line1\nline2", " padded", "trail ", "a\n\nb"])
def test_round_trip_multiline_values(value):
    sections = [SectionBlock("sec", None, [KeyBlock("k", [Entry(value)])])]
    text = render_ini(None, sections, multi_line=True, newline="\n")
    assert "<<<END_OF_TEXT" in text
    _, entries = _parse(text, multi_line=True)
    assert entries[-1] == ParsedEntry("sec", "k", value, None)


def test_multiline_disabled_writes_value_directly():
    sections = [SectionBlock("sec", None, [KeyBlock("k", [Entry(" x")])])]
    text = render_ini(None, sections, multi_line=False, newline="\n")
    assert "<<<" not in text
    assert "k =  x\n" in text


def test_multiple_values_for_one_key():
    sections = [
        SectionBlock("sec", None, [KeyBlock("k", [Entry("v1"), Entry("v2")])])
    ]
    text = render_ini(None, sections, newline="\n")
    _, entries = _parse(text)
    assert [e.value for e in entries if e.key == "k"] == ["v1", "v2"]


def test_output_ends_with_blank_line():
    sections = [
        SectionBlock("a", None, [KeyBlock("k", [Entry("v")])]),
        SectionBlock("b", None, []),
    ]
    text = render_ini(None, sections, newline="\n")
    assert text.endswith("\n\n")
    _, entries = _parse(text)
    assert [e.section for e in entries if e.key is None] == ["a", "b"]