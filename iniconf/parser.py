"""Parsing of INI text into sections, keys, values and comments."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from iniconf.names import names_equal

_SPACES = (" ", "\t", "\r", "\n")
_NEWLINES = ("\r", "\n")
_COMMENT_CHARS = (";", "#")
_MULTILINE_PREFIX = "<<<"


def is_space(ch: str) -> bool:
    """Tell whether *ch* is whitespace as the INI format sees it."""
    return ch in _SPACES


def is_comment(ch: str) -> bool:
    """Tell whether *ch* starts a comment line."""
    return ch in _COMMENT_CHARS


def is_multiline_tag(value: str) -> bool:
    """Tell whether a value opens a multi-line block (``<<<TAG``)."""
    return value.startswith(_MULTILINE_PREFIX)


def _is_newline(ch: str) -> bool:
    return ch in _NEWLINES


def _rstrip_space(text: str) -> str:
    return text.rstrip("".join(_SPACES))


@dataclass(frozen=True)
class ParsedEntry:
    """One item found in INI text.

    A section header has *key* and *value* set to None. The comment is the
    comment block that directly precedes the item, if any.
    """

    section: str
    key: str | None
    value: str | None
    comment: str | None = None


class IniParser:
    """Incremental reader of INI text.

    Call :meth:`read_file_comment` first if a file comment is wanted, then
    iterate :meth:`entries`. Keys that appear before any section header
    belong to the section named ``""``. A malformed section header is
    skipped and the current section is kept.

    The attribute ``case_sensitive`` controls how the end tag of a
    multi-line value is matched; by default it is matched ignoring ASCII
    case.
    """

    def __init__(self, text: str, allow_multiline: bool = False) -> None:
        self.text = text
        self.allow_multiline = bool(allow_multiline)
        self.case_sensitive = False
        self._pos = 0
        self._section = ""
        self._finished = False

    def _ch(self, pos: int) -> str:
        return self.text[pos] if pos < len(self.text) else ""

    def _skip_newline(self, pos: int) -> int:
        return pos + 2 if self.text.startswith("\r\n", pos) else pos + 1

    def _load_multiline(
        self, start: int, tag: str | None, allow_blank_lines: bool
    ) -> tuple[str | None, int]:
        """Read a comment block (``tag`` is None) or a tagged multi-line value.

        Returns the text, with every line break turned into a single ``\\n``,
        and the position after it; the text is None when nothing was read.
        """
        pos = start
        committed: list[str] = []
        line = ""
        end_char = ""
        while True:
            if tag is None and not is_comment(self._ch(pos)):
                if not allow_blank_lines:
                    break
                # Blank lines belong to the comment only if another comment follows.
                ahead = pos
                newlines = 0
                while is_space(self._ch(ahead)):
                    if _is_newline(self._ch(ahead)):
                        newlines += 1
                        ahead = self._skip_newline(ahead)
                    else:
                        ahead += 1
                if is_comment(self._ch(ahead)):
                    committed.append("\n" * newlines)
                    pos = ahead
                    continue
                break

            line_start = pos
            while self._ch(pos) and not _is_newline(self._ch(pos)):
                pos += 1
            line = self.text[line_start:pos]
            end_char = self._ch(pos)

            if tag is not None and names_equal(line, tag, self.case_sensitive):
                break
            if not end_char:
                return "".join(committed) + line, pos

            pos = self._skip_newline(pos)
            committed.append(line)
            committed.append("\n")

        if pos == start:
            return None, pos

        body = "".join(committed)
        value = body[:-1] if body else line
        if tag is not None and end_char:
            pos = self._skip_newline(pos)
        return value, pos

    def read_file_comment(self) -> str | None:
        """Read the comment that starts at the very beginning of the text."""
        value, pos = self._load_multiline(self._pos, None, False)
        if value is not None:
            self._pos = pos
        return value

    def _find_entry(self) -> ParsedEntry | None:
        if self._finished:
            return None
        ch = self._ch
        comment: str | None = None
        pos = self._pos
        while ch(pos):
            while is_space(ch(pos)):
                pos += 1
            if not ch(pos):
                break

            if is_comment(ch(pos)):
                comment, pos = self._load_multiline(pos, None, True)
                continue

            if ch(pos) == "[":
                pos += 1
                while is_space(ch(pos)):
                    pos += 1
                start = pos
                while ch(pos) and ch(pos) != "]" and not _is_newline(ch(pos)):
                    pos += 1
                if ch(pos) != "]":
                    continue
                name = _rstrip_space(self.text[start:pos])
                pos += 1
                while ch(pos) and not _is_newline(ch(pos)):
                    pos += 1
                self._section = name
                self._pos = pos
                return ParsedEntry(name, None, None, comment)

            key_start = pos
            while ch(pos) and ch(pos) != "=" and not _is_newline(ch(pos)):
                pos += 1
            if ch(pos) != "=":
                continue
            if pos == key_start:
                while ch(pos) and not _is_newline(ch(pos)):
                    pos += 1
                continue
            key = _rstrip_space(self.text[key_start:pos])

            pos += 1
            while ch(pos) and not _is_newline(ch(pos)) and is_space(ch(pos)):
                pos += 1
            value_start = pos
            while ch(pos) and not _is_newline(ch(pos)):
                pos += 1
            value: str | None = _rstrip_space(self.text[value_start:pos])
            if ch(pos):
                pos = self._skip_newline(pos)

            if self.allow_multiline and is_multiline_tag(value):
                value, pos = self._load_multiline(
                    pos, value[len(_MULTILINE_PREFIX):], False
                )
                self._pos = pos
                if value is None:
                    self._finished = True
                    return None

            self._pos = pos
            return ParsedEntry(self._section, key, value, comment)

        self._pos = pos
        self._finished = True
        return None

    def entries(self) -> Iterator[ParsedEntry]:
        """Yield every section header and key/value pair in file order."""
        while (entry := self._find_entry()) is not None:
            yield entry