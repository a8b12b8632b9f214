"""An editable INI document that keeps comments and load order."""

from __future__ import annotations

import enum
import io
import os
from dataclasses import dataclass, field
from typing import BinaryIO, TextIO

from iniconf.converter import UTF8_SIGNATURE, ConversionError, Converter, strip_signature
from iniconf.names import Entry, fold_name
from iniconf.parser import IniParser, is_comment
from iniconf.values import (
    format_bool,
    format_double,
    format_long,
    parse_bool,
    parse_double,
    parse_long,
)
from iniconf.writer import KeyBlock, SectionBlock, render_ini


class IniError(Exception):
    """Raised when INI data cannot be loaded or saved."""


class SetResult(enum.Enum):
    """Outcome of adding or changing a value."""

    UPDATED = 1
    INSERTED = 2


@dataclass
class _Value:
    name: str
    value: str
    comment: str | None
    order: int


@dataclass
class _Section:
    name: str
    comment: str | None
    order: int
    keys: dict[str, list[_Value]] = field(default_factory=dict)

    def entry_count(self) -> int:
        return sum(len(group) for group in self.keys.values())


class IniFile:
    """INI data held in memory.

    Sections and keys are matched ignoring ASCII case unless
    *case_sensitive* is true. Keys that come before any section header
    belong to the section named ``""``. Saving writes sections and keys in
    the order they were first loaded or added.
    """

    def __init__(
        self,
        unicode: bool = False,
        multi_key: bool = False,
        multi_line: bool = False,
        case_sensitive: bool = False,
    ) -> None:
        self._unicode = bool(unicode)
        self.multi_key = bool(multi_key)
        self.multi_line = bool(multi_line)
        self.case_sensitive = bool(case_sensitive)
        self.spaces = True
        self.newline = os.linesep
        self._sections: dict[str, _Section] = {}
        self._file_comment: str | None = None
        self._loaded = False
        self._order = 0

    # -- state ------------------------------------------------------------

    @property
    def unicode(self) -> bool:
        """Whether the stored data is UTF-8 rather than the locale encoding."""
        return self._unicode

    @property
    def file_comment(self) -> str | None:
        """The comment found at the very start of the first loaded data."""
        return self._file_comment

    def reset(self) -> None:
        """Discard all data."""
        self._sections.clear()
        self._file_comment = None
        self._loaded = False

    def is_empty(self) -> bool:
        """Tell whether the document holds no sections."""
        return not self._sections

    def set_unicode(self, value: bool = True) -> None:
        """Choose UTF-8 storage; ignored once data has been loaded."""
        if not self._loaded:
            self._unicode = bool(value)

    def _fold(self, name: str) -> str:
        return fold_name(name, self.case_sensitive)

    def _converter(self) -> Converter:
        return Converter(self._unicode)

    # -- loading ----------------------------------------------------------

    def load_file(self, path: str | os.PathLike[str]) -> None:
        """Load INI data from the file at *path*."""
        with open(path, "rb") as handle:
            self.load_data(handle.read())

    def load_stream(self, stream: BinaryIO | TextIO) -> None:
        """Load INI data from a binary or text stream, read to its end."""
        self.load_data(stream.read())

    def load_data(self, data: bytes | str) -> None:
        """Load INI data from bytes in the storage format, or from text."""
        if not data:
            return
        if isinstance(data, str):
            text = data.partition("\0")[0]
        else:
            raw = bytes(data)
            if self._unicode:
                raw = strip_signature(raw)
            try:
                text = self._converter().decode(raw)
            except ConversionError as exc:
                raise IniError(str(exc)) from exc

        parser = IniParser(text, self.multi_line)
        parser.case_sensitive = self.case_sensitive
        if self._file_comment is None:
            self._file_comment = parser.read_file_comment()
        for entry in parser.entries():
            self._add_entry(entry.section, entry.key, entry.value, entry.comment, False)
        self._loaded = True

    # -- saving -----------------------------------------------------------

    def _blocks(self) -> list[SectionBlock]:
        blocks = []
        sections = sorted(
            self._sections.values(), key=lambda s: (s.order, self._fold(s.name))
        )
        for section in sections:
            groups = sorted(
                section.keys.values(),
                key=lambda g: (g[0].order, self._fold(g[0].name)),
            )
            keys = []
            for group in groups:
                chosen = group if self.multi_key else group[:1]
                keys.append(
                    KeyBlock(
                        group[0].name,
                        [Entry(v.value, v.comment, v.order) for v in chosen],
                    )
                )
            blocks.append(SectionBlock(section.name, section.comment, keys))
        return blocks

    def _render(self) -> str:
        return render_ini(
            self._file_comment,
            self._blocks(),
            multi_line=self.multi_line,
            spaces=self.spaces,
            newline=self.newline,
        )

    def to_bytes(self, add_signature: bool = False) -> bytes:
        """Return the document in its storage format.

        The UTF-8 signature is prepended only when *add_signature* is true
        and the storage format is UTF-8.
        """
        try:
            body = self._converter().encode(self._render())
        except ConversionError as exc:
            raise IniError(str(exc)) from exc
        if self._unicode and add_signature:
            return UTF8_SIGNATURE + body
        return body

    def save(self, stream: BinaryIO | TextIO, add_signature: bool = False) -> None:
        """Write the document to a binary or text stream."""
        if isinstance(stream, io.TextIOBase):
            text = self._render()
            if self._unicode and add_signature:
                text = "\ufeff" + text
            stream.write(text)
        else:
            stream.write(self.to_bytes(add_signature))

    def save_file(self, path: str | os.PathLike[str], add_signature: bool = True) -> None:
        """Write the document to the file at *path*."""
        data = self.to_bytes(add_signature)
        with open(path, "wb") as handle:
            handle.write(data)

    # -- queries ----------------------------------------------------------

    def _group(self, section: str | None, key: str | None) -> list[_Value] | None:
        if section is None or key is None:
            return None
        found = self._sections.get(self._fold(section))
        if found is None:
            return None
        return found.keys.get(self._fold(key))

    def _sorted_groups(self, section: _Section) -> list[list[_Value]]:
        return [section.keys[name] for name in sorted(section.keys)]

    def get_all_sections(self) -> list[Entry]:
        """Return every section, ordered by name."""
        return [
            Entry(s.name, s.comment, s.order)
            for _, s in sorted(self._sections.items())
        ]

    def get_all_keys(self, section: str | None) -> list[Entry] | None:
        """Return each distinct key of a section, or None if it is missing."""
        if section is None:
            return None
        found = self._sections.get(self._fold(section))
        if found is None:
            return None
        return [
            Entry(group[0].name, group[0].comment, group[0].order)
            for group in self._sorted_groups(found)
        ]

    def get_all_values(self, section: str | None, key: str | None) -> list[Entry] | None:
        """Return the values of a key as entries, or None if it is missing.

        Without multiple keys only the first value is returned.
        """
        group = self._group(section, key)
        if not group:
            return None
        chosen = group if self.multi_key else group[:1]
        return [Entry(v.value, v.comment, v.order) for v in chosen]

    def get_section_size(self, section: str | None) -> int | None:
        """Return the number of keys in a section, or None if it is missing.

        With multiple keys enabled each distinct key counts once.
        """
        if section is None:
            return None
        found = self._sections.get(self._fold(section))
        if found is None:
            return None
        if not self.multi_key:
            return found.entry_count()
        return len(found.keys)

    def get_section(self, section: str | None) -> list[tuple[Entry, str]] | None:
        """Return every key entry and value of a section, or None."""
        if section is None:
            return None
        found = self._sections.get(self._fold(section))
        if found is None:
            return None
        return [
            (Entry(v.name, v.comment, v.order), v.value)
            for group in self._sorted_groups(found)
            for v in group
        ]

    def get_value(
        self, section: str | None, key: str | None, default: str | None = None
    ) -> str | None:
        """Return the first value of a key, or *default*."""
        group = self._group(section, key)
        if not group:
            return default
        return group[0].value

    def has_multiple(self, section: str | None, key: str | None) -> bool:
        """Tell whether a key holds several values (multiple keys only)."""
        group = self._group(section, key)
        return bool(self.multi_key and group and len(group) > 1)

    def get_long_value(self, section: str | None, key: str | None, default: int = 0) -> int:
        """Return a value as an integer, or *default* if absent or invalid."""
        value = self.get_value(section, key)
        parsed = parse_long(value) if value else None
        return default if parsed is None else parsed

    def get_double_value(
        self, section: str | None, key: str | None, default: float = 0.0
    ) -> float:
        """Return a value as a float, or *default* if absent or invalid."""
        value = self.get_value(section, key)
        parsed = parse_double(value) if value else None
        return default if parsed is None else parsed

    def get_bool_value(
        self, section: str | None, key: str | None, default: bool = False
    ) -> bool:
        """Return a value as a boolean, or *default* if absent or unknown."""
        value = self.get_value(section, key)
        parsed = parse_bool(value) if value else None
        return default if parsed is None else parsed

    # -- changes ----------------------------------------------------------

    def _add_entry(
        self,
        section: str,
        key: str | None,
        value: str | None,
        comment: str | None,
        force_replace: bool,
    ) -> SetResult:
        if comment is not None and not (comment and is_comment(comment[0])):
            raise ValueError("a comment must start with ';' or '#'")
        inserted = False
        section_fold = self._fold(section)
        found = self._sections.get(section_fold)
        if found is None:
            self._order += 1
            section_comment = comment if key is None or value is None else None
            found = _Section(section, section_comment, self._order)
            self._sections[section_fold] = found
            inserted = True
        if key is None or value is None:
            return SetResult.INSERTED if inserted else SetResult.UPDATED

        key_fold = self._fold(key)
        group = found.keys.get(key_fold)
        self._order += 1
        order = self._order
        if group and self.multi_key and force_replace:
            earliest = min(group, key=lambda v: v.order)
            if earliest.order < order:
                order = earliest.order
                if earliest.comment:
                    comment = earliest.comment
            del found.keys[key_fold]
            group = None

        force_new = self.multi_key and not force_replace
        if not group or force_new:
            found.keys.setdefault(key_fold, []).append(_Value(key, value, comment, order))
            inserted = True
        else:
            group[0].value = value
        return SetResult.INSERTED if inserted else SetResult.UPDATED

    def set_value(
        self,
        section: str,
        key: str | None,
        value: str | None,
        comment: str | None = None,
        force_replace: bool = False,
    ) -> SetResult:
        """Add or update a value; with *key* or *value* None, add a section.

        A comment is kept only when the section or key is created. With
        multiple keys a new value is always added unless *force_replace*
        is true, which replaces all values but keeps the first one's place
        and comment.
        """
        if section is None:
            raise ValueError("a section name is required")
        return self._add_entry(section, key, value, comment, force_replace)

    def _set_formatted(
        self,
        section: str,
        key: str,
        text: str,
        comment: str | None,
        force_replace: bool,
    ) -> SetResult:
        if section is None or key is None:
            raise ValueError("a section and a key are required")
        return self._add_entry(section, key, text, comment, force_replace)

    def set_long_value(
        self,
        section: str,
        key: str,
        value: int,
        comment: str | None = None,
        use_hex: bool = False,
        force_replace: bool = False,
    ) -> SetResult:
        """Add or update an integer value, in decimal or hexadecimal."""
        return self._set_formatted(
            section, key, format_long(value, use_hex), comment, force_replace
        )

    def set_double_value(
        self,
        section: str,
        key: str,
        value: float,
        comment: str | None = None,
        force_replace: bool = False,
    ) -> SetResult:
        """Add or update a floating point value."""
        return self._set_formatted(
            section, key, format_double(value), comment, force_replace
        )

    def set_bool_value(
        self,
        section: str,
        key: str,
        value: bool,
        comment: str | None = None,
        force_replace: bool = False,
    ) -> SetResult:
        """Add or update a boolean value, written as ``true`` or ``false``."""
        return self._set_formatted(
            section, key, format_bool(value), comment, force_replace
        )

    def delete(
        self, section: str | None, key: str | None = None, remove_empty: bool = False
    ) -> bool:
        """Delete a section, or every value of a key in it.

        With *remove_empty*, a section left without keys is removed too.
        Returns False when the section or key was not found.
        """
        if section is None:
            return False
        section_fold = self._fold(section)
        found = self._sections.get(section_fold)
        if found is None:
            return False
        if key is not None:
            key_fold = self._fold(key)
            if key_fold not in found.keys:
                return False
            del found.keys[key_fold]
            if not remove_empty or found.keys:
                return True
        del self._sections[section_fold]
        return True