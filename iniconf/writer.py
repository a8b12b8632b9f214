"""Rendering of sections, keys and values as INI text."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from iniconf.names import Entry
from iniconf.parser import is_space

_END_TAG = "END_OF_TEXT"


@dataclass
class KeyBlock:
    """A key and all of its values, in the order they are written.

    Each value is an :class:`Entry` whose ``item`` is the value text and
    whose ``comment`` is written on the lines before it.
    """

    name: str
    values: list[Entry] = field(default_factory=list)


@dataclass
class SectionBlock:
    """A section, its comment and its keys, in the order they are written.

    A section named ``""`` holds keys that come before any section header;
    no header is written for it.
    """

    name: str
    comment: str | None = None
    keys: list[KeyBlock] = field(default_factory=list)


def is_multiline_data(text: str) -> bool:
    """Tell whether a value must be written as a multi-line block.

    That is the case when it starts or ends with whitespace, or holds a
    line break.
    """
    if not text:
        return False
    if is_space(text[0]) or is_space(text[-1]):
        return True
    return "\n" in text or "\r" in text


def render_multiline(text: str, newline: str = os.linesep) -> str:
    """Write each ``\\n``-separated line of *text*, ending each with *newline*."""
    if not text:
        return ""
    return "".join(line + newline for line in text.split("\n"))


def render_ini(
    file_comment: str | None,
    sections: Iterable[SectionBlock],
    multi_line: bool = False,
    spaces: bool = True,
    newline: str = os.linesep,
) -> str:
    """Render a whole INI document.

    Sections, keys and values are written in the order given. Values that
    need it are written as ``<<<END_OF_TEXT`` blocks when *multi_line* is
    true. The output always ends with an empty line.
    """
    parts: list[str] = []
    need_newline = False
    if file_comment:
        parts.append(render_multiline(file_comment, newline))
        need_newline = True

    separator = " = " if spaces else "="
    for section in sections:
        if section.comment:
            if need_newline:
                parts.append(newline * 2)
            parts.append(render_multiline(section.comment, newline))
            need_newline = False

        if need_newline:
            parts.append(newline * 2)
            need_newline = False

        if section.name:
            parts.append(f"[{section.name}]{newline}")

        for key in section.keys:
            for value in key.values:
                if value.comment:
                    parts.append(newline)
                    parts.append(render_multiline(value.comment, newline))
                parts.append(key.name)
                parts.append(separator)
                if multi_line and is_multiline_data(value.item):
                    parts.append(f"<<<{_END_TAG}{newline}")
                    parts.append(render_multiline(value.item, newline))
                    parts.append(_END_TAG)
                else:
                    parts.append(value.item)
                parts.append(newline)

        need_newline = True

    parts.append(newline)
    return "".join(parts)