"""Conversion between stored INI bytes and text."""

from __future__ import annotations

import codecs
import locale

UTF8_SIGNATURE = codecs.BOM_UTF8


class ConversionError(ValueError):
    """Raised when data cannot be converted to or from the storage encoding."""


def strip_signature(data: bytes) -> bytes:
    """Return *data* without a leading UTF-8 byte order mark, if it has one."""
    if data.startswith(UTF8_SIGNATURE):
        return data[len(UTF8_SIGNATURE):]
    return data


def _truncate_at_nul(text: str) -> str:
    head, _, _ = text.partition("\0")
    return head


class Converter:
    """Converts text to and from the storage format of an INI document.

    The storage format is UTF-8 when *store_is_utf8* is true, otherwise the
    encoding of the current locale. As with NUL-terminated strings, any text
    after an embedded NUL character is dropped.
    """

    def __init__(self, store_is_utf8: bool) -> None:
        self.store_is_utf8 = bool(store_is_utf8)
        if self.store_is_utf8:
            self.encoding = "utf-8"
        else:
            self.encoding = locale.getpreferredencoding(False) or "utf-8"

    def decode(self, data: bytes) -> str:
        """Convert stored bytes to text."""
        try:
            text = bytes(data).decode(self.encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ConversionError(
                f"cannot decode data as {self.encoding}: {exc}"
            ) from exc
        return _truncate_at_nul(text)

    def encode(self, text: str) -> bytes:
        """Convert text to stored bytes."""
        try:
            return _truncate_at_nul(text).encode(self.encoding)
        except (UnicodeEncodeError, LookupError) as exc:
            raise ConversionError(
                f"cannot encode text as {self.encoding}: {exc}"
            ) from exc