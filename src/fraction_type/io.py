"""
Host boundary: textual input/output functions for a fraction column type.

A host (e.g. a database type) hands over a raw buffer and expects either a
value or an error; it asks for text when displaying or re-serialising.

- fraction_in:   buffer -> Fraction   (whole buffer must be one literal)
- fraction_out:  Fraction -> str      (canonical text)
- fraction_recv / fraction_send: the same over UTF-8 bytes.
"""

from __future__ import annotations

from typing import Union

from .core import Fraction, FractionSyntaxError, format_fraction, parse

Buffer = Union[str, bytes, bytearray, memoryview]

_NUL = "\x00"


def _decode(raw: Union[bytes, bytearray, memoryview]) -> str:
    data = bytes(raw)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        # Bytes before e.start decode cleanly; their character count indexes the replacement text.
        raise FractionSyntaxError(
            f"input is not valid UTF-8 at byte {e.start}: {e.reason}",
            text=data.decode("utf-8", errors="replace"),
            position=len(data[:e.start].decode("utf-8")),
        ) from e


def fraction_in(raw: Buffer) -> Fraction:
    """Materialise a Fraction from a host text buffer.

    Bytes are decoded as strict UTF-8. A single trailing NUL terminator (C string
    buffers) is dropped; any other leftover text fails like in `parse`.
    """
    if isinstance(raw, (bytes, bytearray, memoryview)):
        text = _decode(raw)
    elif isinstance(raw, str):
        text = raw
    else:
        raise TypeError(f"fraction_in expects str or bytes-like, got {type(raw).__name__}")
    if text.endswith(_NUL):
        text = text[:-1]
    return parse(text)


def fraction_out(value: Fraction) -> str:
    """Canonical text for display or storage."""
    return format_fraction(value)


def fraction_recv(raw: Union[bytes, bytearray, memoryview]) -> Fraction:
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raise TypeError(f"fraction_recv expects bytes-like, got {type(raw).__name__}")
    return fraction_in(raw)


def fraction_send(value: Fraction) -> bytes:
    return fraction_out(value).encode("utf-8")


__all__ = [
    "fraction_in",
    "fraction_out",
    "fraction_recv",
    "fraction_send",
]
