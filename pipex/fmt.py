"""A small printf: %c %s %p %d %i %u %x %X and %% with C argument semantics."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _to_uint32(value: int) -> int:
    return int(value) & _UINT_MASK


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_pointer(value: Any) -> str:
    if value is None:
        return "0x0"
    address = (value if isinstance(value, int) else id(value)) & _POINTER_MASK
    if address == 0:
        return "0x0"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "udiscpxX":
        return spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "u":
        return str(_to_uint32(value))
    if spec in "di":
        return str(_to_int32(value))
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "c":
        return _format_char(value)
    if spec == "p":
        return _format_pointer(value)
    if spec == "x":
        return f"{_to_uint32(value):x}"
    return f"{_to_uint32(value):X}"


def _render(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        yield _convert(spec, remaining)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    stream.flush()
    return len(text)