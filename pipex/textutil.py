"""Small string helpers with C-library semantics: splitting, parsing and searching."""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return c


def _as_input_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def atoi(s: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if none."""
    text = s.lstrip("".join(_WHITESPACE))
    sign = 1
    if text[:1] == "-":
        sign = -1
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    digits = []
    for ch in text:
        if "0" <= ch <= "9":
            digits.append(ch)
        else:
            break
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    return str(int(n))


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` wholly inside the first ``length`` characters, or None."""
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def _compare(a: str, b: str, n: Optional[int]) -> int:
    limit = min(len(a), len(b)) if n is None else min(len(a), len(b), n)
    for ca, cb in zip(a[:limit], b[:limit]):
        if ca != cb:
            return ord(ca) - ord(cb)
    if n is not None and limit >= n:
        return 0
    left = ord(a[limit]) if limit < len(a) else 0
    right = ord(b[limit]) if limit < len(b) else 0
    return left - right


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; negative, zero or positive difference."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _compare(a, b, n)


def strcmp(a: str, b: str) -> int:
    """Compare two strings; negative, zero or positive difference."""
    return _compare(a, b, None)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the terminator matches at ``len(s)``."""
    code = _code(c)
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index == -1 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the terminator matches at ``len(s)``."""
    code = _code(c)
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index == -1 else index


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space to tilde."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _as_input_kind(c, code)


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _as_input_kind(c, code)