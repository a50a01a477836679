"""Small string and character helpers with C-library style semantics."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = " \n\t\v\f\r"


def _code(c: int | str) -> int:
    """Return the character code of *c*, which is an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one optional sign are accepted.
    Parsing stops at the first non-digit; no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *text*."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* starting at *start*."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find *needle* wholly within the first *length* characters of *haystack*.

    Returns the rest of *haystack* from the match, or None.
    """
    if not needle:
        return haystack
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else haystack[index:]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the code difference at the first mismatch."""
    if n <= 0:
        return 0
    left = (ord(ch) for ch in s1[:n])
    right = (ord(ch) for ch in s2[:n])
    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def recursive_power(nb: int, power: int) -> int:
    """Return *nb* raised to *power*; a negative power gives 0."""
    if power < 0:
        return 0
    if power == 0:
        return 1
    return nb * recursive_power(nb, power - 1)


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def _convert(c: int | str, code: int) -> int | str:
    return chr(code) if isinstance(c, str) else code


def toupper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other values pass through."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _convert(c, code - 32)
    return c


def tolower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other values pass through."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _convert(c, code + 32)
    return c