"""A mutable string type with in-place editing operations."""

from __future__ import annotations

import string

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _as_text(value: str | MyString | None) -> str:
    if value is None:
        return ""
    if isinstance(value, MyString):
        return value._text
    if isinstance(value, str):
        return value
    raise TypeError(f"expected str or MyString, got {type(value).__name__}")


def _check_fill(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("fill character must be a single character")


class MyString:
    """A string whose contents can be changed in place.

    ``None`` is accepted wherever text is expected and counts as no text.
    """

    __slots__ = ("_text",)
    __hash__ = None  # mutable

    def __init__(self, s: str | MyString | None = "") -> None:
        self._text = _as_text(s)

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"MyString({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if other is None or isinstance(other, (str, MyString)):
            return self._text == _as_text(other)
        return NotImplemented

    def __add__(self, other: object) -> MyString:
        if isinstance(other, (str, MyString)):
            return MyString(self._text + _as_text(other))
        return NotImplemented

    def append(self, s: str | MyString | None) -> None:
        """Add ``s`` to the end; nothing happens for ``None`` or empty text."""
        self._text += _as_text(s)

    def index_of(self, s: str | MyString | None) -> int:
        """Position of the first occurrence of ``s``, or -1."""
        if s is None:
            return -1
        return self._text.find(_as_text(s))

    def last_index_of(self, s: str | MyString | None) -> int:
        """Position of the last occurrence of ``s``, or -1.

        Empty text is found at the end of the string.
        """
        if s is None:
            return -1
        return self._text.rfind(_as_text(s))

    def interleave(self, s: str | MyString | None) -> None:
        """Alternate characters of this string and ``s``, then append the rest."""
        other = _as_text(s)
        if not other:
            return
        shared = min(len(self._text), len(other))
        mixed = "".join(a + b for a, b in zip(self._text, other))
        self._text = mixed + self._text[shared:] + other[shared:]

    def remove_at(self, i: int) -> bool:
        """Remove the character at ``i``; return False if ``i`` is out of range."""
        if not 0 <= i < len(self._text):
            return False
        self._text = self._text[:i] + self._text[i + 1:]
        return True

    def pad_left(self, total_length: int, c: str = " ") -> None:
        """Fill on the left with ``c`` up to ``total_length`` characters."""
        _check_fill(c)
        self._text = self._text.rjust(total_length, c)

    def pad_right(self, total_length: int, c: str = " ") -> None:
        """Fill on the right with ``c`` up to ``total_length`` characters."""
        _check_fill(c)
        self._text = self._text.ljust(total_length, c)

    def reverse(self) -> None:
        self._text = self._text[::-1]

    def to_lower(self) -> None:
        """Lower-case ASCII letters; other characters are left alone."""
        self._text = self._text.translate(_TO_LOWER)

    def to_upper(self) -> None:
        """Upper-case ASCII letters; other characters are left alone."""
        self._text = self._text.translate(_TO_UPPER)