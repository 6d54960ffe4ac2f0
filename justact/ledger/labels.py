"""
Human-readable aliases for enactment sequence numbers.

Storage keeps a plain integer; these functions only render it.

- alpha: bijective base-26 (a..z, aa, ab, ...), unbounded
- char: one character counted up from 'a', bounded by the Unicode range
"""

from __future__ import annotations

from typing import Callable

from .errors import SequenceOverflow

LABEL_STYLES = frozenset({"alpha", "char"})

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"

_SURROGATES = range(0xD800, 0xE000)
_MAX_CODE_POINT = 0x10FFFF


def alpha_label(sequence: int) -> str:
    """Render `sequence` as a spreadsheet-style column name.

    0 -> "a", 25 -> "z", 26 -> "aa", 701 -> "zz", 702 -> "aaa".
    """
    if sequence < 0:
        raise ValueError("sequence must be non-negative")
    chars: list[str] = []
    n = sequence + 1
    while n:
        n, rem = divmod(n - 1, 26)
        chars.append(_ALPHABET[rem])
    return "".join(reversed(chars))


def char_label(sequence: int) -> str:
    """Render `sequence` as the single character `chr(ord('a') + sequence)`.

    Raises:
        SequenceOverflow: the code point is a surrogate or past U+10FFFF.
    """
    if sequence < 0:
        raise ValueError("sequence must be non-negative")
    code_point = ord("a") + sequence
    if code_point > _MAX_CODE_POINT or code_point in _SURROGATES:
        raise SequenceOverflow(sequence, "char")
    return chr(code_point)


def labeler(style: str) -> Callable[[int], str]:
    """Return the renderer for a label style."""
    if style == "alpha":
        return alpha_label
    if style == "char":
        return char_label
    raise ValueError(f"Invalid label_style: {style}")
