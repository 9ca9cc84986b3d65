"""Character classification helpers for Chinese and astral-plane text."""

from __future__ import annotations

CHINESE_RANGES = (
    (0x3007, 0x3007),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFAFF),
)


def is_chinese(char: str | None) -> bool:
    """Return whether ``char`` is a single BMP Chinese character.

    Astral code points are never classified as Chinese; the segmenter treats
    them as opaque surrogate-pair runs instead.
    """

    if not isinstance(char, str) or len(char) != 1:
        return False
    cp = ord(char)
    return any(start <= cp <= end for start, end in CHINESE_RANGES)


def is_high_surrogate(char: str) -> bool:
    return 0xD800 <= ord(char) <= 0xDBFF


def is_low_surrogate(char: str) -> bool:
    return 0xDC00 <= ord(char) <= 0xDFFF


def surrogate_width(text: str, index: int) -> int:
    """Return the length of the surrogate-pair character starting at ``index``.

    A code point outside the Basic Multilingual Plane needs two UTF-16 code
    units and is one Python character; an explicit high/low surrogate pair is
    two Python characters. Returns ``0`` when no such character starts here.
    """

    char = text[index]
    if ord(char) > 0xFFFF:
        return 1
    if (
        is_high_surrogate(char)
        and index + 1 < len(text)
        and is_low_surrogate(text[index + 1])
    ):
        return 2
    return 0


def split_logical(text: str) -> list[str]:
    """Split text into logical characters, keeping surrogate pairs whole."""

    chars: list[str] = []
    i = 0
    while i < len(text):
        width = surrogate_width(text, i) or 1
        chars.append(text[i : i + width])
        i += width
    return chars


def logical_length(text: str) -> int:
    return len(split_logical(text))


def strip_non_chinese(text: str) -> str:
    """Keep only Chinese characters from ``text``."""

    return "".join(char for char in text if is_chinese(char))
