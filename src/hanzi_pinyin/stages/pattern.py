"""Stage 2: Replace each syllable with the requested phonetic facet."""

from __future__ import annotations

from typing import Sequence

from hanzi_pinyin.models import Pattern, Syllable
from hanzi_pinyin.syllable import analyze

FACETS = {
    "initial": lambda syllable: syllable.initial,
    "final": lambda syllable: syllable.final,
    "first": lambda syllable: syllable.first,
    "finalHead": lambda syllable: syllable.head,
    "finalBody": lambda syllable: syllable.body,
    "finalTail": lambda syllable: syllable.tail,
    "num": lambda syllable: str(syllable.tone),
}


def facet(syllable: Syllable, pattern: Pattern) -> str:
    """Return one facet of an analyzed syllable; ``pinyin`` is the full text."""

    if pattern == "pinyin":
        return syllable.text
    return FACETS[pattern](syllable)


def extract_pattern(tokens: Sequence[str], pattern: Pattern) -> tuple[str, ...]:
    """Map every token to ``pattern``, analyzing each syllable independently.

    Args:
        tokens: Toned syllables and passthrough tokens.
        pattern: Facet to extract.

    Returns:
        Tokens of the same length holding the extracted facet.
    """

    if pattern == "pinyin":
        return tuple(tokens)
    return tuple(facet(analyze(token), pattern) for token in tokens)
