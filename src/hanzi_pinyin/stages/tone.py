"""Stage 3: Rewrite tone notation and apply the ``ü`` -> ``v`` substitution."""

from __future__ import annotations

from typing import Sequence

from hanzi_pinyin.models import ToneType
from hanzi_pinyin.syllable import is_pinyin_like, strip_tone, tone_number


def format_tone(
    tokens: Sequence[str],
    original: Sequence[str],
    tone_type: ToneType,
    hanzi: Sequence[bool] | None = None,
) -> tuple[str, ...]:
    """Reformat tokens into the requested tone notation.

    ``num`` reads the tone from ``original`` at the same position, because
    ``tokens`` may already be an extracted fragment (an initial carries no
    tone mark of its own). A digit is only appended to syllables resolved
    from Chinese characters; Latin text, punctuation and emoji pass through
    unchanged whatever their case.

    Args:
        tokens: Working tokens, possibly pattern-extracted.
        original: Full toned tokens before pattern extraction.
        tone_type: ``symbol``, ``num`` or ``none``.
        hanzi: Per-token flags marking syllables resolved from Chinese
            characters. When omitted, any pinyin-shaped original counts.

    Returns:
        Reformatted tokens.
    """

    if tone_type == "symbol":
        return tuple(tokens)
    if tone_type == "none":
        return tuple(strip_tone(token) for token in tokens)

    out: list[str] = []
    for idx, token in enumerate(tokens):
        source = original[idx] if idx < len(original) else token
        resolved = hanzi is None or (idx < len(hanzi) and hanzi[idx])
        if resolved and is_pinyin_like(source):
            out.append(f"{strip_tone(token)}{tone_number(source)}")
        else:
            out.append(token)
    return tuple(out)


def reformat(text: str, original_text: str, tone_type: ToneType) -> str:
    """String form of :func:`format_tone` over space-joined syllables."""

    return " ".join(format_tone(text.split(" "), original_text.split(" "), tone_type))


def substitute_v(tokens: Sequence[str], enabled: bool) -> tuple[str, ...]:
    """Replace ``ü`` with ``v`` in every token when ``enabled``."""

    if not enabled:
        return tuple(tokens)
    return tuple(token.replace("ü", "v") for token in tokens)
