"""Phonetic decomposition of a single toned pinyin syllable.

The analyzer splits a syllable such as ``zhuāng`` into its initial (``zh``),
final (``uāng``), tone number (``1``), first letter (``z``) and the final's
head/body/tail (``u`` / ``ā`` / ``ng``). It works on any string and never
raises: tokens that are not pinyin simply decompose into an empty initial and
a final equal to the whole token.
"""

from __future__ import annotations

import re
import unicodedata

from hanzi_pinyin.models import Syllable

TONE_MARKS = {
    "ā": ("a", 1),
    "á": ("a", 2),
    "ǎ": ("a", 3),
    "à": ("a", 4),
    "ē": ("e", 1),
    "é": ("e", 2),
    "ě": ("e", 3),
    "è": ("e", 4),
    "ī": ("i", 1),
    "í": ("i", 2),
    "ǐ": ("i", 3),
    "ì": ("i", 4),
    "ō": ("o", 1),
    "ó": ("o", 2),
    "ǒ": ("o", 3),
    "ò": ("o", 4),
    "ū": ("u", 1),
    "ú": ("u", 2),
    "ǔ": ("u", 3),
    "ù": ("u", 4),
    "ǖ": ("ü", 1),
    "ǘ": ("ü", 2),
    "ǚ": ("ü", 3),
    "ǜ": ("ü", 4),
    "ń": ("n", 2),
    "ň": ("n", 3),
    "ǹ": ("n", 4),
    "ḿ": ("m", 2),
    "ế": ("ê", 2),
    "ề": ("ê", 4),
}

# Tones with no precomposed letter (m̄, ê̄, ê̌) are written with combining marks.
COMBINING_TONES = {
    "\u0304": 1,
    "\u0301": 2,
    "\u030c": 3,
    "\u0300": 4,
}

INITIALS = (
    "zh",
    "ch",
    "sh",
    "b",
    "p",
    "m",
    "f",
    "d",
    "t",
    "n",
    "l",
    "g",
    "k",
    "h",
    "j",
    "q",
    "x",
    "r",
    "z",
    "c",
    "s",
    "y",
    "w",
)

GLIDE_FINALS = {
    "ia",
    "ian",
    "iang",
    "iao",
    "ie",
    "iong",
    "iu",
    "ua",
    "uai",
    "uan",
    "uang",
    "ue",
    "ui",
    "uo",
    "üan",
    "üe",
    "van",
    "ve",
}

PINYIN_LETTERS_RE = re.compile(
    "^[a-zêü" + "".join(TONE_MARKS) + "".join(COMBINING_TONES) + "]+$"
)


def tone_number(syllable: str) -> int:
    """Return the tone number carried by ``syllable`` (``0`` when neutral)."""

    for char in syllable:
        if char in TONE_MARKS:
            return TONE_MARKS[char][1]
        if char in COMBINING_TONES:
            return COMBINING_TONES[char]
    return 0


def strip_tone(syllable: str) -> str:
    """Remove tone marks, keeping ``ü`` and ``ê`` intact."""

    chars: list[str] = []
    for char in syllable:
        if char in TONE_MARKS:
            chars.append(TONE_MARKS[char][0])
        elif char in COMBINING_TONES:
            continue
        else:
            chars.append(char)
    return unicodedata.normalize("NFC", "".join(chars))


def is_pinyin_like(token: str) -> bool:
    """Return whether ``token`` consists only of lowercase pinyin letters."""

    return bool(PINYIN_LETTERS_RE.fullmatch(token))


def _letters(text: str) -> list[str]:
    """Split text into letters, attaching combining marks to their base."""

    letters: list[str] = []
    for char in text:
        if letters and unicodedata.combining(char):
            letters[-1] += char
        else:
            letters.append(char)
    return letters


def split_initial(syllable: str) -> tuple[str, str]:
    """Split ``syllable`` into ``(initial, final)`` by longest initial prefix."""

    for initial in INITIALS:
        if syllable.startswith(initial):
            return initial, syllable[len(initial) :]
    return "", syllable


def split_final(final: str) -> tuple[str, str, str]:
    """Split a final into ``(head, body, tail)``.

    Finals with a glide (``i``/``u``/``ü`` before the nucleus) put the glide in
    ``head``; all other finals have an empty head and start with the nucleus.
    """

    letters = _letters(final)
    if strip_tone(final) in GLIDE_FINALS:
        return letters[0], letters[1], "".join(letters[2:])
    if not letters:
        return "", "", ""
    return "", letters[0], "".join(letters[1:])


def analyze(syllable: str) -> Syllable:
    """Decompose one toned pinyin syllable into its phonetic parts.

    Args:
        syllable: Toned pinyin such as ``guó``; any string is accepted.

    Returns:
        ``Syllable`` with initial, final, tone, first letter and final parts.
    """

    initial, final = split_initial(syllable)
    head, body, tail = split_final(final)
    letters = _letters(syllable)
    return Syllable(
        text=syllable,
        initial=initial,
        final=final,
        tone=tone_number(syllable),
        first=letters[0] if letters else "",
        head=head,
        body=body,
        tail=tail,
    )
