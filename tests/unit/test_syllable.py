"""Unit tests for syllable decomposition."""

from __future__ import annotations

import pytest

from hanzi_pinyin.syllable import analyze, is_pinyin_like, strip_tone, tone_number


@pytest.mark.parametrize(
    ("syllable", "initial", "final"),
    [
        ("zhōng", "zh", "ōng"),
        ("guó", "g", "uó"),
        ("shì", "sh", "ì"),
        ("yǔ", "y", "ǔ"),
        ("wǒ", "w", "ǒ"),
        ("ài", "", "ài"),
        ("ér", "", "ér"),
    ],
)
def test_analyze_splits_initial_and_final(syllable: str, initial: str, final: str) -> None:
    result = analyze(syllable)

    assert result.initial == initial
    assert result.final == final


@pytest.mark.parametrize(
    ("syllable", "head", "body", "tail"),
    [
        ("zhuāng", "u", "ā", "ng"),
        ("xióng", "i", "ó", "ng"),
        ("guó", "u", "ó", ""),
        ("zhōng", "", "ō", "ng"),
        ("hǎo", "", "ǎ", "o"),
        ("lüè", "ü", "è", ""),
        ("shì", "", "ì", ""),
    ],
)
def test_analyze_splits_final_into_head_body_tail(
    syllable: str, head: str, body: str, tail: str
) -> None:
    result = analyze(syllable)

    assert (result.head, result.body, result.tail) == (head, body, tail)


def test_analyze_tone_and_first_letter() -> None:
    assert analyze("zhōng").tone == 1
    assert analyze("guó").tone == 2
    assert analyze("nǐ").tone == 3
    assert analyze("ài").tone == 4
    assert analyze("de").tone == 0
    assert analyze("ài").first == "à"
    assert analyze("Zhang").first == "Z"


def test_combining_tone_marks_are_recognized() -> None:
    syllable = "m\u0304"

    assert tone_number(syllable) == 1
    assert strip_tone(syllable) == "m"
    assert analyze(syllable).first == syllable
    assert analyze("\u00ea\u0304").body == "\u00ea\u0304"


def test_strip_tone_keeps_umlaut() -> None:
    assert strip_tone("lǜ") == "lü"
    assert strip_tone("nǚ rén") == "nü ren"


def test_analyze_never_raises_on_non_pinyin() -> None:
    empty = analyze("")
    assert (empty.initial, empty.final, empty.first, empty.tone) == ("", "", "", 0)

    emoji = analyze("😀")
    assert emoji.initial == ""
    assert emoji.body == "😀"

    latin = analyze("USA")
    assert latin.final == "USA"


def test_is_pinyin_like() -> None:
    assert is_pinyin_like("zhōng")
    assert is_pinyin_like("de")
    assert is_pinyin_like("lǜ")
    assert not is_pinyin_like("USA")
    assert not is_pinyin_like("")
    assert not is_pinyin_like("😀")
