"""Pronunciation dictionary contract and its pypinyin-backed implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property, lru_cache
import logging
from typing import Iterator, Mapping, Protocol

from pypinyin import Style, lazy_pinyin
from pypinyin import pinyin as pypinyin_readings

from hanzi_pinyin.chars import is_chinese
from hanzi_pinyin.dictionary.surnames import SURNAME_PINYIN
from hanzi_pinyin.models import Mode, NonZh

logger = logging.getLogger(__name__)


class PinyinDictionary(Protocol):
    """Collaborator contract consumed by the conversion pipeline."""

    def resolve_tokens(
        self,
        text: str,
        logical_length: int,
        *,
        mode: Mode,
        non_zh: NonZh,
        use_custom_dictionary: bool,
    ) -> tuple[str, ...]:
        """Return one token per Chinese character plus non-Chinese tokens per policy."""

    def resolve_run(
        self,
        text: str,
        logical_length: int,
        *,
        mode: Mode,
        non_zh: NonZh,
        use_custom_dictionary: bool,
    ) -> str:
        """Return space-joined tokens, one syllable per Chinese character."""

    def resolve_multiple(self, char: str) -> str:
        """Return every known reading of ``char``, space-joined."""

    def custom_dictionary_active(self) -> bool:
        """Report whether user overrides are registered."""


def iter_script_spans(text: str) -> Iterator[tuple[bool, str]]:
    """Yield ``(is_chinese, span)`` for maximal same-script stretches."""

    start = 0
    for idx in range(1, len(text) + 1):
        if idx == len(text) or is_chinese(text[idx]) != is_chinese(text[start]):
            yield is_chinese(text[start]), text[start:idx]
            start = idx


def non_chinese_tokens(span: str, non_zh: NonZh) -> list[str]:
    """Render a non-Chinese stretch according to the spacing policy.

    ``spaced`` keeps every character, whitespace included, as its own token.
    ``consecutive`` keeps the stretch as one token with outer whitespace
    trimmed. ``removed`` drops it.
    """

    if non_zh == "removed":
        return []
    if non_zh == "consecutive":
        trimmed = span.strip()
        return [trimmed] if trimmed else []
    return list(span)


def forward_max_match(
    text: str,
    table: Mapping[str, tuple[str, ...]],
    max_len: int,
) -> Iterator[tuple[str, tuple[str, ...] | None]]:
    """Segment ``text`` by forward maximum matching against ``table``.

    Yields ``(segment, syllables)`` where ``syllables`` is ``None`` for
    stretches without a table entry.
    """

    i = 0
    pending_start = 0
    n = len(text)
    while i < n:
        matched = None
        for length in range(min(max_len, n - i), 0, -1):
            candidate = text[i : i + length]
            if candidate in table:
                matched = candidate
                break
        if matched is None:
            i += 1
            continue
        if pending_start != i:
            yield text[pending_start:i], None
        yield matched, table[matched]
        i += len(matched)
        pending_start = i
    if pending_start != n:
        yield text[pending_start:], None


@dataclass(frozen=True)
class PypinyinDictionary:
    """Read-only dictionary resolving Hanzi through ``pypinyin``.

    Chinese stretches are resolved phrase-aware by ``pypinyin.lazy_pinyin``.
    Surname readings take over in ``surname`` mode and user overrides take
    precedence over both when enabled. Indexes derived from the override and
    surname tables are built once per instance.

    Attributes:
        custom: Word -> space-joined toned pinyin overrides.
        surnames: Surname -> space-joined toned pinyin readings.
    """

    custom: Mapping[str, str] = field(default_factory=dict)
    surnames: Mapping[str, str] = field(default_factory=lambda: dict(SURNAME_PINYIN))

    @cached_property
    def custom_syllables(self) -> dict[str, tuple[str, ...]]:
        """Build word -> syllable tuple lookup for custom overrides."""

        return {word: tuple(value.split()) for word, value in self.custom.items() if word}

    @cached_property
    def surname_syllables(self) -> dict[str, tuple[str, ...]]:
        """Build surname -> syllable tuple lookup."""

        return {word: tuple(value.split()) for word, value in self.surnames.items() if word}

    def custom_dictionary_active(self) -> bool:
        return bool(self.custom_syllables)

    def _lookup_hanzi(self, text: str) -> list[str]:
        return lazy_pinyin(text, style=Style.TONE, errors=lambda chars: list(chars))

    def _resolve_hanzi(self, text: str, mode: Mode, use_custom_dictionary: bool) -> list[str]:
        """Resolve a Chinese-only stretch with custom > surname > pypinyin priority."""

        tables: list[dict[str, tuple[str, ...]]] = []
        if use_custom_dictionary:
            tables.append(self.custom_syllables)
        if mode == "surname":
            tables.append(self.surname_syllables)

        def resolve(segment: str, remaining: list[dict[str, tuple[str, ...]]]) -> list[str]:
            if not remaining:
                return self._lookup_hanzi(segment)
            table, rest = remaining[0], remaining[1:]
            max_len = max((len(word) for word in table), default=0)
            syllables: list[str] = []
            for part, matched in forward_max_match(segment, table, max_len):
                if matched is None:
                    syllables.extend(resolve(part, rest))
                else:
                    syllables.extend(matched)
            return syllables

        return resolve(text, tables)

    def resolve_tokens(
        self,
        text: str,
        logical_length: int,
        *,
        mode: Mode = "normal",
        non_zh: NonZh = "spaced",
        use_custom_dictionary: bool = False,
    ) -> tuple[str, ...]:
        """Resolve a run of text into ordered tokens.

        Args:
            text: Run text without astral characters.
            logical_length: Number of logical characters in ``text``.
            mode: ``surname`` prefers surname readings.
            non_zh: Spacing policy for non-Chinese stretches.
            use_custom_dictionary: Whether custom overrides apply.

        Returns:
            Syllables and non-Chinese tokens in input order.
        """

        tokens: list[str] = []
        for chinese, span in iter_script_spans(text):
            if chinese:
                tokens.extend(self._resolve_hanzi(span, mode, use_custom_dictionary))
            else:
                tokens.extend(non_chinese_tokens(span, non_zh))
        if non_zh == "spaced" and len(tokens) != logical_length:
            logger.debug(
                "Run %r resolved to %d tokens for %d characters", text, len(tokens), logical_length
            )
        return tuple(tokens)

    def resolve_run(
        self,
        text: str,
        logical_length: int,
        *,
        mode: Mode = "normal",
        non_zh: NonZh = "spaced",
        use_custom_dictionary: bool = False,
    ) -> str:
        """Space-joined form of :meth:`resolve_tokens`."""

        return " ".join(
            self.resolve_tokens(
                text,
                logical_length,
                mode=mode,
                non_zh=non_zh,
                use_custom_dictionary=use_custom_dictionary,
            )
        )

    def resolve_multiple(self, char: str) -> str:
        """Return all readings for one character, custom entry first."""

        readings: list[str] = []
        custom = self.custom_syllables.get(char)
        if custom:
            readings.extend(custom)
        for group in pypinyin_readings(char, style=Style.TONE, heteronym=True):
            for reading in group:
                if reading not in readings:
                    readings.append(reading)
        return " ".join(readings)


@lru_cache(maxsize=None)
def default_dictionary() -> PypinyinDictionary:
    """Return the process-wide default dictionary, built on first use."""

    return PypinyinDictionary()
