"""Stage 4: Shape converted tokens into the caller's requested result type."""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Sequence

from hanzi_pinyin.chars import is_chinese
from hanzi_pinyin.models import ConversionOptions, NonZh, OutputType, ResultRecord
from hanzi_pinyin.stages.tone import format_tone, substitute_v
from hanzi_pinyin.syllable import analyze, tone_number

logger = logging.getLogger(__name__)


def shape_tokens(tokens: Sequence[str], output_type: OutputType) -> str | list[str]:
    """Return tokens as a list for ``array``/``all``, else joined by spaces."""

    if output_type in ("array", "all"):
        return list(tokens)
    return " ".join(tokens)


def _finish(value: str, original: str, options: ConversionOptions) -> str:
    """Apply tone notation and v substitution to one record field."""

    if not value:
        return value
    toned = format_tone((value,), (original,), options.tone_type)
    return substitute_v(toned, options.v)[0]


def _record(origin: str, token: str, original: str, options: ConversionOptions) -> ResultRecord:
    """Build the record for one logical character.

    Args:
        origin: Source character.
        token: Aligned (possibly pattern-extracted) token.
        original: Aligned full toned syllable before pattern extraction.
        options: Caller options controlling tone and v rendering.

    Returns:
        Populated record for Chinese characters, empty record otherwise.
    """

    if not is_chinese(origin):
        return ResultRecord(origin=origin)

    syllable = analyze(token)
    return ResultRecord(
        origin=origin,
        pinyin=_finish(token, original, options),
        initial=_finish(syllable.initial, original, options),
        final=_finish(syllable.final, original, options),
        first=_finish(syllable.first, original, options),
        final_head=_finish(syllable.head, original, options),
        final_body=_finish(syllable.body, original, options),
        final_tail=_finish(syllable.tail, original, options),
        num=tone_number(original),
        is_zh=original != origin,
    )


def build_records(
    origins: Sequence[str],
    tokens: Sequence[str],
    original: Sequence[str],
    options: ConversionOptions,
) -> list[ResultRecord]:
    """Zip logical characters with their tokens by position into records.

    When the dictionary returned fewer tokens than characters, the missing
    positions fall back to the character itself and so become non-Chinese
    records; surplus tokens are ignored.
    """

    if len(tokens) != len(origins):
        logger.warning(
            "Token count %d does not match character count %d; aligning by position",
            len(tokens),
            len(origins),
        )

    records: list[ResultRecord] = []
    for idx, origin in enumerate(origins):
        token = tokens[idx] if idx < len(tokens) else origin
        source = original[idx] if idx < len(original) else origin
        records.append(_record(origin, token, source, options))
    return records


def apply_non_zh_policy(records: Sequence[ResultRecord], non_zh: NonZh) -> list[ResultRecord]:
    """Re-apply the caller's non-Chinese policy to a record list.

    ``removed`` drops non-Chinese records, ``consecutive`` merges each group of
    adjacent non-Chinese records into its first record, ``spaced`` keeps all.
    """

    if non_zh == "removed":
        return [record for record in records if record.is_zh]
    if non_zh != "consecutive":
        return list(records)

    result: list[ResultRecord] = []
    for idx, record in enumerate(records):
        if not record.is_zh and idx > 0 and not records[idx - 1].is_zh:
            result[-1] = replace(result[-1], origin=result[-1].origin + record.origin)
        else:
            result.append(record)
    return result
