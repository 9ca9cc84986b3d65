"""Top-level orchestration for the staged pinyin conversion pipeline."""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Any

from hanzi_pinyin.chars import logical_length, split_logical, strip_non_chinese
from hanzi_pinyin.dictionary.resolver import PinyinDictionary, default_dictionary
from hanzi_pinyin.models import ConversionOptions, ResultRecord
from hanzi_pinyin.stages.pattern import extract_pattern
from hanzi_pinyin.stages.segment import join_runs, segment_runs
from hanzi_pinyin.stages.shape import apply_non_zh_policy, build_records, shape_tokens
from hanzi_pinyin.stages.tone import format_tone, substitute_v

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = ConversionOptions()


def convert(
    word: Any,
    options: ConversionOptions | None = None,
    *,
    dictionary: PinyinDictionary | None = None,
) -> str | list[str] | list[ResultRecord] | Any:
    """Convert a string containing Chinese characters into pinyin.

    Args:
        word: Text to convert. Non-string values are returned unchanged.
        options: Conversion options; defaults to :class:`ConversionOptions`.
        dictionary: Pronunciation collaborator; defaults to the shared
            pypinyin-backed dictionary.

    Returns:
        A space-joined string for ``type="string"``, a token list for
        ``type="array"``, or one :class:`ResultRecord` per character for
        ``type="all"``. ``pattern="num"`` yields tone digits as a list only
        for ``array`` and as a space-joined string otherwise.
    """

    if not isinstance(word, str):
        return word

    if options is None:
        options = DEFAULT_OPTIONS
    if dictionary is None:
        dictionary = default_dictionary()

    origin_non_zh = options.effective_non_zh
    working = options
    if options.type == "all":
        working = replace(options, non_zh="spaced", remove_non_zh=False)

    text = word
    if working.effective_non_zh == "removed":
        text = strip_non_chinese(word)

    if text == "":
        return [] if options.type in ("array", "all") else ""

    runs = segment_runs(text, dictionary, mode=working.mode, non_zh=working.effective_non_zh)
    original, hanzi = join_runs(runs, working.effective_non_zh)
    logger.debug("Segmented %r into %d runs: %r", text, len(runs), original)

    if options.multiple and logical_length(word) == 1:
        readings = tuple(dictionary.resolve_multiple(word).split())
        if readings:
            original, hanzi = readings, (True,) * len(readings)

    if options.pattern == "num":
        digits = extract_pattern(original, "num")
        return list(digits) if options.type == "array" else " ".join(digits)

    tokens = extract_pattern(original, options.pattern)

    if options.type == "all":
        records = build_records(split_logical(word), tokens, original, options)
        return apply_non_zh_policy(records, origin_non_zh)

    tokens = format_tone(tokens, original, options.tone_type, hanzi)
    tokens = substitute_v(tokens, options.v)
    return shape_tokens(tokens, options.type)


pinyin = convert
