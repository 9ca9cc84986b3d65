"""Stage 1: Split input text into ordered runs and resolve their tokens."""

from __future__ import annotations

import logging
from typing import Sequence

from hanzi_pinyin.chars import is_chinese, split_logical, surrogate_width
from hanzi_pinyin.dictionary.resolver import (
    PinyinDictionary,
    iter_script_spans,
    non_chinese_tokens,
)
from hanzi_pinyin.models import Mode, NonZh, Run
from hanzi_pinyin.syllable import is_pinyin_like

logger = logging.getLogger(__name__)


def _hanzi_flags(text: str, non_zh: NonZh) -> tuple[bool, ...]:
    """Return the expected per-token Hanzi flags for a resolved run."""

    flags: list[bool] = []
    for chinese, span in iter_script_spans(text):
        if chinese:
            flags.extend([True] * len(span))
        else:
            flags.extend([False] * len(non_chinese_tokens(span, non_zh)))
    return tuple(flags)


def _visible_non_zh(char: str) -> bool:
    return not is_chinese(char) and not char.isspace()


def _resolve_span(
    text: str,
    dictionary: PinyinDictionary,
    mode: Mode,
    non_zh: NonZh,
) -> Run:
    """Resolve one ordinary span and tag its boundary classification.

    Args:
        text: Non-empty span without surrogate-pair characters.
        dictionary: Collaborator resolving the span into tokens.
        mode: Lookup mode forwarded to the dictionary.
        non_zh: Spacing policy forwarded to the dictionary.

    Returns:
        Run carrying the resolved tokens and leading/trailing flags.
    """

    chars = split_logical(text)
    tokens = tuple(
        dictionary.resolve_tokens(
            text,
            len(chars),
            mode=mode,
            non_zh=non_zh,
            use_custom_dictionary=dictionary.custom_dictionary_active(),
        )
    )
    hanzi = _hanzi_flags(text, non_zh)
    if len(hanzi) != len(tokens):
        logger.debug(
            "Run %r resolved to %d tokens, expected %d; classifying tokens by shape",
            text,
            len(tokens),
            len(hanzi),
        )
        hanzi = tuple(is_pinyin_like(token) for token in tokens)

    kind = "chinese" if any(is_chinese(char) for char in chars) else "non_chinese"
    logger.debug("Resolved %s run %r -> %r", kind, text, tokens)
    return Run(
        kind=kind,
        text=text,
        tokens=tokens,
        hanzi=hanzi,
        leading_non_zh=_visible_non_zh(chars[0]),
        trailing_non_zh=_visible_non_zh(chars[-1]),
    )


def segment_runs(
    text: str,
    dictionary: PinyinDictionary,
    *,
    mode: Mode = "normal",
    non_zh: NonZh = "spaced",
) -> tuple[Run, ...]:
    """Partition ``text`` into ordered, non-overlapping runs.

    Surrogate-pair characters (astral code points) become their own runs and
    are kept verbatim; every stretch between them is resolved through the
    dictionary as one ordinary run. Empty stretches never produce a run.

    Args:
        text: Input text.
        dictionary: Collaborator resolving ordinary runs.
        mode: Lookup mode forwarded to the dictionary.
        non_zh: Spacing policy forwarded to the dictionary.

    Returns:
        Runs whose texts concatenate back to ``text``.
    """

    runs: list[Run] = []
    last_index = 0
    i = 0
    while i < len(text):
        width = surrogate_width(text, i)
        if not width:
            i += 1
            continue
        if last_index != i:
            runs.append(_resolve_span(text[last_index:i], dictionary, mode, non_zh))
        pair = text[i : i + width]
        runs.append(
            Run(
                kind="surrogate_pair",
                text=pair,
                tokens=(pair,),
                hanzi=(False,),
                leading_non_zh=True,
                trailing_non_zh=True,
            )
        )
        i += width
        last_index = i

    if last_index != i:
        runs.append(_resolve_span(text[last_index:i], dictionary, mode, non_zh))
    return tuple(runs)


def join_runs(runs: Sequence[Run], non_zh: NonZh) -> tuple[tuple[str, ...], tuple[bool, ...]]:
    """Concatenate resolved runs into one token stream.

    With ``consecutive`` the last token of a run and the first token of the
    next are fused when the previous run ends with visible non-Chinese text
    and the current one starts with it. Whitespace at the boundary, or a run
    that resolved to nothing but whitespace, keeps them apart. Every other
    policy keeps all tokens separate.

    Returns:
        Tokens and their per-token Hanzi flags.
    """

    tokens: list[str] = []
    hanzi: list[bool] = []
    if non_zh != "consecutive":
        for run in runs:
            tokens.extend(run.tokens)
            hanzi.extend(run.hanzi)
        return tuple(tokens), tuple(hanzi)

    prev: Run | None = None
    gap = False
    for run in runs:
        if not run.tokens:
            gap = gap or any(char.isspace() for char in run.text)
            continue
        current_non_zh = run.kind == "surrogate_pair" or run.leading_non_zh
        prev_non_zh = prev is not None and (prev.kind == "surrogate_pair" or prev.trailing_non_zh)
        if current_non_zh and prev_non_zh and not gap:
            tokens[-1] += run.tokens[0]
            hanzi[-1] = False
            tokens.extend(run.tokens[1:])
            hanzi.extend(run.hanzi[1:])
        else:
            tokens.extend(run.tokens)
            hanzi.extend(run.hanzi)
        prev = run
        gap = False
    return tuple(tokens), tuple(hanzi)
