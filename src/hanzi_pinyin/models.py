"""Data models shared by the conversion pipeline stages.

This module defines the immutable value contracts passed between stages so each
stage has a narrow, testable interface: the caller-facing options, the runs the
segmenter produces, the analyzed syllable, and the structured ``all`` record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
import warnings

from hanzi_pinyin.validation import validate_options

ToneType = Literal["symbol", "num", "none"]
Pattern = Literal[
    "pinyin",
    "initial",
    "final",
    "num",
    "first",
    "finalHead",
    "finalBody",
    "finalTail",
]
Mode = Literal["normal", "surname"]
NonZh = Literal["spaced", "consecutive", "removed"]
OutputType = Literal["string", "array", "all"]
RunKind = Literal["chinese", "surrogate_pair", "non_chinese"]


@dataclass(frozen=True)
class ConversionOptions:
    """Caller configuration for one :func:`hanzi_pinyin.convert` call.

    Every field holds exactly one active value; unset fields fall back to the
    defaults below. Values are validated once on construction, so stages can
    trust them without re-checking.

    Attributes:
        tone_type: Tone notation (``symbol``, ``num`` or ``none``).
        pattern: Phonetic facet to emit for each syllable.
        multiple: Return every reading when the input is a single character.
        mode: ``surname`` prefers surname readings for ambiguous characters.
        non_zh: Spacing policy for non-Chinese text.
        remove_non_zh: Deprecated alias that forces ``non_zh="removed"``.
        v: Replace ``ü`` with ``v`` in the final output.
        type: Result shape (``string``, ``array`` or ``all``).
    """

    tone_type: ToneType = "symbol"
    pattern: Pattern = "pinyin"
    multiple: bool = False
    mode: Mode = "normal"
    non_zh: NonZh = "spaced"
    remove_non_zh: bool = False
    v: bool = False
    type: OutputType = "string"

    def __post_init__(self) -> None:
        validate_options(self)
        if self.remove_non_zh:
            warnings.warn(
                "remove_non_zh is deprecated; use non_zh='removed' instead",
                category=DeprecationWarning,
                stacklevel=3,
            )

    @property
    def effective_non_zh(self) -> NonZh:
        """Return the non-Chinese policy the caller actually asked for."""

        return "removed" if self.remove_non_zh else self.non_zh


@dataclass(frozen=True)
class Run:
    """One maximal span of input text produced by the run segmenter.

    Ordinary spans are resolved through the dictionary and keep the resolved
    tokens; surrogate-pair spans carry the astral character verbatim and
    always count as non-Chinese on both edges.

    Attributes:
        kind: Run classification.
        text: Source text covered by the run.
        tokens: Resolved tokens in input order.
        hanzi: Per-token flag, true where the token was resolved from a
            Chinese character.
        leading_non_zh: Run starts with a visible non-Chinese character.
        trailing_non_zh: Run ends with a visible non-Chinese character.
    """

    kind: RunKind
    text: str
    tokens: tuple[str, ...]
    hanzi: tuple[bool, ...]
    leading_non_zh: bool
    trailing_non_zh: bool

    @property
    def pinyin(self) -> str:
        return " ".join(self.tokens)


@dataclass(frozen=True)
class Syllable:
    """A toned pinyin token decomposed into its phonetic parts."""

    text: str
    initial: str
    final: str
    tone: int
    first: str
    head: str
    body: str
    tail: str


@dataclass(frozen=True)
class ResultRecord:
    """Per-character record returned for ``type="all"``.

    Non-Chinese characters populate only ``origin``; every phonetic field is
    empty, ``num`` is zero and ``is_zh`` is false.
    """

    origin: str
    pinyin: str = ""
    initial: str = ""
    final: str = ""
    first: str = ""
    final_head: str = ""
    final_body: str = ""
    final_tail: str = ""
    num: int = 0
    is_zh: bool = False

    def to_dict(self) -> dict[str, str | int | bool]:
        """Return the record keyed by its public camelCase field names."""

        return {
            "origin": self.origin,
            "pinyin": self.pinyin,
            "initial": self.initial,
            "final": self.final,
            "first": self.first,
            "finalHead": self.final_head,
            "finalBody": self.final_body,
            "finalTail": self.final_tail,
            "num": self.num,
            "isZh": self.is_zh,
        }
