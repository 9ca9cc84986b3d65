"""Repository for user-supplied pronunciation overrides."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import unicodedata

from hanzi_pinyin.chars import logical_length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CustomDictionaryRepository:
    """Lookup repository for word-level pinyin overrides.

    Each record maps a Hanzi word to a space-joined toned pinyin string with
    exactly one syllable per character.
    """

    path: Path

    def load(self) -> dict[str, str]:
        """Load override rows from a TSV file.

        The parser accepts either a header row with columns ``word`` and
        ``pinyin`` or plain two-column rows in that order. Blank lines and
        ``#`` comments are ignored, and rows whose syllable count differs from
        the word length are skipped.

        Returns:
            Mapping of word to normalized pinyin; empty when the file is absent.
        """

        if not self.path.exists():
            return {}

        with self.path.open("r", encoding="utf-8") as handle:
            raw_lines = [line.rstrip("\n") for line in handle]

        lines = [line for line in raw_lines if line.strip() and not line.lstrip().startswith("#")]
        if not lines:
            return {}

        header_cells = [cell.strip() for cell in lines[0].split("\t")]
        if {"word", "pinyin"}.issubset(set(header_cells)):
            idx_word = header_cells.index("word")
            idx_pinyin = header_cells.index("pinyin")
            data_lines = lines[1:]
        else:
            idx_word = 0
            idx_pinyin = 1
            data_lines = lines

        mapping: dict[str, str] = {}
        for line in data_lines:
            cells = [cell.strip() for cell in line.split("\t")]
            if len(cells) <= max(idx_word, idx_pinyin):
                continue
            word = unicodedata.normalize("NFC", cells[idx_word])
            pinyin = " ".join(unicodedata.normalize("NFC", cells[idx_pinyin]).split())
            if not word or not pinyin:
                continue
            if len(pinyin.split()) != logical_length(word):
                logger.warning(
                    "Skipping custom entry %r: %d syllables for %d characters",
                    word,
                    len(pinyin.split()),
                    logical_length(word),
                )
                continue
            mapping[word] = pinyin

        return mapping
