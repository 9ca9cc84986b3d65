"""Unit tests for the custom override dictionary loader."""

from __future__ import annotations

import logging
from pathlib import Path

from hanzi_pinyin.dictionary.custom import CustomDictionaryRepository


def _write(path: Path, text: str) -> Path:
    """Write helper for fixture files in tmp directories."""

    path.write_text(text, encoding="utf-8")
    return path


def test_load_with_header_comments_and_blank_lines(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "custom.tsv",
        "# overrides\n"
        "pinyin\tword\n"
        "\n"
        "háng\t银行\n"
        "yín háng\t银行\n"
        "chóng  qìng\t重庆\n",
    )

    mapping = CustomDictionaryRepository(path).load()

    assert mapping == {"银行": "yín háng", "重庆": "chóng qìng"}


def test_load_plain_two_column_rows(tmp_path: Path) -> None:
    path = _write(tmp_path / "custom.tsv", "长大\tzhǎng dà\n单\n")

    assert CustomDictionaryRepository(path).load() == {"长大": "zhǎng dà"}


def test_load_skips_length_mismatch_with_warning(tmp_path: Path, caplog) -> None:
    path = _write(tmp_path / "custom.tsv", "word\tpinyin\n银行\tyínháng\n")

    with caplog.at_level(logging.WARNING, logger="hanzi_pinyin.dictionary.custom"):
        mapping = CustomDictionaryRepository(path).load()

    assert mapping == {}
    assert "Skipping custom entry" in caplog.text


def test_load_missing_file_returns_empty(tmp_path: Path) -> None:
    assert CustomDictionaryRepository(tmp_path / "absent.tsv").load() == {}
