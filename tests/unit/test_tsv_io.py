"""Unit tests for TSV serialization helpers."""

from __future__ import annotations

from pathlib import Path

from hanzi_pinyin.io.tsv_io import TSV_HEADER, write_tsv
from hanzi_pinyin.models import ResultRecord


def test_write_tsv_uses_public_column_order(tmp_path: Path) -> None:
    output = tmp_path / "out.tsv"
    records = [
        ResultRecord(
            origin="光",
            pinyin="guāng",
            initial="g",
            final="uāng",
            first="g",
            final_head="u",
            final_body="ā",
            final_tail="ng",
            num=1,
            is_zh=True,
        ),
        ResultRecord(origin="a", pinyin="a", final="a", first="a", final_body="a"),
    ]

    write_tsv(records, output_path=output, include_header=True)
    lines = output.read_text(encoding="utf-8").splitlines()

    assert TSV_HEADER == [
        "origin",
        "pinyin",
        "initial",
        "final",
        "first",
        "finalHead",
        "finalBody",
        "finalTail",
        "num",
        "isZh",
    ]
    assert lines[0].split("\t") == TSV_HEADER
    assert lines[1].split("\t") == ["光", "guāng", "g", "uāng", "g", "u", "ā", "ng", "1", "true"]
    assert lines[2].split("\t") == ["a", "a", "", "a", "a", "", "a", "", "0", "false"]


def test_write_tsv_without_header(tmp_path: Path) -> None:
    output = tmp_path / "out.tsv"

    write_tsv([ResultRecord(origin="中", pinyin="zhōng", num=1, is_zh=True)], output, include_header=False)

    assert output.read_text(encoding="utf-8").splitlines()[0].startswith("中\tzhōng\t")
