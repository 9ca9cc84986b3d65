"""Unit tests for the command-line entrypoint."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from hanzi_pinyin.cli import build_arg_parser, main


def test_parser_defaults() -> None:
    args = build_arg_parser().parse_args(["中国"])

    assert args.text == "中国"
    assert (args.tone_type, args.pattern, args.type) == ("symbol", "pinyin", "string")
    assert (args.mode, args.non_zh) == ("normal", "spaced")
    assert args.custom_dict is None and args.output is None


def test_parser_rejects_unknown_choice() -> None:
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args(["中国", "--pattern", "tone"])


def test_main_prints_string(capsys) -> None:
    assert main(["中国", "--tone-type", "num"]) == 0

    assert capsys.readouterr().out == "zhong1 guo2\n"


def test_main_reads_stdin(capsys, monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("中国\n"))

    assert main([]) == 0
    assert capsys.readouterr().out == "zhōng guó\n"


def test_main_prints_array_as_json(capsys) -> None:
    assert main(["汉语", "--type", "array", "--pattern", "num"]) == 0

    assert json.loads(capsys.readouterr().out) == ["4", "3"]


def test_main_prints_records_as_json(capsys) -> None:
    assert main(["中a", "--type", "all"]) == 0

    records = json.loads(capsys.readouterr().out)
    assert [record["origin"] for record in records] == ["中", "a"]
    assert records[0]["isZh"] is True
    assert records[0]["num"] == 1


def test_main_writes_tsv(tmp_path: Path, capsys) -> None:
    output = tmp_path / "out.tsv"

    assert main(["中国", "--type", "all", "--output", str(output)]) == 0

    assert "Wrote 2 records" in capsys.readouterr().out
    assert len(output.read_text(encoding="utf-8").splitlines()) == 3


def test_main_uses_custom_dictionary(tmp_path: Path, capsys) -> None:
    custom = tmp_path / "custom.tsv"
    custom.write_text("银行\tyín xíng\n", encoding="utf-8")

    assert main(["银行", "--custom-dict", str(custom)]) == 0
    assert capsys.readouterr().out == "yín xíng\n"


def test_main_missing_custom_dictionary(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="Custom dictionary not found"):
        main(["银行", "--custom-dict", str(tmp_path / "absent.tsv")])


def test_main_prints_num_pattern_for_all_as_plain_digits(capsys) -> None:
    assert main(["汉语", "--type", "all", "--pattern", "num"]) == 0

    assert capsys.readouterr().out == "4 3\n"
