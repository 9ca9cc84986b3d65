"""CLI entrypoint for converting Chinese text to pinyin."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Sequence

from hanzi_pinyin.dictionary.custom import CustomDictionaryRepository
from hanzi_pinyin.dictionary.resolver import PypinyinDictionary, default_dictionary
from hanzi_pinyin.io.tsv_io import write_tsv
from hanzi_pinyin.models import ConversionOptions
from hanzi_pinyin.pipeline import convert
from hanzi_pinyin.validation import (
    VALID_MODES,
    VALID_NON_ZH,
    VALID_PATTERNS,
    VALID_TONE_TYPES,
    VALID_TYPES,
)


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the conversion command.
    """

    parser = argparse.ArgumentParser(description="Convert Chinese text to pinyin.")
    parser.add_argument("text", nargs="?", help="Input text. If omitted, read from stdin.")
    parser.add_argument(
        "--tone-type",
        choices=sorted(VALID_TONE_TYPES),
        default="symbol",
        help="Tone notation (default: symbol).",
    )
    parser.add_argument(
        "--pattern",
        choices=sorted(VALID_PATTERNS),
        default="pinyin",
        help="Phonetic facet to output (default: pinyin).",
    )
    parser.add_argument(
        "--type",
        choices=sorted(VALID_TYPES),
        default="string",
        help="Result shape (default: string).",
    )
    parser.add_argument(
        "--mode",
        choices=sorted(VALID_MODES),
        default="normal",
        help="Lookup mode; surname prefers surname readings.",
    )
    parser.add_argument(
        "--non-zh",
        choices=sorted(VALID_NON_ZH),
        default="spaced",
        help="Spacing policy for non-Chinese text (default: spaced).",
    )
    parser.add_argument(
        "--multiple",
        action="store_true",
        help="List every reading when the input is a single character.",
    )
    parser.add_argument("--v", action="store_true", help="Write ü as v.")
    parser.add_argument(
        "--custom-dict",
        type=Path,
        default=None,
        help="TSV file of word<TAB>pinyin overrides.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write --type all records to this TSV path instead of stdout.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log pipeline details to stderr.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments to printed or written output.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    text = args.text
    if text is None:
        text = sys.stdin.read().rstrip("\n")

    if args.custom_dict is not None:
        if not args.custom_dict.exists():
            raise SystemExit(f"Custom dictionary not found: {args.custom_dict}")
        dictionary = PypinyinDictionary(custom=CustomDictionaryRepository(args.custom_dict).load())
    else:
        dictionary = default_dictionary()

    options = ConversionOptions(
        tone_type=args.tone_type,
        pattern=args.pattern,
        multiple=args.multiple,
        mode=args.mode,
        non_zh=args.non_zh,
        v=args.v,
        type=args.type,
    )
    result = convert(text, options, dictionary=dictionary)

    if isinstance(result, str):
        print(result)
    elif args.type == "all" and args.output is not None:
        write_tsv(result, output_path=args.output)
        print(f"Wrote {len(result)} records to {args.output}")
    elif args.type == "all":
        print(json.dumps([record.to_dict() for record in result], ensure_ascii=False, indent=2))
    else:
        print(json.dumps(result, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
