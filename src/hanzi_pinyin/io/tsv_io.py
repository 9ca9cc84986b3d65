"""TSV write helpers for structured ``all`` conversion results."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from hanzi_pinyin.models import ResultRecord

TSV_HEADER = [
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


def write_tsv(
    records: Sequence[ResultRecord],
    output_path: Path,
    include_header: bool = True,
) -> None:
    """Write result records to a TSV file using the canonical column order.

    Args:
        records: Records returned by ``convert(..., type="all")``.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for record in records:
            values = record.to_dict()
            handle.write(
                "\t".join(
                    str(values[column]).lower() if column == "isZh" else str(values[column])
                    for column in TSV_HEADER
                )
            )
            handle.write("\n")
