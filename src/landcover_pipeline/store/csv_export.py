"""CSV export of flat rows in sheet column order."""

import csv
from collections.abc import Iterable
from pathlib import Path

from landcover_pipeline.models.record import FlatOutputRecord


def write_csv(records: Iterable[FlatOutputRecord], path: str | Path) -> int:
    """Write header plus one line per record. Returns the number of records written."""
    count = 0
    with Path(path).open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(FlatOutputRecord.columns())
        for record in records:
            writer.writerow(record.to_row())
            count += 1
    return count
