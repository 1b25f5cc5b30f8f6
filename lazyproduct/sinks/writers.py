"""Writers that stream generated records to files."""

import csv
import json
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from lazyproduct.core.types import Record


def write_jsonl(records: Iterable[Record], path: str | Path) -> int:
    """
    Write records to a JSONL file, one per line, as they are produced.

    Returns:
        The number of records written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0

    with open(path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(record, default=str, ensure_ascii=False) + "\n")
            count += 1

    logger.info(f"Saved {count} records to {path}")
    return count


def write_csv(records: Iterable[Record], path: str | Path) -> int:
    """
    Write records to a CSV file as they are produced.

    The header is taken from the first record's keys. Nothing but an empty
    file is written when there are no records.

    Returns:
        The number of records written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0

    with open(path, "w", encoding="utf-8", newline="") as f:
        writer: csv.DictWriter | None = None
        for record in records:
            if writer is None:
                writer = csv.DictWriter(f, fieldnames=list(record.keys()))
                writer.writeheader()
            writer.writerow(record)
            count += 1

    if count == 0:
        logger.warning(f"No records to save to {path}")
    else:
        logger.info(f"Saved {count} records to {path}")
    return count
