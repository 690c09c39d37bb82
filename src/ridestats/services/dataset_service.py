from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import replace
from pathlib import Path

from ..core.aggregation import RideAggregator, RideDataset
from ..ingest.parser import parse_row
from ..ingest.reader import discover_csv_files, iter_rows

LOGGER = logging.getLogger(__name__)


def build_dataset(rows: Iterable[Sequence[str]]) -> RideDataset:
    aggregator = RideAggregator()
    skip_reasons: Counter[str] = Counter()

    for fields in rows:
        outcome = parse_row(fields)
        if outcome.ride is None:
            skip_reasons[outcome.skip_reason or "unknown"] += 1
            continue
        aggregator.add(outcome.ride)

    skipped_rows = sum(skip_reasons.values())
    dataset = aggregator.snapshot(skipped_rows=skipped_rows, skip_reasons=skip_reasons)
    LOGGER.info(
        "Loaded %d rides, %d stations, skipped %d rows",
        len(dataset.rides),
        len(dataset.stations),
        skipped_rows,
    )
    if skipped_rows:
        LOGGER.debug("Skipped rows by reason: %s", dict(skip_reasons))
    return dataset


def load_dataset(directory: Path, pattern: str = "*.csv") -> RideDataset:
    paths = discover_csv_files(directory, pattern)
    if not paths:
        LOGGER.warning("No CSV files matching %s found in %s", pattern, directory)
        return RideDataset()
    return replace(build_dataset(iter_rows(paths)), file_count=len(paths))
