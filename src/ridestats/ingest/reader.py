from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

LOGGER = logging.getLogger(__name__)

DELIMITER = ","


class DataSourceError(RuntimeError):
    """Raised when the ride files cannot be located or read."""


def discover_csv_files(directory: Path, pattern: str = "*.csv") -> list[Path]:
    if not directory.exists() or not directory.is_dir():
        raise DataSourceError(
            f"Ride data folder not found or not a directory: {directory}"
        )
    paths = sorted(path for path in directory.rglob(pattern) if path.is_file())
    LOGGER.info("Found %d CSV files under %s", len(paths), directory)
    return paths


def read_rows(path: Path) -> Iterator[list[str]]:
    """Yield the data rows of one file, each split on the delimiter.

    Whitespace-only lines are ignored and the first remaining line is the
    header. There is no quoting support. Undecodable bytes are replaced
    with U+FFFD so one bad byte only affects its own row.
    """
    try:
        with path.open(
            "r", encoding="utf-8-sig", errors="replace", newline=""
        ) as handle:
            header_seen = False
            for line in handle:
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                if not header_seen:
                    header_seen = True
                    continue
                yield line.split(DELIMITER)
    except OSError as exc:
        raise DataSourceError(f"Unable to read ride file {path}: {exc}") from exc


def iter_rows(paths: Iterable[Path]) -> Iterator[list[str]]:
    for path in paths:
        LOGGER.debug("Reading %s", path)
        yield from read_rows(path)
