from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from ..models import RideRecord

LOGGER = logging.getLogger(__name__)

MIN_FIELDS = 13
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

SKIP_TOO_FEW_FIELDS = "too_few_fields"
SKIP_INVALID_TIMESTAMP = "invalid_timestamp"
SKIP_UNEXPECTED_ERROR = "unexpected_error"

# strptime accepts 1-6 fractional digits and single-digit months; the feed
# format is fixed-width with exactly three millisecond digits.
_TIMESTAMP_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}", re.ASCII)
# float() also takes digit-group underscores and non-ASCII digits.
_COORDINATE_SHAPE = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII
)

(
    RIDE_ID,
    RIDEABLE_TYPE,
    STARTED_AT,
    ENDED_AT,
    START_STATION_NAME,
    START_STATION_ID,
    END_STATION_NAME,
    END_STATION_ID,
    START_LAT,
    START_LNG,
    END_LAT,
    END_LNG,
    MEMBER_CASUAL,
) = range(MIN_FIELDS)


@dataclass(frozen=True)
class ParseOutcome:
    ride: RideRecord | None
    skip_reason: str | None = None

    @property
    def is_skipped(self) -> bool:
        return self.ride is None


def accepted(ride: RideRecord) -> ParseOutcome:
    return ParseOutcome(ride=ride)


def skipped(reason: str) -> ParseOutcome:
    return ParseOutcome(ride=None, skip_reason=reason)


def parse_timestamp(value: str) -> datetime:
    if not _TIMESTAMP_SHAPE.fullmatch(value):
        raise ValueError(f"Timestamp does not match {TIMESTAMP_FORMAT}: {value!r}")
    return datetime.strptime(value, TIMESTAMP_FORMAT)


def parse_coordinate(value: str) -> float:
    if not _COORDINATE_SHAPE.fullmatch(value):
        return 0.0
    number = float(value)
    if not math.isfinite(number):
        return 0.0
    return number


def parse_row(fields: Sequence[str]) -> ParseOutcome:
    if len(fields) < MIN_FIELDS:
        return skipped(SKIP_TOO_FEW_FIELDS)

    try:
        started_at = parse_timestamp(fields[STARTED_AT])
        ended_at = parse_timestamp(fields[ENDED_AT])
    except ValueError:
        return skipped(SKIP_INVALID_TIMESTAMP)

    try:
        ride = RideRecord(
            ride_id=fields[RIDE_ID],
            rideable_type=fields[RIDEABLE_TYPE],
            started_at=started_at,
            ended_at=ended_at,
            start_station_name=fields[START_STATION_NAME],
            start_station_id=fields[START_STATION_ID],
            end_station_name=fields[END_STATION_NAME],
            end_station_id=fields[END_STATION_ID],
            member_casual=fields[MEMBER_CASUAL],
            start_lat=parse_coordinate(fields[START_LAT]),
            start_lng=parse_coordinate(fields[START_LNG]),
            end_lat=parse_coordinate(fields[END_LAT]),
            end_lng=parse_coordinate(fields[END_LNG]),
        )
    except Exception:
        LOGGER.debug("Unexpected error parsing row %r", fields, exc_info=True)
        return skipped(SKIP_UNEXPECTED_ERROR)
    return accepted(ride)
