from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import NamedTuple

from .core import geo


class StationKey(NamedTuple):
    station_id: str
    station_name: str


@dataclass(frozen=True)
class RideRecord:
    ride_id: str
    rideable_type: str
    started_at: datetime
    ended_at: datetime
    start_station_name: str
    start_station_id: str
    end_station_name: str
    end_station_id: str
    member_casual: str
    start_lat: float = 0.0
    start_lng: float = 0.0
    end_lat: float = 0.0
    end_lng: float = 0.0

    @property
    def duration(self) -> timedelta:
        # Out-of-order timestamps give a negative duration; kept as-is.
        return self.ended_at - self.started_at

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / 60

    @property
    def distance_km(self) -> float:
        return geo.distance_km(self.start_lat, self.start_lng, self.end_lat, self.end_lng)

    @property
    def speed_kmh(self) -> float:
        return geo.speed_kmh(self.distance_km, self.duration.total_seconds())

    @property
    def start_station(self) -> StationKey | None:
        return _station_key(self.start_station_id, self.start_station_name)

    @property
    def end_station(self) -> StationKey | None:
        return _station_key(self.end_station_id, self.end_station_name)


def _station_key(station_id: str, station_name: str) -> StationKey | None:
    if not station_id or not station_name:
        return None
    return StationKey(station_id=station_id, station_name=station_name)
