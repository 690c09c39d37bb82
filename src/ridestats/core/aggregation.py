from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from ..models import RideRecord, StationKey
from .seasons import season_for_month


@dataclass
class StationAggregate:
    key: StationKey
    latitude: float
    longitude: float
    departures: int = 0
    arrivals: int = 0

    @property
    def station_id(self) -> str:
        return self.key.station_id

    @property
    def station_name(self) -> str:
        return self.key.station_name

    @property
    def balance(self) -> int:
        return self.arrivals - self.departures

    @property
    def total_traffic(self) -> int:
        return self.departures + self.arrivals


@dataclass
class SeasonAggregate:
    season: str
    ride_count: int = 0
    total_duration_minutes: float = 0.0
    total_distance_km: float = 0.0

    @property
    def average_duration_minutes(self) -> float:
        if self.ride_count == 0:
            return 0.0
        return self.total_duration_minutes / self.ride_count

    @property
    def average_distance_km(self) -> float:
        if self.ride_count == 0:
            return 0.0
        return self.total_distance_km / self.ride_count


@dataclass(frozen=True)
class RideDataset:
    rides: tuple[RideRecord, ...] = ()
    stations: tuple[StationAggregate, ...] = ()
    seasons: tuple[SeasonAggregate, ...] = ()
    skipped_rows: int = 0
    skip_reasons: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    file_count: int = 0


class RideAggregator:
    """Folds ride records into station and season aggregates in one pass."""

    def __init__(self) -> None:
        self._rides: list[RideRecord] = []
        self._stations: dict[StationKey, StationAggregate] = {}
        self._seasons: dict[str, SeasonAggregate] = {}

    def add(self, ride: RideRecord) -> None:
        self._rides.append(ride)
        self._fold_stations(ride)
        self._fold_season(ride)

    def extend(self, rides: Iterable[RideRecord]) -> None:
        for ride in rides:
            self.add(ride)

    def snapshot(
        self,
        skipped_rows: int = 0,
        skip_reasons: Mapping[str, int] | None = None,
    ) -> RideDataset:
        return RideDataset(
            rides=tuple(self._rides),
            stations=tuple(replace(station) for station in self._stations.values()),
            seasons=tuple(replace(season) for season in self._seasons.values()),
            skipped_rows=skipped_rows,
            skip_reasons=MappingProxyType(dict(skip_reasons or {})),
        )

    def _fold_stations(self, ride: RideRecord) -> None:
        start = ride.start_station
        if start is not None:
            self._station(start, ride.start_lat, ride.start_lng).departures += 1

        end = ride.end_station
        if end is not None:
            self._station(end, ride.end_lat, ride.end_lng).arrivals += 1

    def _station(
        self, key: StationKey, latitude: float, longitude: float
    ) -> StationAggregate:
        # First observed coordinates stick for the lifetime of the key.
        station = self._stations.get(key)
        if station is None:
            station = StationAggregate(key=key, latitude=latitude, longitude=longitude)
            self._stations[key] = station
        return station

    def _fold_season(self, ride: RideRecord) -> None:
        label = season_for_month(ride.started_at.month)
        season = self._seasons.setdefault(label, SeasonAggregate(season=label))
        season.ride_count += 1
        season.total_duration_minutes += ride.duration_minutes
        season.total_distance_km += ride.distance_km
