from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from ..models import RideRecord
from .aggregation import SeasonAggregate, StationAggregate

MIN_STATION_TRAFFIC = 10
DEFICIT_LIMIT = 10
MIN_USER_RIDES = 10
TOP_ROUTES = 5


@dataclass(frozen=True)
class SeasonSummary:
    season: str
    ride_count: int
    average_duration_minutes: float
    average_distance_km: float


@dataclass(frozen=True)
class StationDeficit:
    station_name: str
    station_id: str
    departures: int
    arrivals: int
    balance: int


@dataclass(frozen=True)
class UserSpeedSummary:
    user_type: str
    ride_count: int
    total_speed_kmh: float
    speeds: tuple[float, ...]

    @property
    def average_speed_kmh(self) -> float:
        if self.ride_count == 0:
            return 0.0
        return round(self.total_speed_kmh / self.ride_count, 2)


@dataclass(frozen=True)
class RouteSummary:
    duration: timedelta
    distance_km: float
    start_station_name: str
    end_station_name: str
    started_on: date
    ended_on: date
    speed_kmh: float


@dataclass(frozen=True)
class LongestRoutes:
    by_duration: list[RouteSummary]
    by_distance: list[RouteSummary]


def seasonal_report(seasons: Iterable[SeasonAggregate]) -> list[SeasonSummary]:
    # Ordered by label text, which is not calendar order.
    active = sorted(
        (season for season in seasons if season.ride_count > 0),
        key=lambda season: season.season,
    )
    return [
        SeasonSummary(
            season=season.season,
            ride_count=season.ride_count,
            average_duration_minutes=round(season.average_duration_minutes, 2),
            average_distance_km=round(season.average_distance_km, 2),
        )
        for season in active
    ]


def station_deficit_report(
    stations: Iterable[StationAggregate],
    min_traffic: int = MIN_STATION_TRAFFIC,
    limit: int = DEFICIT_LIMIT,
) -> list[StationDeficit]:
    significant = [
        station for station in stations if station.total_traffic >= min_traffic
    ]
    ranked = sorted(significant, key=lambda station: station.balance)[:limit]
    return [
        StationDeficit(
            station_name=station.station_name,
            station_id=station.station_id,
            departures=station.departures,
            arrivals=station.arrivals,
            balance=station.balance,
        )
        for station in ranked
    ]


def group_speeds(rides: Iterable[RideRecord]) -> dict[str, list[float]]:
    grouped: dict[str, list[float]] = {}
    for ride in rides:
        grouped.setdefault(ride.member_casual, []).append(ride.speed_kmh)
    return grouped


def user_speed_report(
    rides: Iterable[RideRecord],
    min_rides: int = MIN_USER_RIDES,
) -> list[UserSpeedSummary]:
    return [
        UserSpeedSummary(
            user_type=user_type,
            ride_count=len(speeds),
            total_speed_kmh=sum(speeds),
            speeds=tuple(speeds),
        )
        for user_type, speeds in group_speeds(rides).items()
        if len(speeds) >= min_rides
    ]


def longest_routes_report(
    rides: Sequence[RideRecord],
    limit: int = TOP_ROUTES,
) -> LongestRoutes:
    # nlargest matches sorted(..., reverse=True)[:limit], ties stay in input order.
    by_duration = heapq.nlargest(limit, rides, key=lambda ride: ride.duration)
    by_distance = heapq.nlargest(limit, rides, key=lambda ride: ride.distance_km)
    return LongestRoutes(
        by_duration=[route_summary(ride) for ride in by_duration],
        by_distance=[route_summary(ride) for ride in by_distance],
    )


def route_summary(ride: RideRecord) -> RouteSummary:
    return RouteSummary(
        duration=ride.duration,
        distance_km=ride.distance_km,
        start_station_name=ride.start_station_name,
        end_station_name=ride.end_station_name,
        started_on=ride.started_at.date(),
        ended_on=ride.ended_at.date(),
        speed_kmh=ride.speed_kmh,
    )
