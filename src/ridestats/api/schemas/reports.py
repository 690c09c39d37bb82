from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class DatasetSummary(BaseModel):
    file_count: int
    ride_count: int
    station_count: int
    skipped_rows: int
    skip_reasons: dict[str, int] = {}


class SeasonSummaryOut(BaseModel):
    season: str
    ride_count: int
    average_duration_minutes: float
    average_distance_km: float


class StationDeficitOut(BaseModel):
    station_name: str
    station_id: str
    departures: int
    arrivals: int
    balance: int


class UserSpeedOut(BaseModel):
    user_type: str
    average_speed_kmh: float
    ride_count: int


class RouteOut(BaseModel):
    duration_seconds: float
    distance_km: float
    start_station_name: str
    end_station_name: str
    started_on: date
    ended_on: date
    speed_kmh: float


class LongestRoutesOut(BaseModel):
    by_duration: list[RouteOut]
    by_distance: list[RouteOut]
