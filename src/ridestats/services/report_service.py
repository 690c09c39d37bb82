from __future__ import annotations

from dataclasses import dataclass

from ..core.aggregation import RideDataset
from ..core.reports import (
    LongestRoutes,
    SeasonSummary,
    StationDeficit,
    UserSpeedSummary,
    longest_routes_report,
    seasonal_report,
    station_deficit_report,
    user_speed_report,
)


@dataclass(frozen=True)
class AnalysisReport:
    file_count: int
    ride_count: int
    station_count: int
    skipped_rows: int
    seasons: list[SeasonSummary]
    deficit_stations: list[StationDeficit]
    user_speeds: list[UserSpeedSummary]
    longest_routes: LongestRoutes


def build_report(dataset: RideDataset) -> AnalysisReport:
    return AnalysisReport(
        file_count=dataset.file_count,
        ride_count=len(dataset.rides),
        station_count=len(dataset.stations),
        skipped_rows=dataset.skipped_rows,
        seasons=seasonal_report(dataset.seasons),
        deficit_stations=station_deficit_report(dataset.stations),
        user_speeds=user_speed_report(dataset.rides),
        longest_routes=longest_routes_report(dataset.rides),
    )
