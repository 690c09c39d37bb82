from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from datetime import timedelta
from pathlib import Path

from . import config
from .ingest.reader import DataSourceError
from .services.dataset_service import load_dataset
from .services.report_service import AnalysisReport, build_report

LOGGER = logging.getLogger("ridestats")


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        dataset = load_dataset(args.data_dir, args.pattern)
    except DataSourceError as exc:
        LOGGER.error("Failed to load ride data: %s", exc)
        print(f"Error: {exc}")
        return 1

    print(f"Found {dataset.file_count} CSV files")
    if dataset.file_count == 0:
        print("No CSV files found.")
        return 0

    print(render_report(build_report(dataset)))
    return 0


def render_report(report: AnalysisReport) -> str:
    lines = [
        f"Loaded {report.ride_count} rides, {report.station_count} stations"
        f" ({report.skipped_rows} rows skipped)",
        "",
        "=== SEASONAL IMPACT ON RIDES ===",
    ]
    for season in report.seasons:
        lines.extend(
            [
                f"{season.season}:",
                f"  Rides: {season.ride_count}",
                f"  Average duration: {season.average_duration_minutes:.2f} min",
                f"  Average distance: {season.average_distance_km:.2f} km",
                "",
            ]
        )

    lines.extend(["", "=== STATION BIKE DEFICIT ===", "Stations with the largest deficit:"])
    for station in report.deficit_stations:
        lines.extend(
            [
                f"{station.station_name} (ID: {station.station_id}):",
                f"  Departures: {station.departures}, Arrivals: {station.arrivals},"
                f" Balance: {station.balance}",
            ]
        )

    lines.extend(["", "=== USER SPEED DIFFERENCES ==="])
    for user in report.user_speeds:
        lines.extend(
            [
                f"{user.user_type}:",
                f"  Average speed: {user.average_speed_kmh:.2f} km/h",
                f"  Rides: {user.ride_count}",
            ]
        )

    lines.extend(["", "=== LONGEST ROUTES ===", "Longest routes by duration:"])
    for route in report.longest_routes.by_duration:
        lines.extend(
            [
                f"{format_duration(route.duration, with_days=True)} - "
                f"{route.start_station_name} → {route.end_station_name}",
                f"  Started: {route.started_on:%Y-%m-%d}, Ended: {route.ended_on:%Y-%m-%d}",
                f"  Distance: {route.distance_km:.2f} km, Speed: {route.speed_kmh:.2f} km/h",
            ]
        )

    lines.extend(["", "Longest routes by distance:"])
    for route in report.longest_routes.by_distance:
        lines.extend(
            [
                f"{route.distance_km:.2f} km - "
                f"{route.start_station_name} → {route.end_station_name}",
                f"  Duration: {format_duration(route.duration)},"
                f" Date: {route.started_on:%Y-%m-%d}, Speed: {route.speed_kmh:.2f} km/h",
            ]
        )
    return "\n".join(lines)


def format_duration(value: timedelta, with_days: bool = False) -> str:
    total = int(abs(value.total_seconds()))
    sign = "-" if value < timedelta(0) else ""
    days, remainder = divmod(total, 86_400)
    hours, remainder = divmod(remainder, 3_600)
    minutes, seconds = divmod(remainder, 60)
    if with_days:
        return f"{sign}{days:02d}:{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seasonal, station, rider-speed and route reports for bike-share ride CSVs."
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=config.data_dir(),
        help="Directory searched recursively for ride CSV files.",
    )
    parser.add_argument(
        "--pattern",
        default=config.csv_pattern(),
        help="Glob pattern for ride files.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging.",
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    raise SystemExit(main())
