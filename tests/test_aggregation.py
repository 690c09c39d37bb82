from __future__ import annotations

from datetime import datetime

import pytest

from ride_factories import make_ride
from ridestats.core.aggregation import RideAggregator, SeasonAggregate, StationAggregate
from ridestats.models import StationKey


def _stations(aggregator: RideAggregator) -> dict[StationKey, StationAggregate]:
    return {station.key: station for station in aggregator.snapshot().stations}


def test_add_keeps_every_ride_in_order() -> None:
    aggregator = RideAggregator()
    aggregator.extend([make_ride("a"), make_ride("b"), make_ride("a")])

    rides = aggregator.snapshot().rides

    assert [ride.ride_id for ride in rides] == ["a", "b", "a"]


def test_departure_only_station_has_negative_balance() -> None:
    aggregator = RideAggregator()
    aggregator.extend(
        make_ride(str(index), start_station=("S1", "Origin"), end_station=("S9", "Sink"))
        for index in range(3)
    )

    origin = _stations(aggregator)[StationKey("S1", "Origin")]

    assert origin.departures == 3
    assert origin.arrivals == 0
    assert origin.balance == -3


def test_round_trip_station_is_balanced() -> None:
    aggregator = RideAggregator()
    aggregator.add(make_ride(start_station=("S1", "Loop"), end_station=("S1", "Loop")))

    loop = _stations(aggregator)[StationKey("S1", "Loop")]

    assert loop.departures == 1
    assert loop.arrivals == 1
    assert loop.balance == 0
    assert loop.total_traffic == 2


@pytest.mark.parametrize("station", [("", "Nameless"), ("S5", "")])
def test_incomplete_station_identity_is_not_recorded(station: tuple[str, str]) -> None:
    aggregator = RideAggregator()
    aggregator.add(make_ride(start_station=station))

    stations = _stations(aggregator)

    assert list(stations) == [StationKey("S2", "Union Square")]


def test_station_keys_do_not_collide_on_separator() -> None:
    aggregator = RideAggregator()
    aggregator.add(make_ride(start_station=("1_A", "B"), end_station=("1", "A_B")))

    stations = _stations(aggregator)

    assert stations[StationKey("1_A", "B")].departures == 1
    assert stations[StationKey("1", "A_B")].arrivals == 1


def test_first_seen_coordinates_win() -> None:
    aggregator = RideAggregator()
    first = make_ride("a", distance_km=2.0)
    second = make_ride("b", distance_km=5.0)
    aggregator.extend([first, second])

    union_square = _stations(aggregator)[StationKey("S2", "Union Square")]

    assert union_square.latitude == first.end_lat
    assert union_square.latitude != second.end_lat
    assert union_square.arrivals == 2


def test_season_fold_accumulates_summer_rides() -> None:
    aggregator = RideAggregator()
    aggregator.extend(
        [
            make_ride("jun", datetime(2024, 6, 10), minutes=10, distance_km=1.0),
            make_ride("jul", datetime(2024, 7, 10), minutes=20, distance_km=2.0),
            make_ride("aug", datetime(2024, 8, 10), minutes=30, distance_km=3.0),
        ]
    )

    (summer,) = aggregator.snapshot().seasons

    assert summer.season == "Lato"
    assert summer.ride_count == 3
    assert summer.total_duration_minutes == pytest.approx(60.0)
    assert summer.total_distance_km == pytest.approx(6.0)


def test_season_fold_splits_by_start_month() -> None:
    aggregator = RideAggregator()
    aggregator.extend(
        make_ride(str(month), datetime(2024, month, 1)) for month in range(1, 13)
    )

    counts = {season.season: season.ride_count for season in aggregator.snapshot().seasons}

    assert counts == {"Zima": 3, "Wiosna": 3, "Lato": 3, "Jesień": 3}


def test_negative_duration_is_kept() -> None:
    aggregator = RideAggregator()
    aggregator.add(make_ride(minutes=-15))

    (season,) = aggregator.snapshot().seasons

    assert season.total_duration_minutes == pytest.approx(-15.0)


def test_snapshot_is_not_affected_by_later_rides() -> None:
    aggregator = RideAggregator()
    aggregator.add(make_ride("a"))
    snapshot = aggregator.snapshot()

    aggregator.add(make_ride("b"))

    assert len(snapshot.rides) == 1
    assert snapshot.seasons[0].ride_count == 1
    assert all(station.total_traffic == 1 for station in snapshot.stations)


def test_snapshot_carries_skip_accounting() -> None:
    snapshot = RideAggregator().snapshot(skipped_rows=2, skip_reasons={"too_few_fields": 2})

    assert snapshot.skipped_rows == 2
    assert snapshot.skip_reasons == {"too_few_fields": 2}


def test_season_averages_guard_empty_aggregate() -> None:
    empty = SeasonAggregate(season="Zima")

    assert empty.average_duration_minutes == 0.0
    assert empty.average_distance_km == 0.0
