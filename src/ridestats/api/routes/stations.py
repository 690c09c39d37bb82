from __future__ import annotations

from fastapi import APIRouter, Depends

from ...core.aggregation import RideDataset
from ...core.reports import station_deficit_report
from ..dependencies import get_dataset
from ..schemas.reports import StationDeficitOut


router = APIRouter()


@router.get("/stations/deficit", response_model=list[StationDeficitOut])
def list_deficit_stations(
    dataset: RideDataset = Depends(get_dataset),
) -> list[StationDeficitOut]:
    return [
        StationDeficitOut(
            station_name=station.station_name,
            station_id=station.station_id,
            departures=station.departures,
            arrivals=station.arrivals,
            balance=station.balance,
        )
        for station in station_deficit_report(dataset.stations)
    ]
