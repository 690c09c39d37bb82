from __future__ import annotations

from fastapi import APIRouter, Depends

from ...core.aggregation import RideDataset
from ...core.reports import seasonal_report
from ..dependencies import get_dataset
from ..schemas.reports import SeasonSummaryOut


router = APIRouter()


@router.get("/seasons", response_model=list[SeasonSummaryOut])
def get_seasons(dataset: RideDataset = Depends(get_dataset)) -> list[SeasonSummaryOut]:
    return [
        SeasonSummaryOut(
            season=summary.season,
            ride_count=summary.ride_count,
            average_duration_minutes=summary.average_duration_minutes,
            average_distance_km=summary.average_distance_km,
        )
        for summary in seasonal_report(dataset.seasons)
    ]
