from __future__ import annotations

from fastapi import APIRouter, Depends

from ...core.aggregation import RideDataset
from ..dependencies import get_dataset
from ..schemas.reports import DatasetSummary


router = APIRouter()


@router.get("/summary", response_model=DatasetSummary)
def get_summary(dataset: RideDataset = Depends(get_dataset)) -> DatasetSummary:
    return DatasetSummary(
        file_count=dataset.file_count,
        ride_count=len(dataset.rides),
        station_count=len(dataset.stations),
        skipped_rows=dataset.skipped_rows,
        skip_reasons=dict(dataset.skip_reasons),
    )
