from __future__ import annotations

from fastapi import APIRouter, Depends

from ...core.aggregation import RideDataset
from ...core.reports import user_speed_report
from ..dependencies import get_dataset
from ..schemas.reports import UserSpeedOut


router = APIRouter()


@router.get("/users/speed", response_model=list[UserSpeedOut])
def get_user_speeds(dataset: RideDataset = Depends(get_dataset)) -> list[UserSpeedOut]:
    return [
        UserSpeedOut(
            user_type=summary.user_type,
            average_speed_kmh=summary.average_speed_kmh,
            ride_count=summary.ride_count,
        )
        for summary in user_speed_report(dataset.rides)
    ]
