from __future__ import annotations

from fastapi import APIRouter, Depends

from ...core.aggregation import RideDataset
from ...core.reports import RouteSummary, longest_routes_report
from ..dependencies import get_dataset
from ..schemas.reports import LongestRoutesOut, RouteOut


router = APIRouter()


@router.get("/routes/longest", response_model=LongestRoutesOut)
def get_longest_routes(dataset: RideDataset = Depends(get_dataset)) -> LongestRoutesOut:
    result = longest_routes_report(dataset.rides)
    return LongestRoutesOut(
        by_duration=[_route_out(route) for route in result.by_duration],
        by_distance=[_route_out(route) for route in result.by_distance],
    )


def _route_out(route: RouteSummary) -> RouteOut:
    return RouteOut(
        duration_seconds=route.duration.total_seconds(),
        distance_km=round(route.distance_km, 2),
        start_station_name=route.start_station_name,
        end_station_name=route.end_station_name,
        started_on=route.started_on,
        ended_on=route.ended_on,
        speed_kmh=round(route.speed_kmh, 2),
    )
