"""Occupancy: totals and per-floor breakdown."""

from fastapi import APIRouter, Depends
from garage.models.facility import Facility
from garage.schemas.facility import OccupancyOut
from garage.services.facility_service import occupancy_snapshot
from garage.state import get_facility

router = APIRouter()


@router.get("/occupancy", response_model=OccupancyOut)
def get_occupancy(facility: Facility = Depends(get_facility)):
    """Occupied vs total slots, overall and per floor."""
    snap = occupancy_snapshot(facility)
    return OccupancyOut(
        occupied_count=snap.occupied_count,
        total_count=snap.total_count,
        free_count=snap.free_count,
        occupancy_percent=round(snap.occupied_count / snap.total_count * 100, 1) if snap.total_count else 0,
        floors=[vars(f) for f in snap.floors],
    )
