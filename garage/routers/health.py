"""
System health check endpoint.
Returns backend status and whether the facility has been configured.
"""

from fastapi import APIRouter, Depends
from datetime import datetime
from garage.models.facility import Facility
from garage.services.facility_service import occupancy_snapshot
from garage.state import get_facility

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(facility: Facility = Depends(get_facility)):
    snap = occupancy_snapshot(facility)
    return {
        "status": "ok" if facility.is_configured else "unconfigured",
        "timestamp": datetime.utcnow().isoformat(),
        "backend": "ok",
        "floors": facility.floor_count,
        "slots": snap.total_count,
        "occupied": snap.occupied_count,
        "clients": len(facility.clients),
    }
