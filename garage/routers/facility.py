"""Facility setup: dimensions, slot classes and the fee schedule."""

from collections import Counter
from fastapi import APIRouter, Depends, HTTPException
from garage.models.facility import Facility
from garage.schemas.facility import FacilityConfigIn, FacilityOut, FeeScheduleOut, FeeScheduleUpdate
from garage.services.errors import ConfigError
from garage.services.facility_service import configure, set_fee_schedule
from garage.state import get_facility

router = APIRouter()


def _facility_out(facility: Facility) -> FacilityOut:
    return FacilityOut(
        floors=facility.floor_count,
        slots_per_floor=facility.slots_per_floor,
        total_slots=facility.total_slots,
        slots_by_class=Counter(s.vehicle_class for s in facility.slots),
    )


@router.get("/facility", response_model=FacilityOut, summary="Current facility layout")
def get_layout(facility: Facility = Depends(get_facility)):
    return _facility_out(facility)


@router.put("/facility", response_model=FacilityOut, summary="Configure floors and slots")
def configure_facility(body: FacilityConfigIn, facility: Facility = Depends(get_facility)):
    """
    Lay out the slots. This is a reset: every vehicle still parked is discarded.
    Clients and fees are kept.
    """
    try:
        configure(facility, body.floors, body.slots_per_floor, body.slot_classes)
    except ConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _facility_out(facility)


@router.get("/facility/fees", response_model=FeeScheduleOut, summary="Current fee schedule")
def get_fees(facility: Facility = Depends(get_facility)):
    return facility.fees.as_dict()


@router.patch("/facility/fees", response_model=FeeScheduleOut, summary="Update some or all fees")
def update_fees(body: FeeScheduleUpdate, facility: Facility = Depends(get_facility)):
    """Fields left out keep their current value."""
    try:
        fees = set_fee_schedule(facility, **body.model_dump(exclude_none=True))
    except ConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return fees.as_dict()
