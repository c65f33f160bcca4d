"""Vehicle entry and exit."""

from fastapi import APIRouter, Depends, HTTPException
from garage.config import settings
from garage.models.facility import Facility
from garage.schemas.parking import VehicleEntryIn, VehicleEntryOut, VehicleExitIn, VehicleExitOut
from garage.services.allocation_service import park_vehicle, remove_vehicle
from garage.services.errors import NoSlotAvailable, VehicleNotFound
from garage.state import get_facility

router = APIRouter()


@router.post("/parking/entry", response_model=VehicleEntryOut, summary="Park a vehicle")
def vehicle_entry(body: VehicleEntryIn, facility: Facility = Depends(get_facility)):
    """First free slot of the vehicle's class. Unknown client ids park anonymously."""
    try:
        slot_id = park_vehicle(facility, body.plate, body.vehicle_class, body.client_id)
    except NoSlotAvailable as e:
        raise HTTPException(status_code=409, detail=str(e))
    return VehicleEntryOut(plate=body.plate, slot_id=slot_id)


@router.post("/parking/exit", response_model=VehicleExitOut, summary="Release a vehicle and price its stay")
def vehicle_exit(body: VehicleExitIn, facility: Facility = Depends(get_facility)):
    try:
        fee = remove_vehicle(facility, body.plate)
    except VehicleNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return VehicleExitOut(plate=body.plate, fee=fee, currency=settings.CURRENCY_SYMBOL)
