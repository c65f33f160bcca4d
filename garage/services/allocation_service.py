# garage/services/allocation_service.py
"""
Vehicle entry and exit.

Entry: the first free slot (by id) whose class matches the vehicle wins.
  - An unknown client id parks the vehicle anonymously.
  - A plate that is already parked is not refused; it gets a second slot.
Exit: the first occupied slot (by id) holding the plate is priced and freed.
  The fee is returned to the caller; nothing is recorded.
"""

from datetime import datetime
from typing import Optional

from garage.config import settings
from garage.models.facility import Facility
from garage.models.slot import Slot
from garage.models.vehicle import Vehicle, VehicleClass
from garage.services.errors import NoSlotAvailable, VehicleNotFound
from garage.services.pricing_service import compute_fee, elapsed_minutes
from garage.utils.logger import get_logger

logger = get_logger(__name__)


def find_free_slot(facility: Facility, vehicle_class: VehicleClass) -> Optional[Slot]:
    return next((s for s in facility.slots if s.accepts(vehicle_class)), None)


def find_vehicle_slot(facility: Facility, plate: str) -> Optional[Slot]:
    return next((s for s in facility.slots if s.holds(plate)), None)


def park_vehicle(facility: Facility, plate: str, vehicle_class: VehicleClass,
                 client_id: Optional[int] = None, now: Optional[datetime] = None) -> int:
    """Park a vehicle and return the id of the slot it was given."""
    if not plate or not plate.strip():
        raise ValueError("Plate number is required")
    now = now or datetime.utcnow()

    with facility.lock:
        slot = find_free_slot(facility, vehicle_class)
        if slot is None:
            raise NoSlotAvailable(vehicle_class)

        client = None
        if client_id is not None:
            client = facility.clients.get(client_id)
            if client is None:
                logger.warning(f"Unknown client id {client_id}, parking {plate} anonymously")

        if find_vehicle_slot(facility, plate) is not None:
            logger.warning(f"Plate {plate} is already parked, allocating another slot")

        slot.occupy(Vehicle(plate=plate, vehicle_class=vehicle_class, entry_time=now), client)

    logger.info(f"Vehicle {plate} parked in slot {slot.id} (floor {slot.floor})")
    return slot.id


def remove_vehicle(facility: Facility, plate: str, now: Optional[datetime] = None) -> float:
    """Free the slot holding `plate` and return the fee for the stay."""
    now = now or datetime.utcnow()

    with facility.lock:
        slot = find_vehicle_slot(facility, plate)
        if slot is None:
            raise VehicleNotFound(plate)

        minutes = elapsed_minutes(slot.entry_time, now)
        fee = compute_fee(minutes, facility.fees, cap_at_full_day=settings.FEE_FULL_DAY_CAP)
        slot_id = slot.id
        slot.release()

    logger.info(f"Vehicle {plate} left slot {slot_id} after {minutes:.1f} min, "
                f"fee {settings.CURRENCY_SYMBOL}{fee:.2f}")
    return fee
