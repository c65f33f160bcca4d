# garage/services/facility_service.py
"""
Facility setup and read-only occupancy reporting.

configure() is a destructive reset: any vehicle still parked is dropped.
Clients and the fee schedule are kept.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from garage.config import settings
from garage.models.facility import Facility
from garage.models.fee_schedule import FeeSchedule
from garage.models.slot import Slot
from garage.models.vehicle import VehicleClass
from garage.services.errors import InvalidDimensions, InvalidFee, LimitExceeded
from garage.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class FloorOccupancy:
    floor: int
    occupied: int
    total: int


@dataclass
class OccupancySnapshot:
    occupied_count: int
    total_count: int
    floors: List[FloorOccupancy] = field(default_factory=list)

    @property
    def free_count(self) -> int:
        return self.total_count - self.occupied_count


def create_facility(floors: int = 0, slots_per_floor: int = 0) -> Facility:
    """New facility with the fee schedule from settings, configured when both sizes are given."""
    facility = Facility(FeeSchedule.from_settings())
    if floors and slots_per_floor:
        configure(facility, floors, slots_per_floor)
    return facility


def configure(facility: Facility, floors: int, slots_per_floor: int,
              slot_classes: Optional[Dict[int, VehicleClass]] = None) -> Facility:
    """
    Lay out floors × slots_per_floor slots with ids 1..N (floor-major).
    Slots get DEFAULT_SLOT_CLASS unless listed in slot_classes (slot id → class).
    """
    if floors > settings.MAX_FLOORS or slots_per_floor > settings.MAX_SLOTS_PER_FLOOR:
        raise LimitExceeded(floors, slots_per_floor, settings.MAX_FLOORS, settings.MAX_SLOTS_PER_FLOOR)
    if floors < 1 or slots_per_floor < 1:
        raise InvalidDimensions(
            f"Floors and slots per floor must be at least 1 (got {floors} × {slots_per_floor})"
        )

    slot_classes = slot_classes or {}
    total = floors * slots_per_floor
    unknown = sorted(sid for sid in slot_classes if not 1 <= sid <= total)
    if unknown:
        raise InvalidDimensions(f"Slot ids out of range 1..{total}: {unknown}")

    default_class = VehicleClass(settings.DEFAULT_SLOT_CLASS)
    layout = [
        [
            Slot(
                id=floor_index * slots_per_floor + slot_index + 1,
                floor=floor_index + 1,
                vehicle_class=slot_classes.get(
                    floor_index * slots_per_floor + slot_index + 1, default_class
                ),
            )
            for slot_index in range(slots_per_floor)
        ]
        for floor_index in range(floors)
    ]

    with facility.lock:
        dropped = sum(1 for s in facility.slots if s.occupied)
        if dropped:
            logger.warning(f"Reconfiguration discarded {dropped} parked vehicle(s)")
        facility.floor_count = floors
        facility.slots_per_floor = slots_per_floor
        facility.floors = layout

    logger.info(f"Facility configured with {floors} floors and {slots_per_floor} slots per floor")
    return facility


def set_fee_schedule(facility: Facility, **fees) -> FeeSchedule:
    """Override the given schedule fields; the others keep their current value."""
    unknown = set(fees) - set(FeeSchedule.field_names())
    if unknown:
        raise TypeError(f"Unknown fee fields: {sorted(unknown)}")

    fees = {name: value for name, value in fees.items() if value is not None}
    invalid = {name: value for name, value in fees.items()
               if not math.isfinite(value) or value < 0}
    if invalid:
        raise InvalidFee(f"Fees must be finite and not negative: {invalid}")

    with facility.lock:
        facility.fees = FeeSchedule(**{**facility.fees.as_dict(), **fees})

    logger.info(f"Fees updated: {facility.fees.as_dict()}")
    return facility.fees


def occupancy_snapshot(facility: Facility) -> OccupancySnapshot:
    per_floor = [
        FloorOccupancy(floor=index + 1,
                       occupied=sum(1 for s in floor if s.occupied),
                       total=len(floor))
        for index, floor in enumerate(facility.floors)
    ]
    return OccupancySnapshot(
        occupied_count=sum(f.occupied for f in per_floor),
        total_count=sum(f.total for f in per_floor),
        floors=per_floor,
    )
