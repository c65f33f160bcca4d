# garage/models/facility.py
"""
The parking facility aggregate: floors of slots, the client directory and
the current fee schedule.

A Facility starts unconfigured (no slots). Slots are laid out by
facility_service.configure(); the client directory and fee schedule survive
a reconfiguration. Mutating services hold `lock` for the whole operation.
"""

import threading
from typing import Dict, Iterator, List, Optional

from garage.models.client import Client
from garage.models.fee_schedule import FeeSchedule
from garage.models.slot import Slot


class Facility:
    def __init__(self, fees: Optional[FeeSchedule] = None):
        self.floor_count = 0
        self.slots_per_floor = 0
        self.floors: List[List[Slot]] = []
        self.clients: Dict[int, Client] = {}    # insertion order = registration order
        self.fees = fees if fees is not None else FeeSchedule.from_settings()
        self.lock = threading.RLock()

    @property
    def is_configured(self) -> bool:
        return bool(self.floors)

    @property
    def slots(self) -> Iterator[Slot]:
        """All slots in id order (floor-major)."""
        for floor in self.floors:
            yield from floor

    @property
    def total_slots(self) -> int:
        return self.floor_count * self.slots_per_floor

    def __repr__(self):
        return (f"<Facility floors={self.floor_count} slots_per_floor={self.slots_per_floor} "
                f"clients={len(self.clients)}>")
