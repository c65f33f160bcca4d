# garage/models/slot.py
"""
A single parking space.
id, floor and vehicle_class are fixed when the facility is configured;
only the occupancy fields change afterwards.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from garage.models.client import Client
from garage.models.vehicle import Vehicle, VehicleClass


@dataclass
class Slot:
    id: int
    floor: int                           # 1-based floor number
    vehicle_class: VehicleClass
    occupied: bool = False
    client: Optional[Client] = None
    vehicle: Optional[Vehicle] = None
    entry_time: Optional[datetime] = None

    def accepts(self, vehicle_class: VehicleClass) -> bool:
        return not self.occupied and self.vehicle_class == vehicle_class

    def holds(self, plate: str) -> bool:
        return self.occupied and self.vehicle is not None and self.vehicle.plate == plate

    def occupy(self, vehicle: Vehicle, client: Optional[Client]):
        self.occupied = True
        self.client = client
        self.vehicle = vehicle
        self.entry_time = vehicle.entry_time

    def release(self):
        self.occupied = False
        self.client = None
        self.vehicle = None
        self.entry_time = None

    def __repr__(self):
        status = f"occupied by {self.vehicle.plate}" if self.occupied else "free"
        return f"<Slot {self.id} floor={self.floor} class={self.vehicle_class.value} {status}>"
