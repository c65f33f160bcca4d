# garage/models/vehicle.py
"""
Vehicle classes and the vehicle record held by an occupied slot.
A Vehicle lives only while it is parked; it is discarded on exit.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class VehicleClass(str, Enum):
    MOTORCYCLE = "MOTORCYCLE"
    CAR = "CAR"
    LARGE_CAR = "LARGE_CAR"


@dataclass
class Vehicle:
    plate: str
    vehicle_class: VehicleClass
    entry_time: datetime

    def __repr__(self):
        return f"<Vehicle {self.plate} class={self.vehicle_class.value}>"
