# garage/schemas/facility.py
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from garage.models.vehicle import VehicleClass


class FacilityConfigIn(BaseModel):
    floors: int
    slots_per_floor: int
    slot_classes: Dict[int, VehicleClass] = Field(default_factory=dict)  # slot id → class


class FacilityOut(BaseModel):
    floors: int
    slots_per_floor: int
    total_slots: int
    slots_by_class: Dict[VehicleClass, int]


class FeeScheduleUpdate(BaseModel):
    first_15_min: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    first_30_min: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    first_hour: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    per_additional_hour: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    full_day: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)


class FeeScheduleOut(BaseModel):
    first_15_min: float
    first_30_min: float
    first_hour: float
    per_additional_hour: float
    full_day: float


class FloorOccupancyOut(BaseModel):
    floor: int
    occupied: int
    total: int


class OccupancyOut(BaseModel):
    occupied_count: int
    total_count: int
    free_count: int
    occupancy_percent: float
    floors: List[FloorOccupancyOut]
