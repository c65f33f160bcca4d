# garage/schemas/parking.py
from pydantic import BaseModel, Field
from typing import Optional

from garage.models.vehicle import VehicleClass


class VehicleEntryIn(BaseModel):
    plate: str = Field(min_length=1)
    vehicle_class: VehicleClass
    client_id: Optional[int] = None

    class Config:
        str_strip_whitespace = True


class VehicleEntryOut(BaseModel):
    plate: str
    slot_id: int
    status: str = "parked"


class VehicleExitIn(BaseModel):
    plate: str = Field(min_length=1)

    class Config:
        str_strip_whitespace = True


class VehicleExitOut(BaseModel):
    plate: str
    fee: float
    currency: str
    status: str = "released"
