# garage/schemas/client.py
from pydantic import BaseModel

from garage.models.client import ClientKind


class ClientCreate(BaseModel):
    id: int
    name: str
    address: str = ""
    phone: str = ""
    email: str = ""
    kind: ClientKind = ClientKind.INDIVIDUAL


class ClientOut(BaseModel):
    id: int
    name: str
    address: str
    phone: str
    email: str
    kind: ClientKind
    vehicle_count: int

    class Config:
        from_attributes = True


class ClientSummaryOut(BaseModel):
    id: int
    name: str
    vehicle_count: int

    class Config:
        from_attributes = True
