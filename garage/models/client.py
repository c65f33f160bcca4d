# garage/models/client.py
"""
Registered client profile (individual or company).
Clients are stored once and never modified; the vehicle list is informational
and plays no part in slot matching.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from garage.models.vehicle import Vehicle


class ClientKind(str, Enum):
    INDIVIDUAL = "INDIVIDUAL"
    COMPANY = "COMPANY"


@dataclass(frozen=True)
class Client:
    id: int
    name: str
    address: str = ""
    phone: str = ""
    email: str = ""
    kind: ClientKind = ClientKind.INDIVIDUAL
    vehicles: Tuple[Vehicle, ...] = ()

    @property
    def vehicle_count(self) -> int:
        return len(self.vehicles)

    def __repr__(self):
        return f"<Client {self.id} name={self.name} kind={self.kind.value}>"
