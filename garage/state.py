# garage/state.py
"""
Facility instance used by the HTTP API.
The app creates one Facility at import time and keeps it on app.state;
routers receive it through the get_facility dependency.
"""

from fastapi import Request

from garage.config import settings
from garage.models.facility import Facility
from garage.services.facility_service import create_facility


def build_facility() -> Facility:
    """Facility pre-configured from INITIAL_FLOORS × INITIAL_SLOTS_PER_FLOOR (if set)."""
    return create_facility(settings.INITIAL_FLOORS, settings.INITIAL_SLOTS_PER_FLOOR)


def get_facility(request: Request) -> Facility:
    """FastAPI dependency: the facility owned by the running app."""
    return request.app.state.facility
