# Garage PMS: in-memory domain models

from garage.models.vehicle import Vehicle, VehicleClass   # noqa
from garage.models.client import Client, ClientKind       # noqa
from garage.models.slot import Slot                       # noqa
from garage.models.fee_schedule import FeeSchedule        # noqa
from garage.models.facility import Facility               # noqa
