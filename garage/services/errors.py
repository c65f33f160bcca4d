# garage/services/errors.py
"""
Failures raised by the facility services.
All of them are recoverable: the operation that raised left every data
structure unchanged, and re-prompting or retrying is up to the caller.
"""


class GarageError(Exception):
    """Base class for every facility failure."""


# ── Configuration ─────────────────────────────────────────────────────────
class ConfigError(GarageError):
    pass


class LimitExceeded(ConfigError):
    def __init__(self, floors, slots_per_floor, max_floors, max_slots_per_floor):
        self.floors = floors
        self.slots_per_floor = slots_per_floor
        super().__init__(
            f"Maximum number of floors or slots exceeded: requested {floors} floors × "
            f"{slots_per_floor} slots (limits {max_floors} × {max_slots_per_floor})"
        )


class InvalidDimensions(ConfigError):
    pass


class InvalidFee(ConfigError):
    pass


# ── Client directory ──────────────────────────────────────────────────────
class DirectoryError(GarageError):
    pass


class DuplicateClientId(DirectoryError):
    def __init__(self, client_id):
        self.client_id = client_id
        super().__init__(f"Client already registered with id {client_id}")


# ── Allocation ────────────────────────────────────────────────────────────
class AllocationError(GarageError):
    pass


class NoSlotAvailable(AllocationError):
    def __init__(self, vehicle_class):
        self.vehicle_class = vehicle_class
        super().__init__(f"No slot available for vehicle class {vehicle_class.value}")


class VehicleNotFound(AllocationError):
    def __init__(self, plate):
        self.plate = plate
        super().__init__(f"Vehicle {plate} not found")
