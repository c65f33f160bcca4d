# garage/models/fee_schedule.py
"""
Tiered price table used to charge a vehicle on exit.
Initial values come from the FEE_* settings.
"""

from dataclasses import dataclass, fields

from garage.config import settings


@dataclass
class FeeSchedule:
    first_15_min: float = 1.0
    first_30_min: float = 2.0
    first_hour: float = 3.0
    per_additional_hour: float = 2.0
    full_day: float = 20.0     # Only applied when the full-day cap is enabled

    @classmethod
    def from_settings(cls) -> "FeeSchedule":
        return cls(
            first_15_min=settings.FEE_FIRST_15_MIN,
            first_30_min=settings.FEE_FIRST_30_MIN,
            first_hour=settings.FEE_FIRST_HOUR,
            per_additional_hour=settings.FEE_PER_ADDITIONAL_HOUR,
            full_day=settings.FEE_FULL_DAY,
        )

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.field_names()}
