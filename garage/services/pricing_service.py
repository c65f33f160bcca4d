# garage/services/pricing_service.py
"""
Exit fee calculation.

Tiers (upper bounds inclusive):
  ≤ 15 min  → first_15_min
  ≤ 30 min  → first_30_min
  ≤ 60 min  → first_hour
  > 60 min  → first_hour + each started extra hour × per_additional_hour

full_day is only used when the caller asks for the cap.
"""

import math
from datetime import datetime

from garage.models.fee_schedule import FeeSchedule


def elapsed_minutes(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 60


def compute_fee(minutes: float, schedule: FeeSchedule, cap_at_full_day: bool = False) -> float:
    if minutes < 0:
        raise ValueError(f"Elapsed time cannot be negative: {minutes} min")

    if minutes <= 15:
        fee = schedule.first_15_min
    elif minutes <= 30:
        fee = schedule.first_30_min
    elif minutes <= 60:
        fee = schedule.first_hour
    else:
        extra_hours = math.ceil((minutes - 60) / 60)
        fee = schedule.first_hour + extra_hours * schedule.per_additional_hour

    if cap_at_full_day:
        fee = min(fee, schedule.full_day)
    return fee
