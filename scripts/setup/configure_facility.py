# scripts/setup/configure_facility.py
"""
Push the facility layout and fee schedule to a running garage backend.
Reconfiguring is a reset: vehicles currently parked are discarded.

Usage:
    python scripts/setup/configure_facility.py --floors 3 --slots-per-floor 50
    python scripts/setup/configure_facility.py --floors 2 --slots-per-floor 20 --motorcycle 1-4 --large 17-20
    python scripts/setup/configure_facility.py --fees-only --first-hour 3.5
"""

import sys
import os
import argparse
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import requests
from garage.config import settings


def parse_range(spec: str) -> list:
    """'1-4,9' → [1, 2, 3, 4, 9]"""
    ids = []
    for part in filter(None, spec.split(",")):
        if "-" in part:
            lo, hi = part.split("-", 1)
            ids.extend(range(int(lo), int(hi) + 1))
        else:
            ids.append(int(part))
    return ids


def headers() -> dict:
    return {"X-API-Key": settings.API_KEY} if settings.API_KEY else {}


def configure_layout(base_url: str, floors: int, slots_per_floor: int, slot_classes: dict):
    print(f"  → Laying out {floors} floors × {slots_per_floor} slots")
    resp = requests.put(f"{base_url}/facility", json={
        "floors": floors,
        "slots_per_floor": slots_per_floor,
        "slot_classes": slot_classes,
    }, headers=headers(), timeout=10)
    if resp.status_code == 200:
        print(f"  ✅ Layout OK: {resp.json()}")
        return True
    print(f"  ❌ Layout rejected: HTTP {resp.status_code} {resp.text[:200]}")
    return False


def configure_fees(base_url: str, fees: dict):
    if not fees:
        return True
    print(f"  → Updating fees {fees}")
    resp = requests.patch(f"{base_url}/facility/fees", json=fees, headers=headers(), timeout=10)
    if resp.status_code == 200:
        print(f"  ✅ Fees OK: {resp.json()}")
        return True
    print(f"  ❌ Fees rejected: HTTP {resp.status_code} {resp.text[:200]}")
    return False


def main():
    parser = argparse.ArgumentParser(description="Configure a running garage backend")
    parser.add_argument("--url", default=settings.BACKEND_URL)
    parser.add_argument("--floors", type=int, default=1)
    parser.add_argument("--slots-per-floor", type=int, default=10)
    parser.add_argument("--motorcycle", default="", help="slot ids for motorcycles, e.g. 1-4,9")
    parser.add_argument("--large", default="", help="slot ids for large cars")
    parser.add_argument("--fees-only", action="store_true")
    for name in ("first-15-min", "first-30-min", "first-hour", "per-additional-hour", "full-day"):
        parser.add_argument(f"--{name}", type=float)
    args = parser.parse_args()

    print(f"🏢 Configuring backend at {args.url}")
    fees = {k: v for k, v in {
        "first_15_min": args.first_15_min,
        "first_30_min": args.first_30_min,
        "first_hour": args.first_hour,
        "per_additional_hour": args.per_additional_hour,
        "full_day": args.full_day,
    }.items() if v is not None}

    slot_classes = {sid: "MOTORCYCLE" for sid in parse_range(args.motorcycle)}
    slot_classes.update({sid: "LARGE_CAR" for sid in parse_range(args.large)})

    try:
        ok = True
        if not args.fees_only:
            ok = configure_layout(args.url, args.floors, args.slots_per_floor, slot_classes)
        ok = configure_fees(args.url, fees) and ok
    except requests.exceptions.ConnectionError:
        print(f"❌ Cannot reach backend at {args.url}")
        print("\nStart it first:")
        print("  uvicorn garage.main:app --host 0.0.0.0 --port 8080")
        sys.exit(1)

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
