"""Send vehicle entries and exits to a running backend."""

import sys
import os
import argparse
import random
import string
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import requests
from garage.config import settings

CLASSES = ["MOTORCYCLE", "CAR", "LARGE_CAR"]


def headers() -> dict:
    return {"X-API-Key": settings.API_KEY} if settings.API_KEY else {}


def random_plate() -> str:
    letters = "".join(random.choices(string.ascii_uppercase, k=2))
    return f"{random.randint(10, 99)}-{letters}-{random.randint(10, 99)}"


def simulate_entry(base_url, plate, vehicle_class, client_id=None):
    payload = {"plate": plate, "vehicle_class": vehicle_class, "client_id": client_id}
    resp = requests.post(f"{base_url}/parking/entry", json=payload, headers=headers(), timeout=10)
    print(f"{'✅' if resp.ok else '❌'} ENTRY {plate} ({vehicle_class}) → HTTP {resp.status_code}: {resp.json()}")
    return resp.ok


def simulate_exit(base_url, plate):
    resp = requests.post(f"{base_url}/parking/exit", json={"plate": plate}, headers=headers(), timeout=10)
    print(f"{'✅' if resp.ok else '❌'} EXIT  {plate} → HTTP {resp.status_code}: {resp.json()}")
    return resp.ok


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Simulate parking traffic for testing")
    parser.add_argument("--url", default=settings.BACKEND_URL)
    parser.add_argument("--event", default="cycle", choices=["entry", "exit", "cycle"])
    parser.add_argument("--plate", default=None)
    parser.add_argument("--vehicle-class", default="CAR", choices=CLASSES)
    parser.add_argument("--client-id", type=int, default=None)
    parser.add_argument("--count", type=int, default=5, help="vehicles per cycle")
    args = parser.parse_args()

    if args.event == "entry":
        simulate_entry(args.url, args.plate or random_plate(), args.vehicle_class, args.client_id)
    elif args.event == "exit":
        if not args.plate:
            parser.error("--plate is required for --event exit")
        simulate_exit(args.url, args.plate)
    else:
        parked = [p for p in (random_plate() for _ in range(args.count))
                  if simulate_entry(args.url, p, args.vehicle_class, args.client_id)]
        for plate in parked:
            simulate_exit(args.url, plate)
        occ = requests.get(f"{args.url}/occupancy", headers=headers(), timeout=10).json()
        print(f"🅿️  Occupancy now {occ['occupied_count']}/{occ['total_count']}")
