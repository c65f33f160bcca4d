# garage/cli.py
"""
Interactive operator menu.

Reads raw console input, turns it into typed values and calls the facility
services. Every failure is printed and the menu comes back; nothing here
decides allocation or pricing.

Usage:
    garage-cli
    garage-cli --floors 3 --slots-per-floor 50
"""

import argparse
from typing import Optional

from garage.config import settings
from garage.models.client import Client, ClientKind
from garage.models.facility import Facility
from garage.models.vehicle import VehicleClass
from garage.services.allocation_service import park_vehicle, remove_vehicle
from garage.services.client_service import list_clients, register_client
from garage.services.errors import GarageError
from garage.services.facility_service import (
    configure, create_facility, occupancy_snapshot, set_fee_schedule,
)
from garage.utils.logger import get_logger

logger = get_logger(__name__)

MENU = """
=== Parking Management ===
1. Configure facility
2. Set fees
3. Register client
4. Vehicle entry
5. Vehicle exit
6. Occupancy
7. List clients
8. Quit"""

FEE_PROMPTS = [
    ("first_15_min", "Price for the first 15 min"),
    ("first_30_min", "Price for the first 30 min"),
    ("first_hour", "Price for the first hour"),
    ("per_additional_hour", "Price per additional hour"),
    ("full_day", "Price for a full day"),
]


def _read_int(question: str) -> int:
    raw = input(question).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"'{raw}' is not a whole number")


def _read_optional_int(question: str) -> Optional[int]:
    raw = input(question).strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"'{raw}' is not a whole number")


def _read_optional_float(question: str) -> Optional[float]:
    raw = input(question).strip().replace(",", ".")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"'{raw}' is not a number")


def _read_choice(question: str, enum_cls):
    raw = input(question).strip().upper().replace(" ", "_")
    try:
        return enum_cls(raw)
    except ValueError:
        options = "/".join(m.value for m in enum_cls)
        raise ValueError(f"'{raw}' is not one of {options}")


def do_configure(facility: Facility):
    floors = _read_int("Number of floors: ")
    slots = _read_int("Slots per floor: ")
    configure(facility, floors, slots)
    print(f"✅ Facility configured with {floors} floors and {slots} slots per floor.")


def do_set_fees(facility: Facility):
    print("(leave blank to keep the current price)")
    fees = {name: _read_optional_float(f"{label} [{getattr(facility.fees, name)}]: ")
            for name, label in FEE_PROMPTS}
    schedule = set_fee_schedule(facility, **fees)
    print(f"✅ Fees updated: {schedule.as_dict()}")


def do_register_client(facility: Facility):
    client = Client(
        id=_read_int("Client id: "),
        name=input("Name: ").strip(),
        address=input("Address: ").strip(),
        phone=input("Phone: ").strip(),
        email=input("Email: ").strip(),
        kind=_read_choice("Kind (INDIVIDUAL/COMPANY): ", ClientKind),
    )
    register_client(facility, client)
    print(f"✅ Client {client.name} registered.")


def do_vehicle_entry(facility: Facility):
    plate = input("Plate: ").strip()
    vehicle_class = _read_choice("Class (MOTORCYCLE/CAR/LARGE_CAR): ", VehicleClass)
    client_id = _read_optional_int("Client id (optional, press Enter to skip): ")
    slot_id = park_vehicle(facility, plate, vehicle_class, client_id)
    print(f"✅ Vehicle {plate} parked in slot {slot_id}.")


def do_vehicle_exit(facility: Facility):
    plate = input("Plate: ").strip()
    fee = remove_vehicle(facility, plate)
    print(f"💶 Fee for vehicle {plate}: {settings.CURRENCY_SYMBOL}{fee:.2f}")


def do_occupancy(facility: Facility):
    snap = occupancy_snapshot(facility)
    print(f"Occupancy: {snap.occupied_count}/{snap.total_count}")
    for floor in snap.floors:
        print(f"   Floor {floor.floor}: {floor.occupied}/{floor.total}")


def do_list_clients(facility: Facility):
    clients = list_clients(facility)
    if not clients:
        print("No clients registered.")
    for c in clients:
        print(f"ID: {c.id}, Name: {c.name}, Vehicles: {c.vehicle_count}")


ACTIONS = {
    "1": do_configure,
    "2": do_set_fees,
    "3": do_register_client,
    "4": do_vehicle_entry,
    "5": do_vehicle_exit,
    "6": do_occupancy,
    "7": do_list_clients,
}


def run_menu(facility: Facility):
    """Loop until the operator quits or input ends."""
    while True:
        print(MENU)
        try:
            choice = input("Choose an option: ").strip()
        except EOFError:
            choice = "8"

        if choice == "8":
            print("Shutting down...")
            return

        action = ACTIONS.get(choice)
        if action is None:
            print("Invalid option!")
            continue

        try:
            action(facility)
        except (GarageError, ValueError) as e:
            print(f"❌ {e}")
        except EOFError:
            print("Shutting down...")
            return


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive parking facility menu")
    parser.add_argument("--floors", type=int, default=settings.INITIAL_FLOORS)
    parser.add_argument("--slots-per-floor", type=int, default=settings.INITIAL_SLOTS_PER_FLOOR)
    args = parser.parse_args(argv)

    try:
        facility = create_facility(args.floors, args.slots_per_floor)
    except GarageError as e:
        parser.error(str(e))

    logger.info(f"Menu started ({facility.total_slots} slots configured)")
    run_menu(facility)


if __name__ == "__main__":
    main()
