"""Unit tests for vehicle entry and exit."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import patch
from datetime import datetime, timedelta
from garage.config import settings
from garage.models.client import Client
from garage.models.facility import Facility
from garage.models.fee_schedule import FeeSchedule
from garage.models.vehicle import VehicleClass
from garage.services.allocation_service import find_vehicle_slot, park_vehicle, remove_vehicle
from garage.services.client_service import register_client
from garage.services.errors import NoSlotAvailable, VehicleNotFound
from garage.services.facility_service import configure, occupancy_snapshot

T0 = datetime(2026, 3, 1, 9, 0, 0)


def make_facility(floors=2, slots=2, slot_classes=None):
    facility = Facility(FeeSchedule())
    configure(facility, floors, slots, slot_classes)
    return facility


def slot_state(facility):
    return [(s.id, s.occupied, s.vehicle and s.vehicle.plate, s.entry_time) for s in facility.slots]


class TestParkVehicle:
    def test_first_free_slot_in_id_order(self):
        facility = make_facility()
        assert park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0) == 1
        assert park_vehicle(facility, "AA-00-02", VehicleClass.CAR, now=T0) == 2
        assert park_vehicle(facility, "AA-00-03", VehicleClass.CAR, now=T0) == 3

    def test_freed_slot_is_reused_first(self):
        facility = make_facility()
        for n in range(3):
            park_vehicle(facility, f"AA-00-0{n}", VehicleClass.CAR, now=T0)
        remove_vehicle(facility, "AA-00-00", now=T0)
        assert park_vehicle(facility, "BB-11-11", VehicleClass.CAR, now=T0) == 1

    def test_matches_slot_class(self):
        facility = make_facility(2, 2, {3: VehicleClass.MOTORCYCLE, 4: VehicleClass.LARGE_CAR})
        assert park_vehicle(facility, "MOTO-1", VehicleClass.MOTORCYCLE, now=T0) == 3
        assert park_vehicle(facility, "VAN-1", VehicleClass.LARGE_CAR, now=T0) == 4
        assert park_vehicle(facility, "CAR-1", VehicleClass.CAR, now=T0) == 1

    def test_occupancy_fields_set(self):
        facility = make_facility()
        register_client(facility, Client(id=5, name="Ana"))

        slot_id = park_vehicle(facility, "AA-00-01", VehicleClass.CAR, client_id=5, now=T0)

        slot = next(s for s in facility.slots if s.id == slot_id)
        assert slot.occupied
        assert slot.client.id == 5
        assert slot.vehicle.plate == "AA-00-01"
        assert slot.vehicle.vehicle_class == VehicleClass.CAR
        assert slot.vehicle.entry_time == slot.entry_time == T0

    def test_no_slot_of_class(self):
        facility = make_facility()
        before = slot_state(facility)

        with pytest.raises(NoSlotAvailable):
            park_vehicle(facility, "MOTO-1", VehicleClass.MOTORCYCLE, now=T0)

        assert slot_state(facility) == before

    def test_full_facility(self):
        facility = make_facility(1, 1)
        park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0)
        before = slot_state(facility)

        with pytest.raises(NoSlotAvailable):
            park_vehicle(facility, "AA-00-02", VehicleClass.CAR, now=T0)

        assert slot_state(facility) == before

    def test_unconfigured_facility_has_no_slots(self):
        with pytest.raises(NoSlotAvailable):
            park_vehicle(Facility(), "AA-00-01", VehicleClass.CAR)

    def test_unknown_client_parks_anonymously(self):
        facility = make_facility()
        with patch("garage.services.allocation_service.logger") as mock_logger:
            slot_id = park_vehicle(facility, "AA-00-01", VehicleClass.CAR, client_id=99, now=T0)
            mock_logger.warning.assert_called_once()
        assert find_vehicle_slot(facility, "AA-00-01").id == slot_id
        assert find_vehicle_slot(facility, "AA-00-01").client is None

    def test_same_plate_can_take_two_slots(self):
        facility = make_facility()
        assert park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0) == 1
        assert park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0) == 2
        assert occupancy_snapshot(facility).occupied_count == 2

    def test_empty_plate_rejected(self):
        facility = make_facility()
        with pytest.raises(ValueError):
            park_vehicle(facility, "", VehicleClass.CAR)
        assert occupancy_snapshot(facility).occupied_count == 0

    def test_blank_plate_rejected(self):
        facility = make_facility()
        with pytest.raises(ValueError):
            park_vehicle(facility, "   ", VehicleClass.CAR)
        assert occupancy_snapshot(facility).occupied_count == 0


class TestRemoveVehicle:
    def test_park_then_remove_frees_slot(self):
        facility = make_facility()
        slot_id = park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0)
        before = occupancy_snapshot(facility).occupied_count

        fee = remove_vehicle(facility, "AA-00-01", now=T0)

        slot = next(s for s in facility.slots if s.id == slot_id)
        assert fee == 1
        assert not slot.occupied
        assert slot.vehicle is None and slot.client is None and slot.entry_time is None
        assert occupancy_snapshot(facility).occupied_count == before - 1

    @pytest.mark.parametrize("minutes, expected", [(15, 1), (16, 2), (31, 3), (61, 5), (125, 7)])
    def test_fee_from_elapsed_time(self, minutes, expected):
        facility = make_facility()
        park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0)
        assert remove_vehicle(facility, "AA-00-01", now=T0 + timedelta(minutes=minutes)) == expected

    def test_uses_current_fee_schedule(self):
        facility = make_facility()
        park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0)
        facility.fees = FeeSchedule(first_hour=10, per_additional_hour=4)
        assert remove_vehicle(facility, "AA-00-01", now=T0 + timedelta(minutes=90)) == 14

    def test_full_day_cap_setting(self):
        facility = make_facility()
        park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0)
        with patch.object(settings, "FEE_FULL_DAY_CAP", True):
            fee = remove_vehicle(facility, "AA-00-01", now=T0 + timedelta(hours=30))
        assert fee == 20

    def test_unknown_plate(self):
        facility = make_facility()
        park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0)
        before = slot_state(facility)

        with pytest.raises(VehicleNotFound) as exc:
            remove_vehicle(facility, "ZZ-99-99", now=T0)

        assert exc.value.plate == "ZZ-99-99"
        assert slot_state(facility) == before

    def test_duplicate_plate_leaves_lowest_slot_first(self):
        facility = make_facility()
        park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0)
        park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0)

        remove_vehicle(facility, "AA-00-01", now=T0)

        assert find_vehicle_slot(facility, "AA-00-01").id == 2

    def test_clock_going_backwards_leaves_slot_occupied(self):
        facility = make_facility()
        park_vehicle(facility, "AA-00-01", VehicleClass.CAR, now=T0)
        with pytest.raises(ValueError):
            remove_vehicle(facility, "AA-00-01", now=T0 - timedelta(minutes=5))
        assert find_vehicle_slot(facility, "AA-00-01") is not None
