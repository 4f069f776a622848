"""
Shared test fixtures.

Every fixture builds a fresh in-memory ``TransportSession`` so tests never
share seat or ledger state.
"""

import pytest

from src.domain.entities import Provider, Rider, Vehicle
from src.domain.enums import RiderRole
from src.infrastructure.registries import TransportSession


def make_vehicle(vehicle_id="VH001", is_ac=True, capacity=32, faculty_seats=range(4)):
    vehicle = Vehicle(vehicle_id, is_ac, capacity)
    for seat in faculty_seats:
        vehicle.seat_map.mark_restricted(seat, RiderRole.FACULTY)
    return vehicle


@pytest.fixture
def session() -> TransportSession:
    """VH001 (AC, 32 seats, 0-3 faculty-only) plus one paid rider per role."""
    s = TransportSession()

    student = s.riders.register(Rider("STU301", "Bilal Qureshi", RiderRole.STUDENT))
    faculty = s.riders.register(
        Rider("FAC404", "Prof. Hina Siddiqui", RiderRole.FACULTY)
    )
    s.riders.register(Rider("STU999", "Unpaid Student", RiderRole.STUDENT))
    student.make_payment()
    faculty.make_payment()

    provider = Provider("Jadoon Transport")
    provider.add_vehicle(make_vehicle())
    s.providers.add(provider)
    return s


@pytest.fixture
def engine(session):
    return session.engine()


@pytest.fixture
def vh001(session):
    return session.providers.find_vehicle("VH001")
