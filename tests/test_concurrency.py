"""
Concurrency safety tests.

Demonstrates:
1. Concurrent requests for one seat produce exactly one booking.
2. Booking codes stay unique and follow ledger order under contention.
3. The ledger bound holds when many threads race for the last slot.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from src.domain.entities import Provider, Rider
from src.domain.enums import BookingErrorKind, RiderRole, SeatOutcome
from src.domain.ledger import ReservationLedger
from src.domain.seat_map import SeatMap
from src.infrastructure.registries import TransportSession
from tests.conftest import make_vehicle

WORKERS = 16


def _session(riders: int, capacity: int = 52, max_entries=None) -> TransportSession:
    session = TransportSession(ledger=ReservationLedger(max_entries=max_entries))
    for i in range(riders):
        rider = session.riders.register(Rider(f"STU{i}", f"Student {i}", RiderRole.STUDENT))
        rider.make_payment()
    provider = Provider("Jadoon Transport")
    provider.add_vehicle(make_vehicle(capacity=capacity, faculty_seats=()))
    session.providers.add(provider)
    return session


class TestSeatMapContention:
    def test_one_winner_per_seat(self):
        seats = SeatMap(4)
        barrier = threading.Barrier(WORKERS)

        def attempt(_):
            barrier.wait()
            return seats.try_book(2, RiderRole.STUDENT)

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            outcomes = list(pool.map(attempt, range(WORKERS)))

        assert outcomes.count(SeatOutcome.BOOKED) == 1
        assert outcomes.count(SeatOutcome.ALREADY_BOOKED) == WORKERS - 1


class TestEngineContention:
    def test_same_seat_single_booking(self):
        session = _session(WORKERS)
        engine = session.engine()
        barrier = threading.Barrier(WORKERS)

        def attempt(i):
            barrier.wait()
            return engine.book_seat(f"STU{i}", "VH001", 7)

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            results = list(pool.map(attempt, range(WORKERS)))

        assert sum(r.ok for r in results) == 1
        assert all(
            r.error == BookingErrorKind.SEAT_UNAVAILABLE for r in results if not r.ok
        )
        assert len(session.ledger) == 1

    def test_distinct_seats_get_unique_ordered_codes(self):
        session = _session(WORKERS)
        engine = session.engine()

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            results = list(
                pool.map(lambda i: engine.book_seat(f"STU{i}", "VH001", i), range(WORKERS))
            )

        assert all(r.ok for r in results)
        sequences = [b.sequence for b in session.ledger.list_all()]
        assert sequences == list(range(1, WORKERS + 1))
        assert len({r.booking.code for r in results}) == WORKERS

    def test_bounded_ledger_never_overflows(self):
        session = _session(WORKERS, max_entries=5)
        engine = session.engine()

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            results = list(
                pool.map(lambda i: engine.book_seat(f"STU{i}", "VH001", i), range(WORKERS))
            )

        assert sum(r.ok for r in results) == 5
        assert all(
            r.error == BookingErrorKind.LEDGER_FULL for r in results if not r.ok
        )
        seat_map = session.providers.find_vehicle("VH001").seat_map
        assert len(seat_map.available_seats()) == seat_map.capacity - 5
