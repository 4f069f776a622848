"""Unit tests for the reservation ledger."""

import pytest

from src.domain.entities import Rider, Vehicle
from src.domain.enums import RiderRole
from src.domain.errors import LedgerFull
from src.domain.ledger import ReservationLedger


@pytest.fixture
def rider():
    return Rider("STU301", "Bilal Qureshi", RiderRole.STUDENT, payment_completed=True)


@pytest.fixture
def vehicle():
    return Vehicle("VH001", True, 32)


class TestRecord:
    def test_first_code_is_bk1(self, rider, vehicle):
        booking = ReservationLedger().record(rider, vehicle, 6, 7000)
        assert booking.code == "BK1"
        assert booking.sequence == 1
        assert booking.fare == 7000
        assert booking.seat_index == 6
        assert booking.rider is rider
        assert booking.vehicle is vehicle

    def test_codes_are_sequential(self, rider, vehicle):
        ledger = ReservationLedger()
        codes = [ledger.record(rider, vehicle, i, 5000).code for i in range(3)]
        assert codes == ["BK1", "BK2", "BK3"]

    def test_custom_prefix(self, rider, vehicle):
        booking = ReservationLedger(code_prefix="TR").record(rider, vehicle, 0, 1)
        assert booking.code == "TR1"

    def test_booking_is_immutable(self, rider, vehicle):
        booking = ReservationLedger().record(rider, vehicle, 6, 7000)
        with pytest.raises(AttributeError):
            booking.fare = 1

    def test_booking_is_hashable(self, rider, vehicle):
        booking = ReservationLedger().record(rider, vehicle, 6, 7000)
        assert len({booking}) == 1
        assert {booking: booking.code}[booking] == "BK1"

    def test_booking_identity_ignores_rider_state(self, rider, vehicle):
        ledger = ReservationLedger()
        booking = ledger.record(rider, vehicle, 6, 7000)
        key = hash(booking)
        rider.payment_completed = False
        assert hash(booking) == key
        assert booking == next(iter(ledger.list_all()))
        assert booking != ledger.record(rider, vehicle, 6, 7000)

    def test_booking_role_follows_rider(self, rider, vehicle):
        booking = ReservationLedger().record(rider, vehicle, 6, 7000)
        assert booking.role is RiderRole.STUDENT

    def test_bounded_ledger_rejects_overflow(self, rider, vehicle):
        ledger = ReservationLedger(max_entries=2)
        ledger.record(rider, vehicle, 0, 1)
        ledger.record(rider, vehicle, 1, 1)
        assert ledger.is_full
        with pytest.raises(LedgerFull):
            ledger.record(rider, vehicle, 2, 1)
        assert len(ledger) == 2

    def test_invalid_bound(self):
        with pytest.raises(ValueError):
            ReservationLedger(max_entries=0)


class TestListAll:
    def test_insertion_order(self, rider, vehicle):
        ledger = ReservationLedger()
        for i in (5, 2, 9):
            ledger.record(rider, vehicle, i, 5000)
        bookings = list(ledger.list_all())
        assert [b.seat_index for b in bookings] == [5, 2, 9]
        assert [b.sequence for b in bookings] == sorted(b.sequence for b in bookings)

    def test_restartable(self, rider, vehicle):
        ledger = ReservationLedger()
        ledger.record(rider, vehicle, 0, 1)
        view = ledger.list_all()
        assert list(view) == list(view)

    def test_iteration_unaffected_by_concurrent_append(self, rider, vehicle):
        ledger = ReservationLedger()
        ledger.record(rider, vehicle, 0, 1)
        it = iter(ledger.list_all())
        ledger.record(rider, vehicle, 1, 1)
        assert [b.code for b in it] == ["BK1"]

    def test_view_sees_later_bookings(self, rider, vehicle):
        ledger = ReservationLedger()
        view = ledger.list_all()
        assert list(view) == []
        ledger.record(rider, vehicle, 0, 1)
        assert len(list(view)) == 1

    def test_filters(self, rider, vehicle):
        ledger = ReservationLedger()
        other = Rider("FAC404", "Prof. Hina Siddiqui", RiderRole.FACULTY)
        ledger.record(rider, vehicle, 6, 7000)
        ledger.record(other, vehicle, 1, 5000)
        assert [b.code for b in ledger.bookings_for_rider("FAC404")] == ["BK2"]
        assert len(ledger.bookings_for_vehicle("VH001")) == 2
        assert ledger.bookings_for_vehicle("VH999") == []
