"""
Reservation Engine
==================

The only orchestrator of a booking.  Per request:

1. Look up the rider            -> RIDER_NOT_FOUND
2. Check the payment flag        -> PAYMENT_INCOMPLETE
3. Find the vehicle across every provider -> VEHICLE_NOT_FOUND
4. Check-and-book the seat       -> SEAT_UNAVAILABLE | ROLE_MISMATCH
   (a bounded ledger that is already full -> LEDGER_FULL, checked first)
5. Freeze the fare and record the booking in the ledger.

Steps 1-3 are pure reads, so a rejection there leaves no trace.  Steps 4-5
run under the ledger lock: the seat is never booked without a ledger entry
and booking codes follow ledger order.

Rejections are returned as ``BookingResult`` values; nothing is retried.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .entities import Booking
from .enums import SEAT_OUTCOME_ERRORS, BookingErrorKind, SeatOutcome
from .errors import ERRORS_BY_KIND, ReservationError
from .fares import FarePolicy, RoleTierFarePolicy
from .ledger import ReservationLedger

if TYPE_CHECKING:
    from src.infrastructure.registries import ProviderRegistry, RiderRegistry


@dataclass(frozen=True)
class BookingResult:
    booking: Optional[Booking] = None
    error: Optional[BookingErrorKind] = None
    detail: str = ""

    @classmethod
    def success(cls, booking: Booking) -> BookingResult:
        return cls(booking=booking)

    @classmethod
    def failure(cls, error: BookingErrorKind, detail: str) -> BookingResult:
        return cls(error=error, detail=detail)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Booking:
        """Return the booking, or raise the error matching ``self.error``."""
        if self.error is None:
            assert self.booking is not None
            return self.booking
        raise ERRORS_BY_KIND.get(self.error, ReservationError)(self.detail)


class ReservationEngine:
    def __init__(
        self,
        riders: RiderRegistry,
        providers: ProviderRegistry,
        ledger: ReservationLedger,
        fare_policy: Optional[FarePolicy] = None,
    ):
        self.riders = riders
        self.providers = providers
        self.ledger = ledger
        self.fare_policy = fare_policy or RoleTierFarePolicy()

    def book_seat(
        self, rider_id: str, vehicle_id: str, seat_index: int
    ) -> BookingResult:
        rider = self.riders.get_by_id(rider_id)
        if rider is None:
            return BookingResult.failure(
                BookingErrorKind.RIDER_NOT_FOUND, f"Rider not found: {rider_id}"
            )
        if not rider.payment_completed:
            return BookingResult.failure(
                BookingErrorKind.PAYMENT_INCOMPLETE,
                f"Payment not completed for rider {rider_id}",
            )

        vehicle = self.providers.find_vehicle(vehicle_id)
        if vehicle is None:
            return BookingResult.failure(
                BookingErrorKind.VEHICLE_NOT_FOUND,
                f"Vehicle not found: {vehicle_id}",
            )

        with self.ledger.lock:
            if self.ledger.is_full:
                return BookingResult.failure(
                    BookingErrorKind.LEDGER_FULL,
                    f"Ledger is full ({self.ledger.max_entries} bookings)",
                )

            outcome = vehicle.seat_map.try_book(seat_index, rider.role)
            if outcome is not SeatOutcome.BOOKED:
                return BookingResult.failure(
                    SEAT_OUTCOME_ERRORS[outcome],
                    _describe(outcome, seat_index, vehicle_id),
                )

            fare = self.fare_policy.fare_for(rider.role, vehicle.is_ac)
            booking = self.ledger.record(rider, vehicle, seat_index, fare)
        return BookingResult.success(booking)


def _describe(outcome: SeatOutcome, seat_index: int, vehicle_id: str) -> str:
    if outcome is SeatOutcome.INVALID_INDEX:
        return f"Seat {seat_index} does not exist on vehicle {vehicle_id}"
    if outcome is SeatOutcome.ALREADY_BOOKED:
        return f"Seat {seat_index} on vehicle {vehicle_id} is already booked"
    return f"Role-based seat violation on seat {seat_index} of {vehicle_id}"
