"""
Reservation error taxonomy.

Booking attempts report rejections through ``BookingResult`` rather than
raising; the classes below are raised for setup-time misuse and by
``BookingResult.unwrap()`` for callers that prefer exceptions.
"""

from __future__ import annotations

from .enums import BookingErrorKind, SeatStatus


class ReservationError(Exception):
    """Root of every error raised by the reservation core."""

    kind: BookingErrorKind | None = None


# ── Booking rejections ────────────────────────────────────────────────


class RiderNotFound(ReservationError):
    kind = BookingErrorKind.RIDER_NOT_FOUND


class VehicleNotFound(ReservationError):
    kind = BookingErrorKind.VEHICLE_NOT_FOUND


class PaymentIncomplete(ReservationError):
    kind = BookingErrorKind.PAYMENT_INCOMPLETE


class SeatUnavailable(ReservationError):
    """Seat index out of range, or the seat is already booked."""

    kind = BookingErrorKind.SEAT_UNAVAILABLE


class RoleMismatch(ReservationError):
    kind = BookingErrorKind.ROLE_MISMATCH


class LedgerFull(ReservationError):
    kind = BookingErrorKind.LEDGER_FULL


ERRORS_BY_KIND: dict[BookingErrorKind, type[ReservationError]] = {
    cls.kind: cls
    for cls in (
        RiderNotFound,
        VehicleNotFound,
        PaymentIncomplete,
        SeatUnavailable,
        RoleMismatch,
        LedgerFull,
    )
}


# ── Setup-time misuse ─────────────────────────────────────────────────


class InvalidSeatIndex(ReservationError):
    """Raised when a setup call addresses a seat outside the vehicle."""

    def __init__(self, seat_index: int, capacity: int):
        self.seat_index = seat_index
        self.capacity = capacity
        super().__init__(
            f"Seat index {seat_index} outside 0..{capacity - 1}"
        )


class SeatMapSealed(ReservationError):
    """Raised when a role restriction is changed after booking started."""


class InvalidSeatTransition(ReservationError):
    """Raised when a seat status change violates the state machine."""

    def __init__(self, current: SeatStatus, target: SeatStatus):
        super().__init__(f"Cannot transition seat from {current} to {target}")


class DuplicateIdentifier(ReservationError):
    """Raised when a registry already holds an entry with the same id."""


class UnknownFareTier(ReservationError):
    """Raised when a fare policy has no tier for a rider role."""
