"""Domain enumerations and state-transition rules."""

import enum


class RiderRole(str, enum.Enum):
    STUDENT = "STUDENT"
    FACULTY = "FACULTY"

    @property
    def is_privileged(self) -> bool:
        """Roles that only ever sit in seats explicitly restricted to them."""
        return self in PRIVILEGED_ROLES


PRIVILEGED_ROLES: frozenset[RiderRole] = frozenset({RiderRole.FACULTY})


class SeatStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    BOOKED = "BOOKED"


# State machine: maps current status -> set of valid next statuses.
# No cancellation is modelled, so BOOKED is terminal.
SEAT_TRANSITIONS: dict[SeatStatus, set[SeatStatus]] = {
    SeatStatus.AVAILABLE: {SeatStatus.BOOKED},
    SeatStatus.BOOKED: set(),
}


class SeatOutcome(str, enum.Enum):
    """Result of a single check-and-book attempt on a seat map."""

    BOOKED = "BOOKED"
    INVALID_INDEX = "INVALID_INDEX"
    ALREADY_BOOKED = "ALREADY_BOOKED"
    ROLE_MISMATCH = "ROLE_MISMATCH"


class BookingErrorKind(str, enum.Enum):
    RIDER_NOT_FOUND = "RIDER_NOT_FOUND"
    VEHICLE_NOT_FOUND = "VEHICLE_NOT_FOUND"
    PAYMENT_INCOMPLETE = "PAYMENT_INCOMPLETE"
    SEAT_UNAVAILABLE = "SEAT_UNAVAILABLE"
    ROLE_MISMATCH = "ROLE_MISMATCH"
    LEDGER_FULL = "LEDGER_FULL"


# Seat-level outcomes collapse onto the coarser booking taxonomy.
SEAT_OUTCOME_ERRORS: dict[SeatOutcome, BookingErrorKind] = {
    SeatOutcome.INVALID_INDEX: BookingErrorKind.SEAT_UNAVAILABLE,
    SeatOutcome.ALREADY_BOOKED: BookingErrorKind.SEAT_UNAVAILABLE,
    SeatOutcome.ROLE_MISMATCH: BookingErrorKind.ROLE_MISMATCH,
}
