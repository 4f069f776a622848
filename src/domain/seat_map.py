"""
Per-vehicle seat map.

Each slot carries a ``SeatStatus`` and an optional role restriction.  The
role rule is two-sided:

* a seat restricted to role R accepts only riders of role R;
* an unrestricted seat accepts only non-privileged riders.

So every seat is effectively role-exclusive, not just the marked ones.

``try_book`` performs the whole check-and-set under the map's lock, so two
concurrent callers can never both observe the same seat as available.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from .enums import SEAT_TRANSITIONS, RiderRole, SeatOutcome, SeatStatus
from .errors import InvalidSeatIndex, InvalidSeatTransition, SeatMapSealed


@dataclass
class SeatSlot:
    status: SeatStatus = SeatStatus.AVAILABLE
    restricted_to: Optional[RiderRole] = None

    @property
    def is_booked(self) -> bool:
        return self.status is SeatStatus.BOOKED

    def accepts(self, role: RiderRole) -> bool:
        if self.restricted_to is not None:
            return role == self.restricted_to
        return not role.is_privileged

    def transition_to(self, new_status: SeatStatus) -> None:
        """Move to *new_status* if the transition is legal, else raise."""
        if new_status not in SEAT_TRANSITIONS.get(self.status, set()):
            raise InvalidSeatTransition(self.status, new_status)
        self.status = new_status


class SeatMap:
    """Fixed-capacity array of seat slots for one vehicle."""

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"Seat capacity must be positive, got {capacity}")
        self._slots = [SeatSlot() for _ in range(capacity)]
        self._lock = threading.Lock()
        self._sealed = False

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _in_range(self, seat_index: int) -> bool:
        return 0 <= seat_index < len(self._slots)

    # ── Setup phase ───────────────────────────────────────────────────

    def mark_restricted(self, seat_index: int, role: RiderRole) -> None:
        """Reserve *seat_index* for riders of *role*.  Setup phase only."""
        with self._lock:
            if not self._in_range(seat_index):
                raise InvalidSeatIndex(seat_index, self.capacity)
            if self._sealed:
                raise SeatMapSealed(
                    "Seat restrictions are fixed once booking has started"
                )
            self._slots[seat_index].restricted_to = role

    # ── Booking ───────────────────────────────────────────────────────

    def try_book(self, seat_index: int, rider_role: RiderRole) -> SeatOutcome:
        """Atomically check *seat_index* for *rider_role* and book it."""
        with self._lock:
            if not self._in_range(seat_index):
                return SeatOutcome.INVALID_INDEX
            slot = self._slots[seat_index]
            if slot.is_booked:
                return SeatOutcome.ALREADY_BOOKED
            if not slot.accepts(rider_role):
                return SeatOutcome.ROLE_MISMATCH
            slot.transition_to(SeatStatus.BOOKED)
            self._sealed = True
            return SeatOutcome.BOOKED

    # ── Queries ───────────────────────────────────────────────────────

    def is_booked(self, seat_index: int) -> bool:
        if not self._in_range(seat_index):
            raise InvalidSeatIndex(seat_index, self.capacity)
        return self._slots[seat_index].is_booked

    def restriction_of(self, seat_index: int) -> Optional[RiderRole]:
        if not self._in_range(seat_index):
            raise InvalidSeatIndex(seat_index, self.capacity)
        return self._slots[seat_index].restricted_to

    def available_seats(self, role: Optional[RiderRole] = None) -> list[int]:
        """Indexes of open seats, optionally only those *role* may take."""
        with self._lock:
            return [
                i
                for i, slot in enumerate(self._slots)
                if not slot.is_booked and (role is None or slot.accepts(role))
            ]

    def snapshot(self) -> tuple[SeatSlot, ...]:
        """Copy of every slot, safe to compare before and after a call."""
        with self._lock:
            return tuple(
                SeatSlot(slot.status, slot.restricted_to) for slot in self._slots
            )
