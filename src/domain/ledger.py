"""
Append-only reservation ledger.

Booking codes are ``<prefix><sequence>`` where the sequence is 1-based and
drawn from an atomically incremented counter, so codes stay unique and
strictly increasing in ledger order even with concurrent bookers.
"""

from __future__ import annotations

import itertools
import threading
from typing import Iterator, Optional

from .entities import Booking, Rider, Vehicle
from .errors import LedgerFull

DEFAULT_CODE_PREFIX = "BK"


class _LedgerView:
    """Restartable iterable: every ``iter()`` walks a fresh snapshot."""

    def __init__(self, ledger: ReservationLedger):
        self._ledger = ledger

    def __iter__(self) -> Iterator[Booking]:
        return iter(self._ledger._snapshot())


class ReservationLedger:
    def __init__(
        self,
        code_prefix: str = DEFAULT_CODE_PREFIX,
        max_entries: Optional[int] = None,
    ):
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.code_prefix = code_prefix
        self.max_entries = max_entries
        self.lock = threading.RLock()
        self._entries: list[Booking] = []
        self._sequence = itertools.count(1)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def is_full(self) -> bool:
        return self.max_entries is not None and len(self._entries) >= self.max_entries

    def _snapshot(self) -> tuple[Booking, ...]:
        with self.lock:
            return tuple(self._entries)

    def record(
        self, rider: Rider, vehicle: Vehicle, seat_index: int, fare: int
    ) -> Booking:
        """Append a new booking and return it."""
        with self.lock:
            if self.is_full:
                raise LedgerFull(f"Ledger is full ({self.max_entries} bookings)")
            sequence = next(self._sequence)
            booking = Booking(
                code=f"{self.code_prefix}{sequence}",
                rider=rider,
                vehicle=vehicle,
                seat_index=seat_index,
                fare=fare,
                sequence=sequence,
            )
            self._entries.append(booking)
            return booking

    def list_all(self) -> _LedgerView:
        return _LedgerView(self)

    def bookings_for_rider(self, rider_id: str) -> list[Booking]:
        return [b for b in self.list_all() if b.rider.rider_id == rider_id]

    def bookings_for_vehicle(self, vehicle_id: str) -> list[Booking]:
        return [b for b in self.list_all() if b.vehicle.vehicle_id == vehicle_id]
