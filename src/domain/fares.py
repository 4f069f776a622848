"""
Fare Policy  (Strategy Pattern)
===============================

Fare = TIER[role][amenity]

| role    | AC   | non-AC |
|---------|------|--------|
| STUDENT | 7000 | 5000   |
| FACULTY | 5000 | 3000   |

Amounts are in the smallest currency unit.  The fare is computed once, at
booking time, and frozen into the ``Booking`` record.

Complexity: O(1) per fare calculation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Mapping

from .enums import RiderRole
from .errors import UnknownFareTier


# (ac_fare, non_ac_fare) per role
DEFAULT_FARE_TIERS: Mapping[RiderRole, tuple[int, int]] = MappingProxyType(
    {
        RiderRole.STUDENT: (7000, 5000),
        RiderRole.FACULTY: (5000, 3000),
    }
)


# ── Strategy hierarchy ────────────────────────────────────────────────


class FarePolicy(ABC):
    @abstractmethod
    def fare_for(self, role: RiderRole, is_ac: bool) -> int: ...


class RoleTierFarePolicy(FarePolicy):
    """Looks the fare up in a role-keyed table of (AC, non-AC) amounts."""

    def __init__(
        self, tiers: Mapping[RiderRole, tuple[int, int]] = DEFAULT_FARE_TIERS
    ):
        self.tiers = MappingProxyType(dict(tiers))

    def fare_for(self, role: RiderRole, is_ac: bool) -> int:
        try:
            ac_fare, non_ac_fare = self.tiers[role]
        except KeyError:
            raise UnknownFareTier(f"No fare tier configured for {role}") from None
        return ac_fare if is_ac else non_ac_fare


_DEFAULT_POLICY = RoleTierFarePolicy()


def compute_fare(role: RiderRole, is_ac: bool) -> int:
    """Fare for *role* on a vehicle with or without air-conditioning."""
    return _DEFAULT_POLICY.fare_for(role, is_ac)
