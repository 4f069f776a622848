"""
Domain entities.

Patterns used
-------------
- ``Vehicle`` owns its ``SeatMap``; nothing else mutates seat state.
- ``Booking`` is an immutable value: the fare is frozen at creation and
  later fare-policy changes never alter it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .enums import RiderRole
from .errors import DuplicateIdentifier
from .seat_map import SeatMap

LONG_ROUTE_KM = 15.0


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Driver:
    name: str
    license_number: str


@dataclass(frozen=True)
class Route:
    start: str
    end: str
    distance_km: float

    @property
    def is_long_route(self) -> bool:
        return self.distance_km > LONG_ROUTE_KM


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class Rider:
    rider_id: str
    name: str
    role: RiderRole
    payment_completed: bool = False

    def make_payment(self) -> None:
        """Mark the rider as paid.  The flag never reverts."""
        self.payment_completed = True


class Vehicle:
    def __init__(self, vehicle_id: str, is_ac: bool, capacity: int):
        self.vehicle_id = vehicle_id
        self.is_ac = is_ac
        self.seat_map = SeatMap(capacity)
        self.driver: Optional[Driver] = None
        self.route: Optional[Route] = None

    @property
    def capacity(self) -> int:
        return self.seat_map.capacity

    def assign_driver(self, driver: Driver) -> None:
        self.driver = driver

    def assign_route(self, route: Route) -> None:
        self.route = route

    def __repr__(self) -> str:
        return (
            f"Vehicle(vehicle_id={self.vehicle_id!r}, is_ac={self.is_ac}, "
            f"capacity={self.capacity})"
        )


@dataclass
class Provider:
    """A transport operator owning vehicles, drivers and routes."""

    name: str
    drivers: list[Driver] = field(default_factory=list)
    routes: list[Route] = field(default_factory=list)
    _vehicles: dict[str, Vehicle] = field(default_factory=dict, repr=False)

    @property
    def vehicles(self) -> list[Vehicle]:
        return list(self._vehicles.values())

    def add_driver(self, driver: Driver) -> None:
        self.drivers.append(driver)

    def add_route(self, route: Route) -> None:
        self.routes.append(route)

    def add_vehicle(self, vehicle: Vehicle) -> None:
        if vehicle.vehicle_id in self._vehicles:
            raise DuplicateIdentifier(
                f"{self.name} already operates vehicle {vehicle.vehicle_id}"
            )
        self._vehicles[vehicle.vehicle_id] = vehicle

    def get_vehicle_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        return self._vehicles.get(vehicle_id)


@dataclass(frozen=True, eq=False)
class Booking:
    code: str
    rider: Rider
    vehicle: Vehicle
    seat_index: int
    fare: int
    sequence: int
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def role(self) -> RiderRole:
        return self.rider.role
