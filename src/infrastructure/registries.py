"""
Registry Pattern -- in-memory lookups so domain logic stays storage-agnostic.

Registries hold the reference data a caller supplies before any booking.
Lookups return ``None`` on absence; the engine turns absence into a
booking rejection.
"""

from __future__ import annotations

from typing import Iterator, Optional

from src.domain.engine import ReservationEngine
from src.domain.entities import Provider, Rider, Vehicle
from src.domain.errors import DuplicateIdentifier
from src.domain.fares import FarePolicy, RoleTierFarePolicy
from src.domain.ledger import ReservationLedger


class RiderRegistry:
    def __init__(self) -> None:
        self._riders: dict[str, Rider] = {}

    def __len__(self) -> int:
        return len(self._riders)

    def __iter__(self) -> Iterator[Rider]:
        return iter(list(self._riders.values()))

    def register(self, rider: Rider) -> Rider:
        if rider.rider_id in self._riders:
            raise DuplicateIdentifier(f"Rider already registered: {rider.rider_id}")
        self._riders[rider.rider_id] = rider
        return rider

    def get_by_id(self, rider_id: str) -> Optional[Rider]:
        return self._riders.get(rider_id)


class ProviderRegistry:
    def __init__(self) -> None:
        self._providers: dict[str, Provider] = {}

    def __len__(self) -> int:
        return len(self._providers)

    def __iter__(self) -> Iterator[Provider]:
        return iter(list(self._providers.values()))

    def add(self, provider: Provider) -> Provider:
        if provider.name in self._providers:
            raise DuplicateIdentifier(f"Provider already registered: {provider.name}")
        self._providers[provider.name] = provider
        return provider

    def get_by_name(self, name: str) -> Optional[Provider]:
        return self._providers.get(name)

    def find_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        """First vehicle with *vehicle_id* across providers, in insertion order."""
        for provider in self._providers.values():
            vehicle = provider.get_vehicle_by_id(vehicle_id)
            if vehicle is not None:
                return vehicle
        return None


class TransportSession:
    """Explicit context for one booking session; replaces a global root."""

    def __init__(
        self,
        ledger: Optional[ReservationLedger] = None,
        fare_policy: Optional[FarePolicy] = None,
    ):
        self.riders = RiderRegistry()
        self.providers = ProviderRegistry()
        self.ledger = ledger or ReservationLedger()
        self.fare_policy = fare_policy or RoleTierFarePolicy()
        self._engine: Optional[ReservationEngine] = None

    def engine(self) -> ReservationEngine:
        if self._engine is None:
            self._engine = ReservationEngine(
                self.riders, self.providers, self.ledger, self.fare_policy
            )
        return self._engine
