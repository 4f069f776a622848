"""
Session builder
===============

Turns a validated ``SessionSpec`` into a ready ``TransportSession``:
riders registered (and marked paid where requested), providers with their
drivers, routes and vehicles, and seat restrictions applied before any
booking can happen.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from src.config import settings
from src.domain.entities import Driver, Provider, Rider, Route, Vehicle
from src.domain.ledger import ReservationLedger
from src.infrastructure.registries import TransportSession

from .schemas import ProviderSpec, SessionSpec

logger = logging.getLogger(__name__)


def build_session(spec: Union[SessionSpec, Mapping[str, Any]]) -> TransportSession:
    if not isinstance(spec, SessionSpec):
        spec = SessionSpec.model_validate(spec)

    max_entries = spec.ledger_max_entries or settings.ledger_max_entries
    session = TransportSession(
        ledger=ReservationLedger(
            code_prefix=settings.booking_code_prefix, max_entries=max_entries
        )
    )

    for r in spec.riders:
        rider = session.riders.register(Rider(r.rider_id, r.name, r.role))
        if r.paid:
            rider.make_payment()

    for p in spec.providers:
        session.providers.add(_build_provider(p))

    logger.info(
        "Session ready: %d riders (%d paid), %d vehicles across %d providers, "
        "ledger limit=%s",
        len(session.riders),
        sum(r.payment_completed for r in session.riders),
        sum(len(p.vehicles) for p in session.providers),
        len(session.providers),
        max_entries or "none",
    )
    return session


def _build_provider(spec: ProviderSpec) -> Provider:
    provider = Provider(spec.name)
    drivers = {}
    for d in spec.drivers:
        driver = Driver(d.name, d.license_number)
        provider.add_driver(driver)
        drivers[driver.license_number] = driver
    for rt in spec.routes:
        provider.add_route(Route(rt.start, rt.end, rt.distance_km))

    for v in spec.vehicles:
        vehicle = Vehicle(v.vehicle_id, v.is_ac, v.capacity)
        if v.driver_license:
            vehicle.assign_driver(drivers[v.driver_license])
        if v.route_index is not None:
            vehicle.assign_route(provider.routes[v.route_index])
        for restriction in v.restricted_seats:
            vehicle.seat_map.mark_restricted(restriction.seat_index, restriction.role)
        provider.add_vehicle(vehicle)
        logger.debug(
            "Vehicle %s added to %s (%d seats, %d restricted)",
            vehicle.vehicle_id,
            provider.name,
            vehicle.capacity,
            len(v.restricted_seats),
        )
    return provider
