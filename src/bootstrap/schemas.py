"""Pydantic schemas for the reference data a session is built from."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.config import settings
from src.domain.enums import RiderRole


class RiderSpec(BaseModel):
    rider_id: str = Field(..., min_length=1, max_length=32)
    name: str = Field(..., min_length=1, max_length=120)
    role: RiderRole
    paid: bool = Field(False, description="Payment already completed.")


class DriverSpec(BaseModel):
    name: str = Field(..., min_length=1)
    license_number: str = Field(..., min_length=1)


class RouteSpec(BaseModel):
    start: str = Field(..., min_length=1)
    end: str = Field(..., min_length=1)
    distance_km: float = Field(..., gt=0)


class SeatRestrictionSpec(BaseModel):
    seat_index: int = Field(..., ge=0)
    role: RiderRole


class VehicleSpec(BaseModel):
    vehicle_id: str = Field(..., min_length=1, max_length=32)
    is_ac: bool = False
    capacity: int = Field(..., ge=1)
    restricted_seats: list[SeatRestrictionSpec] = []
    driver_license: Optional[str] = Field(
        None, description="License number of one of the provider's drivers."
    )
    route_index: Optional[int] = Field(
        None, ge=0, description="Position in the provider's route list."
    )

    @model_validator(mode="after")
    def _check_seats(self) -> VehicleSpec:
        if self.capacity > settings.max_seat_capacity:
            raise ValueError(
                f"capacity {self.capacity} exceeds the "
                f"{settings.max_seat_capacity}-seat limit"
            )
        for restriction in self.restricted_seats:
            if restriction.seat_index >= self.capacity:
                raise ValueError(
                    f"restricted seat {restriction.seat_index} outside "
                    f"0..{self.capacity - 1}"
                )
        return self


class ProviderSpec(BaseModel):
    name: str = Field(..., min_length=1)
    drivers: list[DriverSpec] = []
    routes: list[RouteSpec] = []
    vehicles: list[VehicleSpec] = []

    @model_validator(mode="after")
    def _check_references(self) -> ProviderSpec:
        licenses = {d.license_number for d in self.drivers}
        seen: set[str] = set()
        for vehicle in self.vehicles:
            if vehicle.vehicle_id in seen:
                raise ValueError(f"duplicate vehicle id {vehicle.vehicle_id}")
            seen.add(vehicle.vehicle_id)
            if vehicle.driver_license and vehicle.driver_license not in licenses:
                raise ValueError(
                    f"vehicle {vehicle.vehicle_id} references unknown driver "
                    f"{vehicle.driver_license}"
                )
            if vehicle.route_index is not None and vehicle.route_index >= len(
                self.routes
            ):
                raise ValueError(
                    f"vehicle {vehicle.vehicle_id} references unknown route "
                    f"#{vehicle.route_index}"
                )
        return self


class SessionSpec(BaseModel):
    riders: list[RiderSpec] = []
    providers: list[ProviderSpec] = []
    ledger_max_entries: Optional[int] = Field(None, ge=1)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> SessionSpec:
        rider_ids = [r.rider_id for r in self.riders]
        if len(rider_ids) != len(set(rider_ids)):
            raise ValueError("rider ids must be unique")
        names = [p.name for p in self.providers]
        if len(names) != len(set(names)):
            raise ValueError("provider names must be unique")
        return self
