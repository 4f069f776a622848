"""
Seed data -- the reference session used by ``main.py`` and the tests.

Creates:
  - 2 riders (one student, one faculty member), neither paid yet
  - 1 provider (Jadoon Transport) with one driver and one route
  - 1 air-conditioned 32-seat vehicle, seats 0-3 reserved for faculty
"""

from src.bootstrap.schemas import SessionSpec
from src.domain.enums import RiderRole

RIDERS = [
    {"rider_id": "STU301", "name": "Bilal Qureshi", "role": RiderRole.STUDENT},
    {"rider_id": "FAC404", "name": "Prof. Hina Siddiqui", "role": RiderRole.FACULTY},
]

PROVIDERS = [
    {
        "name": "Jadoon Transport",
        "drivers": [{"name": "Haris Khan", "license_number": "L-786"}],
        "routes": [{"start": "DHA", "end": "FAST NUCES", "distance_km": 18.5}],
        "vehicles": [
            {
                "vehicle_id": "VH001",
                "is_ac": True,
                "capacity": 32,
                "driver_license": "L-786",
                "route_index": 0,
                "restricted_seats": [
                    {"seat_index": i, "role": RiderRole.FACULTY} for i in range(4)
                ],
            }
        ],
    }
]


def seed_spec() -> SessionSpec:
    return SessionSpec(riders=RIDERS, providers=PROVIDERS)
