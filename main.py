"""
Campus Transport Seat Reservation
=================================
Entry point. Run with: python main.py

Builds the seed session, collects payment from both riders and books one
seat each, logging every outcome.
"""

import logging

from seed import seed_spec
from src.bootstrap.builder import build_session
from src.config import settings

logger = logging.getLogger(__name__)

REQUESTS = [
    ("STU301", "VH001", 6),
    ("FAC404", "VH001", 1),
]


def main() -> int:
    logging.basicConfig(level=settings.log_level)
    session = build_session(seed_spec())
    engine = session.engine()

    for rider_id, _, _ in REQUESTS:
        session.riders.get_by_id(rider_id).make_payment()

    failures = 0
    for rider_id, vehicle_id, seat in REQUESTS:
        result = engine.book_seat(rider_id, vehicle_id, seat)
        if result.ok:
            booking = result.booking
            logger.info(
                "Booked %s: rider=%s vehicle=%s seat=%d fare=%d",
                booking.code,
                rider_id,
                vehicle_id,
                seat,
                booking.fare,
            )
        else:
            failures += 1
            logger.warning("Booking rejected (%s): %s", result.error.value, result.detail)

    logger.info("%d booking(s) in ledger", len(session.ledger))
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
