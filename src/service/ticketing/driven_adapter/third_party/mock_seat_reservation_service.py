"""Mock seat booking service that logs the reservation instead of holding real seats."""

from datetime import UTC, datetime

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)


class MockSeatReservationService(ISeatReservationService):
    def __init__(self) -> None:
        self.reservations: list[dict] = []  # Store reservations for testing

    @Logger.io
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        self.reservations.append(
            {
                'account_id': account_id,
                'seats': total_seats_to_allocate,
                'reserved_at': datetime.now(UTC),
            }
        )
        Logger.base.info(
            f'🎫 [MOCK RESERVATION] Reserved {total_seats_to_allocate} seat(s) for account {account_id}'
        )
