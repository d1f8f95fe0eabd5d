"""
Seat Reservation Service Interface

Port for the third-party seat booking service.
"""

from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve seats for the account; assumed to always succeed"""
        pass
