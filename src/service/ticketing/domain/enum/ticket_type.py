"""Ticket Type Enum"""

from enum import StrEnum
from typing import Any


class TicketType(StrEnum):
    ADULT = 'adult'
    CHILD = 'child'
    INFANT = 'infant'

    @property
    def price(self) -> int:
        return TICKET_PRICES[self]

    @property
    def occupies_seat(self) -> bool:
        # Infants sit on an adult's lap
        return self is not TicketType.INFANT

    @classmethod
    def parse(cls, value: Any) -> 'TicketType | None':
        """Resolve a member or its string value, None for anything else"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


TICKET_PRICES: dict[TicketType, int] = {
    TicketType.ADULT: 20,
    TicketType.CHILD: 10,
    TicketType.INFANT: 0,
}
