"""
Ticket Tally Value Object

Per-category ticket counts of a purchase, with the derived price and seat totals.
"""

from collections.abc import Iterable

import attrs

from src.service.ticketing.domain.enum.ticket_type import TicketType
from src.service.ticketing.domain.invalid_purchase_error import InvalidPurchaseError
from src.service.ticketing.domain.value_object.ticket_type_request import TicketTypeRequest


@attrs.define(frozen=True)
class TicketTally:
    adults: int = 0
    children: int = 0
    infants: int = 0

    @classmethod
    def from_requests(cls, ticket_type_requests: Iterable[TicketTypeRequest]) -> 'TicketTally':
        """Count tickets per category, failing on the first unknown category"""
        counts = dict.fromkeys(TicketType, 0)
        for request in ticket_type_requests:
            ticket_type = TicketType.parse(request.ticket_type)
            if ticket_type is None:
                raise InvalidPurchaseError.unknown_ticket_type()
            counts[ticket_type] += request.no_of_tickets

        return cls(
            adults=counts[TicketType.ADULT],
            children=counts[TicketType.CHILD],
            infants=counts[TicketType.INFANT],
        )

    def count_of(self, ticket_type: TicketType) -> int:
        match ticket_type:
            case TicketType.ADULT:
                return self.adults
            case TicketType.CHILD:
                return self.children
            case TicketType.INFANT:
                return self.infants

    @property
    def total_tickets(self) -> int:
        return self.adults + self.children + self.infants

    @property
    def total_amount(self) -> int:
        return sum(self.count_of(ticket_type) * ticket_type.price for ticket_type in TicketType)

    @property
    def total_seats(self) -> int:
        return sum(
            self.count_of(ticket_type) for ticket_type in TicketType if ticket_type.occupies_seat
        )
