"""
Ticket Type Request Value Object

One line of a purchase: a ticket category and how many of it.
"""

from typing import Any

import attrs

from src.service.ticketing.domain.enum.ticket_type import TicketType


@attrs.define(frozen=True)
class TicketTypeRequest:
    """Ticket Type Request (Value Object)

    `ticket_type` is a TicketType member or its lower-case value ('adult',
    'child', 'infant'). Anything else, including 'ADULT', is an unknown ticket
    type. Neither field is validated here: the category is checked by the
    purchase validation pass so its ordering holds, and counts are taken as given.
    """

    ticket_type: TicketType | Any
    no_of_tickets: int
