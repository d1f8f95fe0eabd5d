"""Ticketing Enums"""

from src.service.ticketing.domain.enum.ticket_type import TICKET_PRICES, TicketType

__all__ = ['TICKET_PRICES', 'TicketType']
