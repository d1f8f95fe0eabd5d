"""Ticketing Value Objects"""

from src.service.ticketing.domain.value_object.purchase_result import PurchaseResult
from src.service.ticketing.domain.value_object.ticket_tally import TicketTally
from src.service.ticketing.domain.value_object.ticket_type_request import TicketTypeRequest

__all__ = ['PurchaseResult', 'TicketTally', 'TicketTypeRequest']
