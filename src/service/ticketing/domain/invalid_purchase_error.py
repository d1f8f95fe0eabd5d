"""
Invalid Purchase Error

Raised by the purchase validation pass before any payment or seat reservation happens.
"""

from enum import StrEnum

from src.platform.exception.exceptions import DomainError


class InvalidPurchaseReason(StrEnum):
    INVALID_ACCOUNT = 'invalid_account'
    UNKNOWN_TICKET_TYPE = 'unknown_ticket_type'
    ADULT_REQUIRED = 'adult_required'
    TOO_MANY_TICKETS = 'too_many_tickets'
    INFANT_EXCEEDS_ADULTS = 'infant_exceeds_adults'


INVALID_ACCOUNT_MESSAGE = (
    'Sorry, unable to process your request as the provided account is invalid'
)
UNKNOWN_TICKET_TYPE_MESSAGE = 'Sorry, invalid ticket type requested'
REQUIRED_AN_ADULT_MESSAGE = 'Sorry, an Adult is required in other to complete your request'
INFANT_EXCEEDS_ADULTS_MESSAGE = 'Number of Infant tickets can not be more than Adult tickets'


def max_allowed_tickets_exceeded_message(max_tickets: int) -> str:
    return (
        'Sorry, unable to process request,'
        f'it exceeds the maximum, {max_tickets} tickets is allowed at a time'
    )


class InvalidPurchaseError(DomainError):
    def __init__(self, reason: InvalidPurchaseReason, message: str) -> None:
        self.reason = reason
        super().__init__(message, 400)

    @classmethod
    def invalid_account(cls) -> 'InvalidPurchaseError':
        return cls(InvalidPurchaseReason.INVALID_ACCOUNT, INVALID_ACCOUNT_MESSAGE)

    @classmethod
    def unknown_ticket_type(cls) -> 'InvalidPurchaseError':
        return cls(InvalidPurchaseReason.UNKNOWN_TICKET_TYPE, UNKNOWN_TICKET_TYPE_MESSAGE)

    @classmethod
    def adult_required(cls) -> 'InvalidPurchaseError':
        return cls(InvalidPurchaseReason.ADULT_REQUIRED, REQUIRED_AN_ADULT_MESSAGE)

    @classmethod
    def too_many_tickets(cls, max_tickets: int) -> 'InvalidPurchaseError':
        return cls(
            InvalidPurchaseReason.TOO_MANY_TICKETS,
            max_allowed_tickets_exceeded_message(max_tickets),
        )

    @classmethod
    def infant_exceeds_adults(cls) -> 'InvalidPurchaseError':
        return cls(InvalidPurchaseReason.INFANT_EXCEEDS_ADULTS, INFANT_EXCEEDS_ADULTS_MESSAGE)
