"""
Purchase Tickets Use Case - validate, price, pay, reserve
"""

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface import ISeatReservationService, ITicketPaymentService
from src.service.ticketing.domain.invalid_purchase_error import InvalidPurchaseError
from src.service.ticketing.domain.value_object import (
    PurchaseResult,
    TicketTally,
    TicketTypeRequest,
)


DEFAULT_MAX_TICKETS_PER_PURCHASE = 20


class PurchaseTicketsUseCase:
    """
    Purchase Tickets Use Case

    Flow:
    1. Validate the request (account -> ticket types -> adult required -> max tickets)
    2. Debit the account for adult and child tickets
    3. Reserve one seat per adult and child ticket
    4. Return what was charged and reserved

    No external call is made unless every check passes. Payment and reservation
    results are not inspected, and a failing reservation does not refund the payment.

    Dependencies:
    - payment_service: Third-party payment gateway
    - seat_reservation_service: Third-party seat booking service
    """

    def __init__(
        self,
        payment_service: ITicketPaymentService,
        seat_reservation_service: ISeatReservationService,
        *,
        max_tickets_per_purchase: int = DEFAULT_MAX_TICKETS_PER_PURCHASE,
        enforce_infant_lap_limit: bool = False,
    ):
        self.payment_service = payment_service
        self.seat_reservation_service = seat_reservation_service
        self.max_tickets_per_purchase = max_tickets_per_purchase
        self.enforce_infant_lap_limit = enforce_infant_lap_limit

    @Logger.io
    def purchase_tickets(
        self, account_id: int, *ticket_type_requests: TicketTypeRequest
    ) -> PurchaseResult:
        tally = self._validate_purchase_request(account_id, ticket_type_requests)

        # Tag every line written by the third-party adapters with the account
        with Logger.base.contextualize(account_id=account_id):
            # Assume the payment always succeeds, no response to validate
            self.payment_service.make_payment(account_id, tally.total_amount)

            # Assume the reservation always succeeds, no response to validate
            self.seat_reservation_service.reserve_seat(account_id, tally.total_seats)

            Logger.base.info(
                f'Successfully purchased your tickets and reserved your seat(s) '
                f'(amount {tally.total_amount}, seats {tally.total_seats})'
            )
        return PurchaseResult.from_tally(account_id=account_id, tally=tally)

    def _validate_purchase_request(
        self, account_id: int, ticket_type_requests: tuple[TicketTypeRequest, ...]
    ) -> TicketTally:
        if account_id <= 0:
            raise InvalidPurchaseError.invalid_account()

        tally = TicketTally.from_requests(ticket_type_requests)

        if tally.adults < 1:
            raise InvalidPurchaseError.adult_required()

        if tally.total_tickets > self.max_tickets_per_purchase:
            raise InvalidPurchaseError.too_many_tickets(self.max_tickets_per_purchase)

        # Off by default: more than one infant may share an adult's lap
        if self.enforce_infant_lap_limit and tally.infants > tally.adults:
            raise InvalidPurchaseError.infant_exceeds_adults()

        return tally
