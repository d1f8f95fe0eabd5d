"""Mock payment gateway that logs the debit instead of charging a real account."""

from datetime import UTC, datetime

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_payment_service import ITicketPaymentService


class MockTicketPaymentService(ITicketPaymentService):
    def __init__(self) -> None:
        self.payments: list[dict] = []  # Store payments for testing

    @Logger.io
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        self.payments.append(
            {
                'account_id': account_id,
                'amount': total_amount_to_pay,
                'paid_at': datetime.now(UTC),
            }
        )
        Logger.base.info(f'💳 [MOCK PAYMENT] Debited {total_amount_to_pay} from account {account_id}')
