"""
Ticket Payment Service Interface

Port for the third-party payment gateway. Use cases depend on this interface,
not on a concrete gateway client.
"""

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    """
    Port (interface) for debiting a customer's account.

    The gateway is assumed to always succeed; callers do not inspect a result.
    """

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """
        Debit the account

        Args:
            account_id: Account to debit
            total_amount_to_pay: Amount in whole monetary units
        """
        pass
