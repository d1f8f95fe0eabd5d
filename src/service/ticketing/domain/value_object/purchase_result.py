import attrs

from src.service.ticketing.domain.value_object.ticket_tally import TicketTally


@attrs.define(frozen=True)
class PurchaseResult:
    """Outcome of a successful purchase: what was charged and how many seats were reserved"""

    account_id: int
    total_amount: int
    total_seats: int
    tally: TicketTally

    @classmethod
    def from_tally(cls, *, account_id: int, tally: TicketTally) -> 'PurchaseResult':
        return cls(
            account_id=account_id,
            total_amount=tally.total_amount,
            total_seats=tally.total_seats,
            tally=tally,
        )
