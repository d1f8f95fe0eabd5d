"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.driven_adapter.third_party.mock_seat_reservation_service import (
    MockSeatReservationService,
)
from src.service.ticketing.driven_adapter.third_party.mock_ticket_payment_service import (
    MockTicketPaymentService,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Third-party services (mocked until real gateway clients exist)
    ticket_payment_service = providers.Singleton(MockTicketPaymentService)
    seat_reservation_service = providers.Singleton(MockSeatReservationService)

    # Use cases (stateless, can be Singleton)
    purchase_tickets_use_case = providers.Singleton(
        PurchaseTicketsUseCase,
        payment_service=ticket_payment_service,
        seat_reservation_service=seat_reservation_service,
        max_tickets_per_purchase=config_service.provided.MAX_TICKETS_PER_PURCHASE,
        enforce_infant_lap_limit=config_service.provided.ENFORCE_INFANT_LAP_LIMIT,
    )


container = Container()
