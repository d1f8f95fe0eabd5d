"""
Test Configuration and Fixtures

Environment setup happens before any application import: the loguru sinks are
configured when `src.platform.logging.loguru_io_config` is first imported and
read TEST_LOG_DIR at that moment.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'ticket-purchase-test')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from unittest.mock import Mock  # noqa: E402

from loguru import logger as loguru_logger  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.ticketing.app.interface import (  # noqa: E402
    ISeatReservationService,
    ITicketPaymentService,
)


@pytest.fixture
def collaborators() -> Mock:
    """Manager mock holding both third-party doubles, records calls across them in order"""
    manager = Mock()
    manager.attach_mock(Mock(spec=ITicketPaymentService), 'payment_service')
    manager.attach_mock(Mock(spec=ISeatReservationService), 'seat_reservation_service')
    return manager


@pytest.fixture
def payment_service(collaborators: Mock) -> Mock:
    return collaborators.payment_service


@pytest.fixture
def seat_reservation_service(collaborators: Mock) -> Mock:
    return collaborators.seat_reservation_service


@pytest.fixture
def log_records() -> Generator[list[dict], None, None]:
    """Loguru records emitted during the test, captured synchronously"""
    records: list[dict] = []
    handler_id = loguru_logger.add(lambda message: records.append(message.record), level='DEBUG')
    yield records
    loguru_logger.remove(handler_id)


@pytest.fixture
def di_container() -> Generator:
    yield container
    container.reset_singletons()
    container.reset_override()
