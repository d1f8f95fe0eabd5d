"""
Loguru sinks for the purchase service.

Every record carries the service context, the account being served (set with
`logger.contextualize(account_id=...)` around a purchase) and, for records written
by `Logger.io`, the decorated call target.
"""

from enum import StrEnum
import os
from pathlib import Path
import sys
from typing import Any

from loguru import logger as loguru_logger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    ACCOUNT_ID = 'account_id'
    CALL_TARGET = 'call_target'


NO_ACCOUNT = '-'

LOG_FORMAT = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '{time:YYYY-MM-DD HH:mm:ss.SSS}',
        '<lvl>{level:<8}</>',
        f'acct=<m>{{extra[{ExtraField.ACCOUNT_ID}]}}</>',
        f'<c>{{name}}:{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
    )
)


def _log_dir() -> Path:
    # Tests redirect file output away from the project log directory
    return Path(os.environ.get('TEST_LOG_DIR', LOG_DIR))


def build_handlers(*, debug: bool) -> list[dict[str, Any]]:
    """stdout always; an hourly file only in DEBUG, production ships stdout"""
    level = 'DEBUG' if debug else 'INFO'
    handlers: list[dict[str, Any]] = [
        {'sink': sys.stdout, 'format': LOG_FORMAT, 'level': level, 'enqueue': True},
    ]
    if debug:
        handlers.append(
            {
                'sink': str(_log_dir() / 'purchase_{time:YYYY-MM-DD_HH}.log'),
                'format': LOG_FORMAT,
                'level': level,
                'rotation': '1 hour',
                'retention': '7 days',
                'compression': 'gz',
                'enqueue': True,
            }
        )
    return handlers


loguru_logger.configure(
    handlers=build_handlers(debug=settings.DEBUG),
    extra={
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.ACCOUNT_ID: NO_ACCOUNT,
        ExtraField.CALL_TARGET: '',
    },
)

custom_logger = loguru_logger
