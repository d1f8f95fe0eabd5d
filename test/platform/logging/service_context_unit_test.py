import os

import pytest

from src.platform.logging.service_context import get_service_context


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clear_cache():
    get_service_context.cache_clear()
    yield
    get_service_context.cache_clear()


def test_local_context_uses_pid(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('SERVICE_NAME', 'purchase')
    monkeypatch.setenv('DEPLOY_ENV', 'staging')
    monkeypatch.delenv('ECS_CONTAINER_METADATA_URI_V4', raising=False)

    assert get_service_context() == f'purchase@staging:{os.getpid()}'


def test_ecs_context_uses_task_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('SERVICE_NAME', 'purchase')
    monkeypatch.setenv('DEPLOY_ENV', 'prod')
    monkeypatch.setenv(
        'ECS_CONTAINER_METADATA_URI_V4', 'http://169.254.170.2/v4/a1b2c3d4e5f6-1700000000'
    )

    assert get_service_context() == 'purchase@prod:a1b2c3d4'


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('SERVICE_NAME', raising=False)
    monkeypatch.delenv('DEPLOY_ENV', raising=False)
    monkeypatch.delenv('ECS_CONTAINER_METADATA_URI_V4', raising=False)

    assert get_service_context().startswith('ticket-purchase@local_dev:')
