"""
Test Configuration and Fixtures

- Environment set before application modules are imported (log dir, no CMS token)
- In-memory content store answering the application's GROQ queries
- TestClient whose container serves the in-memory store and a log-only email sender
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ['DEBUG'] = 'false'
    os.environ.pop('SANITY_API_TOKEN', None)
    os.environ.pop('RESEND_API_KEY', None)
    os.environ['SERVICE_NAME'] = 'paro-fc-site'
    os.environ.pop('OTEL_EXPORTER_OTLP_ENDPOINT', None)


_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402
from datetime import datetime  # noqa: E402
from typing import Any  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.main import app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.content_store.in_memory_client import InMemoryContentStoreClient  # noqa: E402
from src.service.shared_kernel.driven_adapter.email.log_only_email_sender_impl import (  # noqa: E402
    LogOnlyEmailSender,
)
from src.service.ticketing.app.dto.booking_policy import BookingPolicy  # noqa: E402
from test.content_store_handlers import build_query_handlers  # noqa: E402
from test.constants import FROZEN_NOW, MATCH_ID  # noqa: E402


@pytest.fixture
def match_document() -> Callable[..., dict[str, Any]]:
    def _build(**overrides: Any) -> dict[str, Any]:
        document = {
            '_id': MATCH_ID,
            '_type': 'match',
            'homeTeam': 'Paro FC',
            'awayTeam': 'Thimphu City',
            'competition': 'Bhutan Premier League',
            'date': '2025-03-15T15:00:00.000Z',
            'venue': 'Woochu Sports Arena',
            'event': 'Matchday 1',
            'hasTickets': True,
            'ticketAvailability': 5,
        }
        document.update(overrides)
        return document

    return _build


@pytest.fixture
def content_store(match_document: Callable[..., dict[str, Any]]) -> InMemoryContentStoreClient:
    return InMemoryContentStoreClient(
        [match_document()], query_handlers=build_query_handlers()
    )


@pytest.fixture
def email_sender() -> LogOnlyEmailSender:
    return LogOnlyEmailSender()


@pytest.fixture
def frozen_clock() -> Callable[[], datetime]:
    return lambda: FROZEN_NOW


@pytest.fixture
def booking_policy() -> BookingPolicy:
    return BookingPolicy(write_enabled=True, max_claim_attempts=5)


@pytest.fixture
def client(
    content_store: InMemoryContentStoreClient,
    email_sender: LogOnlyEmailSender,
    frozen_clock: Callable[[], datetime],
    booking_policy: BookingPolicy,
) -> Generator[TestClient, None, None]:
    container.reset_singletons()
    with (
        container.content_store_reader.override(providers.Object(content_store)),
        container.content_store_writer.override(providers.Object(content_store)),
        container.email_sender.override(providers.Object(email_sender)),
        container.clock.override(providers.Object(frozen_clock)),
        container.booking_policy.override(providers.Object(booking_policy)),
    ):
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    container.reset_singletons()
