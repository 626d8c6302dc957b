# cfapi/tests/conftest.py
# ruff: noqa: E402
from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]  # .../package
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from cfapi.codeforces import CodeforcesClient
from cfapi.codeforces.mocks import RecordedCall, create_mock_transport
from cfapi.config import Settings


@pytest.fixture()
def mock_client() -> Iterator[Callable[..., tuple[CodeforcesClient, list[RecordedCall]]]]:
    """
    Factory building a CodeforcesClient over canned replies.
    Every client it hands out is closed at teardown.
    """
    clients: list[CodeforcesClient] = []

    def factory(**replies: Any) -> tuple[CodeforcesClient, list[RecordedCall]]:
        transport, calls = create_mock_transport(**replies)
        client = CodeforcesClient(transport=transport)
        clients.append(client)
        return client, calls

    yield factory

    for client in clients:
        client.close()


@pytest.fixture()
def live_settings() -> Settings:
    """Settings for tests that talk to codeforces.com; skipped unless explicitly enabled."""
    settings = Settings()
    if not settings.live_tests:
        pytest.skip('set CODEFORCES_LIVE_TESTS=1 to run tests against codeforces.com')
    if not settings.has_credentials:
        pytest.skip('CODEFORCES_API_KEY and CODEFORCES_API_SECRET are required for live tests')
    return settings
