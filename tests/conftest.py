from typing import Callable
from unittest.mock import MagicMock

import pytest

from contrast_mcp.client import ContrastClient
from contrast_mcp.config import ContrastSettings

ORG_ID = "org-123"


@pytest.fixture
def settings() -> ContrastSettings:
    return ContrastSettings(
        _env_file=None,
        host_name="app.contrastsecurity.com",
        api_key="api-key",
        service_key="service-key",
        user_name="agent@example.com",
        org_id=ORG_ID,
    )


@pytest.fixture
def mock_client() -> MagicMock:
    """A ContrastClient stand-in; tests configure return values per method."""
    return MagicMock(spec=ContrastClient)


@pytest.fixture
def client_provider(mock_client: MagicMock) -> Callable[[], MagicMock]:
    return lambda: mock_client
