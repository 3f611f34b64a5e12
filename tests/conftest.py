import sys
from pathlib import Path
from typing import List, Optional

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from constantcontact.utils.http import RawResponse  # noqa: E402

BASE_URL = "https://api.test.constantcontact.com"


def pytest_configure(config):
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set the environment variables read by the Settings class.

    Every test sees the same credentials and base URL, regardless of the
    developer's shell or .env file.
    """
    monkeypatch.setenv("CTCT_API_KEY", "test-api-key")
    monkeypatch.setenv("CTCT_ACCESS_TOKEN", "test-access-token")
    monkeypatch.setenv("CTCT_BASE_URL", BASE_URL)
    monkeypatch.setenv("CTCT_CONFIGURE_LOGGING", "false")

    # Logging
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    yield


class RecordingTransport:
    """Transport stub that records requests and replays queued responses."""

    def __init__(self, responses: Optional[List[RawResponse]] = None):
        self.responses = list(responses or [])
        self.calls = []

    def queue(self, status_code: int = 200, body: str = "", headers=None) -> "RecordingTransport":
        self.responses.append(RawResponse(status_code, headers or {}, body))
        return self

    def send(self, method, url, headers=None, body=None):
        self.calls.append({"method": method, "url": url, "headers": headers, "body": body})
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        return self.responses.pop(0)

    @property
    def last_url(self) -> str:
        return self.calls[-1]["url"]


@pytest.fixture
def transport():
    """Recording transport stub with no queued responses."""
    return RecordingTransport()


@pytest.fixture
def service_kwargs(transport):
    """Constructor arguments wiring a service to the recording transport."""
    return {
        "api_key": "test-api-key",
        "access_token": "test-access-token",
        "transport": transport,
        "base_url": BASE_URL,
    }
