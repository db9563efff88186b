import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure local source package (src/request_api) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from request_api import Config, RequestConfig  # noqa: E402


class RecordingTransport:
    """Transport double keeping every config it is asked to send."""

    def __init__(self, result: Any = "response") -> None:
        self.result = result
        self.configs: list[RequestConfig] = []

    def request(self, config: RequestConfig) -> Any:
        self.configs.append(config)
        return self.result

    async def request_async(self, config: RequestConfig) -> Any:
        self.configs.append(config)
        return self.result

    @property
    def last(self) -> RequestConfig:
        return self.configs[-1]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("REQUEST_API_URL", raising=False)
    monkeypatch.delenv("REQUEST_API_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("REQUEST_API_TIMEOUT", raising=False)
    monkeypatch.delenv("REQUEST_API_DEBUG", raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def secret() -> str:
    return "secret"


@pytest.fixture
def config(base_url: str, secret: str) -> Config:
    return Config(base_url=base_url, secret=secret)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
