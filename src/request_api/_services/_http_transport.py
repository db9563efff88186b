import asyncio
import os
import random
import time
from datetime import datetime
from email.utils import parsedate_to_datetime
from logging import getLogger
from typing import Any

from httpx import (
    AsyncClient,
    Client,
    Headers,
    HTTPStatusError,
    Response,
    TimeoutException,
)
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .._config import Config
from .._utils._request_spec import RequestConfig
from .._utils._user_agent import user_agent_value
from .._utils.constants import (
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_USER_AGENT,
    LOGGER_NAME,
)
from ..models.exceptions import EnrichedException


def is_retryable_exception(exception: BaseException) -> bool:
    if isinstance(exception, TimeoutException):
        return True
    if isinstance(exception, EnrichedException):
        return 500 <= exception.status_code < 600
    return False


TRANSPORT_OPTIONS = ("timeout", "follow_redirects", "cookies", "auth", "extensions")


def _is_file_part(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, tuple)) or hasattr(value, "read")


def _read_file_part(value: Any) -> Any:
    if isinstance(value, tuple) and len(value) > 1 and hasattr(value[1], "read"):
        return (value[0], value[1].read(), *value[2:])
    if hasattr(value, "read"):
        filename = os.path.basename(str(getattr(value, "name", "") or "")) or None
        return (filename, value.read())
    return value


def _multipart_files(form_data: Any) -> list[tuple[str, Any]]:
    """Turn a multipart payload into ``httpx`` ``files`` entries.

    Scalars become plain form fields (no filename); bytes, file-like objects
    and ``(filename, content[, content_type])`` tuples become file parts.
    File objects are read once here so that retried attempts resend the
    same bytes. Lists repeat the field.
    """
    files: list[tuple[str, Any]] = []
    for key, value in dict(form_data).items():
        values = value if isinstance(value, list) else [value]
        for item in values:
            if _is_file_part(item):
                files.append((key, _read_file_part(item)))
            elif item is not None:
                files.append((key, (None, str(item))))
    return files


class HttpTransport:
    """Sends request configs over HTTP with ``httpx``.

    Timeouts and 5xx responses are retried with exponential backoff; 429
    responses are retried honoring ``Retry-After``. Any other non-2xx
    response raises ``EnrichedException``.
    """

    MAX_RETRIES = 3

    def __init__(self, config: Config) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config

        client_kwargs: dict[str, Any] = {
            "headers": Headers(self.default_headers),
            "follow_redirects": True,
        }
        if self._config.base_url:
            client_kwargs["base_url"] = self._config.base_url
        if self._config.timeout is not None:
            client_kwargs["timeout"] = self._config.timeout

        self._client = Client(**client_kwargs)
        self._client_async = AsyncClient(**client_kwargs)

    def _parse_retry_after(self, headers: Headers) -> float:
        """Parse Retry-After header (RFC 6585/7231).

        Args:
            headers: HTTP response headers

        Returns:
            float: Seconds to wait before retry (minimum 0.0, default 1.0 if missing/invalid).
        """
        DEFAULT_RETRY_AFTER = 1.0
        retry_after = headers.get("Retry-After")
        if not retry_after:
            return DEFAULT_RETRY_AFTER

        try:
            return max(float(retry_after), 0.0)
        except ValueError:
            pass

        try:
            retry_date = parsedate_to_datetime(retry_after)
            delta = (retry_date - datetime.now(retry_date.tzinfo)).total_seconds()
            return max(delta, 0.0)
        except (ValueError, TypeError):
            return DEFAULT_RETRY_AFTER

    def _request_kwargs(self, config: RequestConfig) -> dict[str, Any]:
        headers = dict(config.headers or {})
        kwargs: dict[str, Any] = {
            key: value
            for key, value in config.options.items()
            if key in TRANSPORT_OPTIONS
        }

        if config.params is not None:
            kwargs["params"] = config.params
        if config.form is not None:
            kwargs["data"] = config.form
        if config.form_data is not None:
            # httpx sets the multipart Content-Type with its boundary
            headers = {
                key: value
                for key, value in headers.items()
                if key.lower() != "content-type"
            }
            kwargs["files"] = _multipart_files(config.form_data)
        if config.body is not None:
            if config.json:
                kwargs["json"] = config.body
            else:
                kwargs["content"] = config.body

        if not any(key.lower() == HEADER_USER_AGENT.lower() for key in headers):
            headers[HEADER_USER_AGENT] = user_agent_value(config.name or "")
        kwargs["headers"] = headers
        return kwargs

    def _raise_for_status(self, response: Response) -> None:
        try:
            response.raise_for_status()
        except HTTPStatusError as e:
            # include the http response in the error message
            raise EnrichedException(e) from e

    def request(self, config: RequestConfig) -> Response:
        return self._send(
            config.http_method, config.url or "", self._request_kwargs(config)
        )

    @retry(
        retry=retry_if_exception(is_retryable_exception),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        stop=stop_after_attempt(4),
        reraise=True,
    )
    def _send(self, method: str, url: str, kwargs: dict[str, Any]) -> Response:
        self._logger.debug(f"Request: {method} {url}")
        self._logger.debug(f"HEADERS: {kwargs['headers']}")

        for attempt in range(self.MAX_RETRIES + 1):
            response = self._client.request(method, url, **kwargs)

            if response.status_code == 429:
                if attempt < self.MAX_RETRIES:
                    retry_after = self._parse_retry_after(response.headers)
                    jitter = random.uniform(0, 0.1 * retry_after)
                    sleep_time = retry_after + jitter
                    self._logger.warning(
                        f"Rate limited (429). Retrying after {sleep_time:.2f}s "
                        f"(attempt {attempt + 1}/{self.MAX_RETRIES})"
                    )
                    response.close()
                    time.sleep(sleep_time)
                    continue
                break

            break

        self._raise_for_status(response)
        return response

    async def request_async(self, config: RequestConfig) -> Response:
        return await self._send_async(
            config.http_method, config.url or "", self._request_kwargs(config)
        )

    @retry(
        retry=retry_if_exception(is_retryable_exception),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        stop=stop_after_attempt(4),
        reraise=True,
    )
    async def _send_async(
        self, method: str, url: str, kwargs: dict[str, Any]
    ) -> Response:
        self._logger.debug(f"Request: {method} {url}")
        self._logger.debug(f"HEADERS: {kwargs['headers']}")

        for attempt in range(self.MAX_RETRIES + 1):
            response = await self._client_async.request(method, url, **kwargs)

            if response.status_code == 429:
                if attempt < self.MAX_RETRIES:
                    retry_after = self._parse_retry_after(response.headers)
                    jitter = random.uniform(0, 0.1 * retry_after)
                    sleep_time = retry_after + jitter
                    self._logger.warning(
                        f"Rate limited (429). Retrying after {sleep_time:.2f}s "
                        f"(attempt {attempt + 1}/{self.MAX_RETRIES})"
                    )
                    await response.aclose()
                    await asyncio.sleep(sleep_time)
                    continue
                break

            break

        self._raise_for_status(response)
        return response

    def close(self) -> None:
        self._client.close()

    async def aclose(self) -> None:
        await self._client_async.aclose()

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: "application/json",
            **self.auth_headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        if not self._config.secret:
            return {}
        return {HEADER_AUTHORIZATION: f"Bearer {self._config.secret}"}
