import json
from logging import getLogger
from os import environ as env
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from dotenv import load_dotenv

from ._api import ApiNamespace, build
from ._config import Config
from ._schema import Namespace, parse_schema
from ._services import HttpTransport, Transport
from ._utils import setup_logging
from ._utils.constants import (
    ENV_ACCESS_TOKEN,
    ENV_BASE_URL,
    ENV_DEBUG,
    ENV_TIMEOUT,
    LOGGER_NAME,
)

load_dotenv()


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


class RequestAPI(ApiNamespace):
    """API client generated from a nested endpoint schema.

    Every leaf of the schema becomes a callable method and every branch a
    nested namespace, reachable by attribute or by key. Schema keys that clash
    with the methods of this class (``close``, ``transport``...) are only
    reachable by key.

    Examples:
        ```python
        from request_api import RequestAPI, path_params

        api = RequestAPI(
            {
                "users": {
                    "list": {"api_schema": {"url": "/users"}},
                    "get": {
                        "api_schema": {
                            "url": "/users/{id}",
                            "extend_config": path_params("id"),
                        }
                    },
                    "create": {
                        "api_schema": {
                            "url": "/users",
                            "method": "post",
                            "data": {"required": ["name"]},
                        }
                    },
                }
            },
            base_url="https://api.example.com",
        )

        api.users.create({"name": "Ada"})
        response = await api.users.list.call_async({"page": 2})
        ```
    """

    def __init__(
        self,
        schema: Union[Mapping[str, Any], Namespace],
        *,
        base_url: Optional[str] = None,
        secret: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: bool = False,
        transport: Optional[Transport] = None,
    ) -> None:
        super().__init__()

        self._config = Config(
            base_url=base_url or env.get(ENV_BASE_URL),
            secret=secret or env.get(ENV_ACCESS_TOKEN),
            timeout=timeout if timeout is not None else env.get(ENV_TIMEOUT),
            debug=debug or _env_flag(env.get(ENV_DEBUG)),
        )

        setup_logging(self._config.debug)
        log = getLogger(LOGGER_NAME)

        log.debug("CONFIG:")
        log.debug(f"{self._config.model_dump(exclude={'secret'})}\n")

        self._schema = parse_schema(schema)
        self._transport = transport or HttpTransport(self._config)
        build(self, self._schema, self._transport)

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs: Any) -> "RequestAPI":
        """Create a client from a JSON schema file.

        Hooks such as ``extend_config`` cannot be expressed in JSON; declare
        those endpoints in Python instead.
        """
        with open(path, "r", encoding="utf-8") as file:
            schema = json.load(file)
        return cls(schema, **kwargs)

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def schema(self) -> Namespace:
        return self._schema

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    async def aclose(self) -> None:
        aclose = getattr(self._transport, "aclose", None)
        if aclose is not None:
            await aclose()

    def __enter__(self) -> "RequestAPI":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "RequestAPI":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
