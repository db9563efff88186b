from dataclasses import dataclass, field
from typing import Any


@dataclass
class RequestConfig:
    """Encapsulates the configuration of a single generated API call.

    A fresh instance is built for every call from the endpoint definition, so
    hooks and transports may mutate it freely. The effective data payload is
    kept in ``data`` and is additionally placed into one or more of the
    transmission channels: ``params`` (query string), ``form`` (url-encoded
    form), ``form_data`` (multipart form) or ``body`` (with ``json`` set when
    it must be JSON-encoded).
    """

    url: str | None = None
    name: str | None = None
    method: str | None = None
    headers: dict[str, str] | None = None
    data: Any | None = None
    params: Any | None = None
    form: Any | None = None
    form_data: Any | None = None
    body: Any | None = None
    json: bool = False
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def http_method(self) -> str:
        """The method to send, ``GET`` when the definition declares none."""
        return (self.method or "GET").upper()
