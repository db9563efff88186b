from ._http_transport import HttpTransport
from ._transport import Transport

__all__ = [
    "HttpTransport",
    "Transport",
]
