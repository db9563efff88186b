from typing import Any, Protocol, runtime_checkable

from .._utils._request_spec import RequestConfig


@runtime_checkable
class Transport(Protocol):
    """Performs the network call described by a ``RequestConfig``.

    The result is returned to the caller of the generated method unchanged,
    and so are the errors raised while sending.
    """

    def request(self, config: RequestConfig) -> Any: ...

    async def request_async(self, config: RequestConfig) -> Any: ...
