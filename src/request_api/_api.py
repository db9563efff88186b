from typing import Any, Iterator, Optional, Union

from ._request_builder import api_call, api_call_async
from ._schema import Endpoint, EndpointDefinition, Namespace
from ._services._transport import Transport


class ApiMethod:
    """A generated API method bound to one endpoint definition.

    Calling it dispatches the request synchronously; ``call_async`` is the
    awaitable counterpart. Both take a single optional data argument.
    """

    def __init__(
        self, name: str, definition: EndpointDefinition, transport: Transport
    ) -> None:
        self._name = name
        self._definition = definition
        self._transport = transport

    @property
    def schema(self) -> EndpointDefinition:
        return self._definition

    @property
    def name(self) -> str:
        return self._name

    def __call__(self, data: Any = None) -> Any:
        return api_call(self._definition, data, self._transport, name=self._name)

    async def call_async(self, data: Any = None) -> Any:
        return await api_call_async(
            self._definition, data, self._transport, name=self._name
        )

    def __repr__(self) -> str:
        method = (self._definition.method or "GET").upper()
        return f"<ApiMethod {self._name} {method} {self._definition.url}>"


class ApiNamespace:
    """A node of the generated API; children are reachable by attribute or key."""

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._members: dict[str, Union["ApiNamespace", ApiMethod]] = {}

    def __getitem__(self, key: str) -> Union["ApiNamespace", ApiMethod]:
        return self._members[key]

    def __setitem__(self, key: str, value: Union["ApiNamespace", ApiMethod]) -> None:
        self._members[key] = value

    def __getattr__(self, key: str) -> Union["ApiNamespace", ApiMethod]:
        if key.startswith("_"):
            raise AttributeError(key)
        try:
            return self._members[key]
        except KeyError:
            raise AttributeError(
                f"'{self._name or type(self).__name__}' has no member '{key}'"
            ) from None

    def __contains__(self, key: object) -> bool:
        return key in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __dir__(self) -> list[str]:
        return [*super().__dir__(), *self._members]

    def __repr__(self) -> str:
        return f"<ApiNamespace {self._name or '/'} {list(self._members)}>"


def _qualified(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def build(
    target: ApiNamespace,
    schema: Namespace,
    transport: Transport,
    prefix: Optional[str] = None,
) -> ApiNamespace:
    """Populate ``target`` with the generated members of ``schema``.

    Endpoints become ``ApiMethod`` instances, namespaces become nested
    ``ApiNamespace`` instances built recursively. The schema is only read.
    """
    prefix = prefix or ""
    for key, node in schema.children.items():
        name = _qualified(prefix, key)
        match node:
            case Endpoint(definition=definition):
                target[key] = ApiMethod(name, definition, transport)
            case Namespace():
                child = ApiNamespace(name)
                target[key] = child
                build(child, node, transport, name)
    return target
