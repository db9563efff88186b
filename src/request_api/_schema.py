"""Schema models: endpoint definitions and the tagged schema tree."""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ._utils._request_spec import RequestConfig
from ._utils.constants import ENDPOINT_MARKERS

ExtendConfigHook = Callable[[RequestConfig, Any], None]


class DataRules(BaseModel):
    """Rules applied to the call-time data of an endpoint.

    Attributes:
        defaults: Values merged under the call-time data (call-time wins).
        required: Ordered names that must be present in the merged data.
        validation: Whether ``required`` is enforced. ``None`` means enabled.
            Accepted as ``validate`` when parsing a schema.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    defaults: Optional[dict[str, Any]] = None
    required: Optional[list[str]] = None
    validation: Optional[bool] = Field(default=None, alias="validate")

    @property
    def should_validate(self) -> bool:
        return bool(self.required) and self.validation in (True, None)


class EndpointDefinition(BaseModel):
    """Static description of one HTTP call.

    Keys not declared here are kept as extra fields and handed to the
    transport as request options (``timeout``, ``follow_redirects``...).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    method: Optional[str] = None
    url: Optional[str] = None
    headers: Optional[dict[str, str]] = None
    data: Optional[DataRules] = None
    extend_config: Optional[ExtendConfigHook] = Field(
        default=None, alias="extendConfig", exclude=True
    )

    @property
    def options(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


@dataclass(frozen=True)
class Endpoint:
    definition: EndpointDefinition


@dataclass(frozen=True)
class Namespace:
    children: dict[str, "SchemaNode"] = field(default_factory=dict)


SchemaNode = Union[Endpoint, Namespace]


def _endpoint_marker(value: Mapping[str, Any]) -> Optional[str]:
    for marker in ENDPOINT_MARKERS:
        if marker in value:
            return marker
    return None


def parse_node(value: Any) -> SchemaNode:
    """Tag a single raw schema value as an ``Endpoint`` or a ``Namespace``."""
    if isinstance(value, (Endpoint, Namespace)):
        return value
    if isinstance(value, EndpointDefinition):
        return Endpoint(value)
    if not isinstance(value, Mapping):
        raise TypeError(
            f"Schema entries must be mappings or endpoint definitions, got {type(value).__name__}"
        )

    marker = _endpoint_marker(value)
    if marker is not None:
        definition = value[marker]
        if not isinstance(definition, EndpointDefinition):
            definition = EndpointDefinition.model_validate(definition)
        return Endpoint(definition)

    return parse_schema(value)


def parse_schema(raw: Union[Mapping[str, Any], Namespace]) -> Namespace:
    """Convert a raw nested mapping into a tagged ``Namespace`` tree.

    A leaf is any mapping carrying the ``api_schema`` (or ``apiSchema``) key,
    whose value is an endpoint definition or a mapping validated into one.
    Every other mapping becomes a nested namespace.

    Args:
        raw: The nested schema, or an already tagged ``Namespace``.

    Returns:
        Namespace: The root of the tagged tree.

    Raises:
        pydantic.ValidationError: If a leaf cannot be read as an endpoint definition.

    Examples:
        ```python
        schema = parse_schema(
            {
                "users": {
                    "list": {"api_schema": {"url": "/users"}},
                    "create": {"api_schema": {"url": "/users", "method": "post"}},
                }
            }
        )
        ```
    """
    if isinstance(raw, Namespace):
        return raw
    return Namespace({key: parse_node(value) for key, value in raw.items()})
