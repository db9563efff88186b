from logging import getLogger
from typing import Any, Optional

from ._schema import EndpointDefinition
from ._services._transport import Transport
from ._utils._merge import extend
from ._utils._request_spec import RequestConfig
from ._utils.constants import (
    CONTENT_TYPE_FORM_URLENCODED,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_MULTIPART,
    LOGGER_NAME,
)
from .models.errors import MissingParametersError

logger = getLogger(LOGGER_NAME)


def _copy_definition(definition: EndpointDefinition) -> RequestConfig:
    return RequestConfig(
        url=definition.url,
        method=definition.method,
        headers=dict(definition.headers) if definition.headers is not None else None,
        options=definition.options,
    )


def _effective_data(definition: EndpointDefinition, data: Any) -> Any:
    if definition.data is not None and definition.data.defaults is not None:
        return extend(definition.data.defaults, data)
    return data


def _validate_required(definition: EndpointDefinition, payload: Any) -> None:
    rules = definition.data
    if rules is None or not rules.should_validate:
        return

    present = list(payload or {})
    required = rules.required or []
    if not all(name in present for name in required):
        raise MissingParametersError(required, present)


def _place_data(definition: EndpointDefinition, config: RequestConfig) -> None:
    payload = config.data

    if not definition.method or definition.method.lower() == "get":
        config.params = payload

    if definition.headers is None:
        config.body = payload
        config.json = True
        return

    header_index = {key.lower(): value for key, value in definition.headers.items()}
    content_type = header_index.get("content-type")
    if content_type is None:
        # leaves the payload unplaced (query string only for GET)
        return

    if CONTENT_TYPE_FORM_URLENCODED in content_type:
        config.form = payload

    if CONTENT_TYPE_MULTIPART in content_type:
        config.form_data = payload

    if CONTENT_TYPE_JSON in content_type:
        config.body = payload
        config.json = True


def build_request_config(
    definition: EndpointDefinition,
    data: Any = None,
    *,
    name: Optional[str] = None,
) -> RequestConfig:
    """Build the request config of one call of ``definition``.

    The definition is copied into a fresh ``RequestConfig`` and the
    ``extend_config`` hook, when declared, is applied to it. The call-time
    ``data`` is then merged over the declared defaults, checked against the
    required names and placed into the transmission channels selected by the
    method and the declared ``Content-Type``:

    - no method or ``GET``: query string, in addition to anything below;
    - ``application/x-www-form-urlencoded``: url-encoded form;
    - ``multipart/form-data``: multipart form;
    - ``application/json``, or no headers at all: JSON body.

    Declaring headers without a ``Content-Type`` places the data nowhere but
    the query string of a GET.

    Args:
        definition: The endpoint definition. It is never mutated.
        data: The call-time data, usually a mapping of field names to values.
        name: Dotted name of the generated method, used for the User-Agent.

    Returns:
        RequestConfig: The config ready for dispatch.

    Raises:
        MissingParametersError: If a required parameter is absent and validation is enabled.
    """
    config = _copy_definition(definition)
    config.name = name

    if definition.extend_config is not None:
        definition.extend_config(config, data)

    config.data = _effective_data(definition, data)
    _validate_required(definition, config.data)
    _place_data(definition, config)

    logger.debug(
        f"Built {config.http_method} {config.url} "
        f"(params={config.params is not None}, form={config.form is not None}, "
        f"form_data={config.form_data is not None}, json={config.json})"
    )
    return config


def api_call(
    definition: EndpointDefinition,
    data: Any,
    transport: Transport,
    *,
    name: Optional[str] = None,
) -> Any:
    """Build the request of ``definition`` and dispatch it through ``transport``.

    Validation errors are raised before the transport is reached; transport
    errors propagate unchanged.
    """
    config = build_request_config(definition, data, name=name)
    return transport.request(config)


async def api_call_async(
    definition: EndpointDefinition,
    data: Any,
    transport: Transport,
    *,
    name: Optional[str] = None,
) -> Any:
    """Asynchronous counterpart of :func:`api_call`."""
    config = build_request_config(definition, data, name=name)
    return await transport.request_async(config)
