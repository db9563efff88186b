from ._api import ApiMethod, ApiNamespace, build
from ._config import Config
from ._request_api import RequestAPI
from ._request_builder import api_call, api_call_async, build_request_config
from ._schema import (
    DataRules,
    Endpoint,
    EndpointDefinition,
    Namespace,
    parse_schema,
)
from ._services import HttpTransport, Transport
from ._utils import RequestConfig, extend, path_params
from .models import EnrichedException, MissingParametersError, RequestApiError

__all__ = [
    "ApiMethod",
    "ApiNamespace",
    "api_call",
    "api_call_async",
    "build",
    "build_request_config",
    "Config",
    "DataRules",
    "EnrichedException",
    "Endpoint",
    "EndpointDefinition",
    "extend",
    "HttpTransport",
    "MissingParametersError",
    "Namespace",
    "parse_schema",
    "path_params",
    "RequestAPI",
    "RequestApiError",
    "RequestConfig",
    "Transport",
]
