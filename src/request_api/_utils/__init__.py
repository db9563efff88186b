from ._logs import setup_logging
from ._merge import extend
from ._path import path_params
from ._request_spec import RequestConfig
from ._user_agent import user_agent_value

__all__ = [
    "extend",
    "path_params",
    "RequestConfig",
    "setup_logging",
    "user_agent_value",
]
