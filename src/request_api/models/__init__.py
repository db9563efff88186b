from .errors import MissingParametersError, RequestApiError
from .exceptions import EnrichedException

__all__ = [
    "EnrichedException",
    "MissingParametersError",
    "RequestApiError",
]
