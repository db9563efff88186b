import string
from typing import Any, Callable
from urllib.parse import quote

from ..models.errors import MissingParametersError
from ._request_spec import RequestConfig


def path_params(*names: str) -> Callable[[RequestConfig, Any], None]:
    """Create an ``extend_config`` hook interpolating URL placeholders.

    The hook replaces every ``{name}`` placeholder of ``config.url`` with the
    URL-quoted value of the same key in the call-time data. The data itself
    is left untouched, so the values are still sent in the selected channel.
    When ``names`` is empty, every placeholder found in the URL is used.

    Args:
        *names: The placeholder names to interpolate.

    Returns:
        Callable[[RequestConfig, Any], None]: The hook.

    Raises:
        MissingParametersError: From the hook, when a placeholder has no value.

    Examples:
        ```python
        EndpointDefinition(
            url="/users/{user_id}",
            extend_config=path_params("user_id"),
        )
        ```
    """

    def interpolate(config: RequestConfig, data: Any) -> None:
        if not config.url:
            return

        placeholders = list(names) or [
            field for _, field, _, _ in string.Formatter().parse(config.url) if field
        ]
        values = dict(data or {})
        if not all(name in values for name in placeholders):
            raise MissingParametersError(placeholders, list(values))

        url = config.url
        for name in placeholders:
            url = url.replace("{" + name + "}", quote(str(values[name]), safe=""))
        config.url = url

    return interpolate
