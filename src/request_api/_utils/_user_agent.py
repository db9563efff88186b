import importlib.metadata

from .constants import PACKAGE_NAME


def _package_version() -> str:
    try:
        return importlib.metadata.version(PACKAGE_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"


def user_agent_value(specific_component: str = "") -> str:
    """Build the User-Agent sent with every request.

    Args:
        specific_component: Optional ``namespace.method`` of the generated call.

    Returns:
        str: ``request-api/<version>`` or ``request-api/<component>/<version>``.
    """
    version = _package_version()
    if specific_component:
        return f"{PACKAGE_NAME}/{specific_component}/{version}"
    return f"{PACKAGE_NAME}/{version}"
