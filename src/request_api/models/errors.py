from typing import Sequence


class RequestApiError(Exception):
    """Base class for errors raised by request_api itself."""


class MissingParametersError(RequestApiError, ValueError):
    """Raised before dispatch when required call parameters are absent.

    The message lists the full required set and the keys actually present,
    in the form::

        Missing some of the following required parameters: a, b :: Current parameters :: a
    """

    def __init__(self, required: Sequence[str], present: Sequence[str]):
        self.required = list(required)
        self.present = list(present)
        self.message = (
            "Missing some of the following required parameters: "
            + ", ".join(self.required)
            + " :: Current parameters :: "
            + ", ".join(self.present)
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
