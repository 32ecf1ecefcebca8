"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for errors raised by the lending core.

    Attributes:
        message: Caller-facing description of the failure
        code: Stable machine-readable error code, returned as ``error``
            in HTTP error bodies
    """

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)
