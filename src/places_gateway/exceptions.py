"""
Exceptions raised while proxying requests to upstream providers.

Every error carries the HTTP status and message the gateway answers with.
"""


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigMissingError(GatewayError):
    """Raised when a provider credential is not configured."""

    status_code = 500


class MissingParameterError(GatewayError):
    """Raised when a required request parameter is absent."""

    status_code = 400


class UpstreamError(GatewayError):
    """Raised when a provider answers with a non-success status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message, status_code=status_code)


class TransportError(GatewayError):
    """Raised when a provider cannot be reached or returns unreadable data."""

    status_code = 500

    def __init__(self, message: str = "Internal Server Error") -> None:
        super().__init__(message)


class ClientDisconnectedError(GatewayError):
    """Raised when the caller goes away before the upstream call finishes."""

    status_code = 499

    def __init__(self, message: str = "Client Closed Request") -> None:
        super().__init__(message)
