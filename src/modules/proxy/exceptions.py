class ProxyError(Exception):
    """Base error for a failed forwarding request."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(ProxyError):
    """No upstream credential is configured."""


class UpstreamError(ProxyError):
    """The upstream answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(body)
        self.status_code = status_code


class TransportError(ProxyError):
    """The upstream could not be reached or returned unreadable JSON."""
