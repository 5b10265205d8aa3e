"""Failures raised while loading prices from the upstream API."""


class UpstreamError(Exception):
    """Base exception for all upstream price API errors."""

    kind = "upstream"


class UpstreamTransportError(UpstreamError):
    """The request never produced a response (DNS, TLS, connect, timeout)."""

    kind = "transport"


class UpstreamStatusError(UpstreamError):
    """The upstream answered with a non-2xx status."""

    kind = "status"

    def __init__(self, status_code: int):
        super().__init__(f"API request failed with status: {status_code}")
        self.status_code = status_code


class UpstreamDecodeError(UpstreamError):
    """The response body was not a JSON array of price records."""

    kind = "decode"
