"""Exceptions raised by the IMS connector."""

from typing import Optional


class ConnectorError(Exception):
    """Base exception for IMS API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.response_data = response_data
        super().__init__(self.message)


class InvalidMethodError(ConnectorError, ValueError):
    """Raised when a request is built with a method other than GET or POST."""


class TransportError(ConnectorError):
    """Raised when the request could not be completed (timeout, refused connection, DNS)."""


class HTTPStatusError(ConnectorError):
    """Raised when the API answers with a status the operation cannot decode."""


class DecodeError(ConnectorError, ValueError):
    """Raised when a response body is not the JSON shape the operation expects."""


class FatalDecodeError(DecodeError):
    """
    Raised when the login response cannot be decoded.

    The connector cannot tell whether it is authenticated, so callers should
    treat this as a configuration or environment problem and stop.
    """
