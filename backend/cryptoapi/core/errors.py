"""
Errors raised by the request gateway

Every failed call surfaces as one of three ApiError subclasses:
RequestError (non-2xx status), TransportError (network level) or
DecodeError (body is not JSON).
"""
from typing import Optional


class ApiError(Exception):
    """Base class for provider request failures"""

    def __init__(self, message: str, url: str, operation: Optional[str] = None):
        super().__init__(message)
        self.url = url
        self.operation = operation


class RequestError(ApiError):
    """Provider answered with a non-success HTTP status"""

    def __init__(self, status: int, url: str, operation: Optional[str] = None):
        super().__init__(f"HTTP error! status: {status}", url, operation)
        self.status = status


class TransportError(ApiError):
    """Request could not be completed (DNS, refused connection, timeout)"""

    def __init__(self, cause: Exception, url: str, operation: Optional[str] = None):
        super().__init__(f"Transport error: {cause!r}", url, operation)
        self.cause = cause


class DecodeError(ApiError):
    """Response body is not valid JSON"""

    def __init__(self, cause: Exception, url: str, operation: Optional[str] = None):
        super().__init__(f"Invalid JSON in response: {cause}", url, operation)
        self.cause = cause
