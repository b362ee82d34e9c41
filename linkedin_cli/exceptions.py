"""
Exceptions for the LinkedIn client.
"""

from typing import Optional, Dict, Any


class LinkedInError(Exception):
    """Base exception for all LinkedIn client errors."""
    
    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ConfigurationError(LinkedInError):
    """Stored configuration could not be read."""
    pass


class InvalidArgumentError(LinkedInError):
    """An argument has the wrong shape for the requested operation."""
    pass


class UnsupportedOperationError(LinkedInError, AttributeError):
    """Neither the client nor its OAuth consumer provides the operation."""
    
    def __init__(self, method: str):
        super().__init__(f"Invalid method {method} called.")
        self.method = method


class APIError(LinkedInError):
    """Error talking to the LinkedIn OAuth endpoints."""
    
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        details: Optional[str] = None
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.response_data = response_data or {}


class AuthenticationError(LinkedInError):
    """The OAuth handshake was refused or is incomplete."""
    pass


class ResultParseError(LinkedInError):
    """A response body is not well-formed XML."""
    pass
