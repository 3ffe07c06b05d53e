"""
Custom Exceptions for SmartAdmit

Hierarchical exception classes for proper error handling across layers.
"""

from typing import Optional, Dict, Any


class SmartAdmitError(Exception):
    """Base exception for all SmartAdmit errors."""
    
    def __init__(
        self, 
        message: str, 
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ValidationError(SmartAdmitError):
    """Raised when input validation fails."""
    pass


class NotFoundError(SmartAdmitError):
    """Raised when a requested resource is not found."""
    
    def __init__(
        self,
        message: str,
        resource: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if resource:
            details["resource"] = resource
        super().__init__(message, details, original_error)


class ExternalServiceError(SmartAdmitError):
    """Raised when an upstream data provider fails."""
    
    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None
    ):
        details: Dict[str, Any] = {}
        if service:
            details["service"] = service
        if status_code:
            details["status_code"] = status_code
        super().__init__(message, details, original_error)


class ConfigurationError(SmartAdmitError):
    """Raised when configuration is missing or invalid."""
    
    def __init__(
        self,
        message: str,
        missing_keys: Optional[list] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if missing_keys:
            details["missing_keys"] = missing_keys
        super().__init__(message, details, original_error)
