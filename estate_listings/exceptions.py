"""Custom exceptions for the application"""
from typing import Optional, Dict, Any


class AppException(Exception):
    """Base exception for the application"""
    def __init__(
        self,
        message: str,
        code: str = "APP_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppException):
    """Missing or malformed input"""
    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="VALIDATION_ERROR", status_code=422, details=details)


class NotFoundError(AppException):
    """Resource not found"""
    def __init__(self, message: str = "Resource not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="NOT_FOUND", status_code=404, details=details)


class AuthenticationError(AppException):
    """Bad credentials or missing session"""
    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="AUTHENTICATION_FAILED", status_code=401, details=details)


class AuthorizationError(AppException):
    """Session present but lacks the required role"""
    def __init__(self, message: str = "Access denied", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="ACCESS_DENIED", status_code=403, details=details)


class PersistenceError(AppException):
    """Store unreachable or write failed"""
    def __init__(self, message: str = "A storage error occurred", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="PERSISTENCE_ERROR", status_code=500, details=details)
