"""
Custom Exceptions for the Hotel Room Service

This module defines the exception classes raised by repositories and
services. Each carries an error code and the HTTP status the API layer
renders it with.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Authentication & Authorization
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"

    # Business logic errors
    BOOKING_CONFLICT = "BOOKING_CONFLICT"

    # Resource specific errors
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    ROOM_TYPE_NOT_FOUND = "ROOM_TYPE_NOT_FOUND"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# Validation & Lookup Exceptions
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when request data fails validation"""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 400
    ):
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if field_errors:
            details["field_errors"] = field_errors
        super().__init__(message, error_code, details, status_code)
        self.field = field


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id:
                message += f" with id of {resource_id}"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class RoomNotFoundError(ResourceNotFoundError):
    """Exception raised when a room is not found"""

    def __init__(self, room_id: Optional[str] = None, message: Optional[str] = None):
        super().__init__("Room", room_id, message)
        self.error_code = ErrorCode.ROOM_NOT_FOUND


class RoomTypeNotFoundError(ResourceNotFoundError):
    """Exception raised when a room type is not found"""

    def __init__(self, room_type_id: Optional[str] = None, message: Optional[str] = None):
        super().__init__("Room type", room_type_id, message)
        self.error_code = ErrorCode.ROOM_TYPE_NOT_FOUND


# ========================================
# Authentication & Authorization Exceptions
# ========================================

class AuthenticationError(BaseAppException):
    """Exception raised when authentication fails"""

    def __init__(self, message: str = "Not authorized to access this route"):
        super().__init__(message, ErrorCode.AUTHENTICATION_FAILED, status_code=401)


class AuthorizationError(BaseAppException):
    """Exception raised when the caller lacks the required role"""

    def __init__(
        self,
        message: str = "Not allowed to access this route",
        required_role: Optional[str] = None
    ):
        details = {"required_role": required_role} if required_role else {}
        super().__init__(message, ErrorCode.AUTHORIZATION_FAILED, details, 403)


# ========================================
# Database Exceptions
# ========================================

class RepositoryError(BaseAppException):
    """Exception raised when the persistence layer fails"""

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        status_code: int = 500
    ):
        details = {
            "operation": operation,
            "table": table
        }
        super().__init__(message, error_code, details, status_code)


class ConstraintViolationError(RepositoryError):
    """Exception raised when a write violates a unique or foreign key constraint"""

    def __init__(
        self,
        message: str = "Constraint violation",
        operation: Optional[str] = None,
        table: Optional[str] = None
    ):
        super().__init__(
            message,
            operation=operation,
            table=table,
            error_code=ErrorCode.CONSTRAINT_VIOLATION,
            status_code=400
        )


# ========================================
# Business Logic Exceptions
# ========================================

class ActiveBookingConflictError(BaseAppException):
    """Exception raised when an active booking blocks a room mutation"""

    def __init__(
        self,
        message: str,
        room_id: Optional[str] = None,
        booking_id: Optional[str] = None
    ):
        details = {
            "room_id": room_id,
            "booking_id": booking_id
        }
        super().__init__(message, ErrorCode.BOOKING_CONFLICT, details, 400)
