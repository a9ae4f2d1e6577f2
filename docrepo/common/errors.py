"""
Error Definitions

Defines the exceptions raised by the repository layer itself.
Driver errors (pymongo.errors.*) and decode errors (pydantic.ValidationError)
are not wrapped and reach the caller unchanged.
"""

from typing import Any, Optional


class AppError(Exception):
    """
    Application Base Exception

    Base class for all custom exceptions, containing error message, type, and code.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "app_error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_type: Error type
            code: Error code
            details: Extra error details
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code
        self.details = details or {}


class NotFoundError(AppError):
    """
    Document Not Found Error

    Raised when a single-document lookup matches nothing.
    """

    def __init__(
        self,
        message: str = "Document not found",
        code: str = "not_found",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="not_found_error",
            code=code,
            details=details,
        )


class InvalidIdentifierError(AppError):
    """
    Invalid Identifier Error

    Raised when an insert acknowledgment carries an identifier that is not an ObjectId,
    or when its identifier list does not line up with the submitted documents.
    """

    def __init__(
        self,
        message: str = "Invalid inserted identifier",
        code: str = "invalid_identifier",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="invalid_identifier_error",
            code=code,
            details=details,
        )
