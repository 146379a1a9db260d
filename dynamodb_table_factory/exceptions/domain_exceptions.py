"""
Store-Facing Exceptions

Raised by the table provisioner when DynamoDB rejects or fails a
CreateTable/DescribeTable call. botocore ClientErrors are translated into
these by ``map_dynamodb_error``.

Organized by category:
1. Request Validation Errors
2. Resource Errors
3. Infrastructure and Retry Errors
"""

from typing import Any, Dict, Optional

from .base import DynamoDBTableFactoryError


# =============================================================================
# Request Validation Errors
# =============================================================================

class ValidationError(DynamoDBTableFactoryError):
    """Raised when DynamoDB rejects a request as invalid.

    Used for:
    - ValidationException (e.g. key attributes without definitions)
    - LimitExceededException (too many tables or indexes)
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


# =============================================================================
# Resource Errors
# =============================================================================

class NotFoundError(DynamoDBTableFactoryError):
    """Raised when a DynamoDB table or index does not exist."""

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_name: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource not found (e.g., 'table', 'index')
            resource_name: Name of the resource not found
            original_error: The original exception that caused this error
        """
        self.resource_type = resource_type
        self.resource_name = resource_name
        context = {}
        if resource_type:
            context['resource_type'] = resource_type
        if resource_name:
            context['resource_name'] = resource_name
        super().__init__(message, original_error, context)


class ConflictError(DynamoDBTableFactoryError):
    """Raised when the table already exists or is being modified.

    Used for:
    - ResourceInUseException from CreateTable
    - TableAlreadyExistsException
    """

    def __init__(self, message: str, resource_id: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize conflict error.

        Args:
            message: Human-readable error message
            resource_id: Name of the conflicting table
            original_error: The original exception that caused this error
        """
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context)


# =============================================================================
# Infrastructure and Retry Errors
# =============================================================================

class ConnectionError(DynamoDBTableFactoryError):
    """Raised when connection to DynamoDB fails.

    Used for:
    - Authentication/authorization failures
    - Invalid endpoint configurations
    - Expired credentials
    - Unknown error codes
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        """Initialize connection error.

        Args:
            message: Human-readable error message
            original_error: The original exception that caused this error
            context: Additional context information (e.g., endpoint, region)
        """
        super().__init__(message, original_error, context)


class RetryableError(DynamoDBTableFactoryError):
    """Raised when an operation fails due to throttling or temporary issues."""

    retryable = True

    def __init__(self, message: str, retry_after_seconds: Optional[int] = None, original_error: Optional[Exception] = None):
        """Initialize retryable error.

        Args:
            message: Human-readable error message
            retry_after_seconds: Suggested retry delay in seconds
            original_error: The original exception that caused this error
        """
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context)
