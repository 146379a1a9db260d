from typing import Any, Dict, Optional


class DynamoDBTableFactoryError(Exception):
    """Base exception for the table factory.

    Definition errors and store errors both derive from it, so callers can
    catch everything the factory raises with one clause.

    Attributes:
        message: Human-readable error message
        original_error: The botocore or other exception this wraps (if any)
        context: Names of the offending type, field, index or table
        retryable: Whether repeating the same call may succeed
    """

    retryable: bool = False

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: The original exception that caused this error
            context: Additional context information about the error
        """
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the message followed by its context, if any."""
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} (Context: {context_str})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, original_error={self.original_error!r}, context={self.context!r})"
