"""
Exception hierarchy for the blog application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class BloggerException(Exception):
    """Base exception for all blog application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the bare message; details are for logs, not clients."""
        return self.message


class NotFoundError(BloggerException):
    """Raised when a referenced record does not exist."""


class PostNotFoundError(NotFoundError):
    """Raised when a post cannot be found."""

    def __init__(self, post_id: Any, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["post_id"] = str(post_id)
        super().__init__(f"no post with id {post_id}", details)


class AuthorNotFoundError(NotFoundError):
    """Raised when an author cannot be found."""

    def __init__(self, author_id: Any, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["author_id"] = str(author_id)
        super().__init__(f"no author with id {author_id}", details)


class NotAuthorizedError(BloggerException):
    """Raised when the current session does not own the record it mutates."""

    def __init__(
        self,
        message: str = "NOT AUTHORIZED",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class EmailAlreadyRegisteredError(BloggerException):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["email"] = email
        super().__init__("Email already registered", details)
