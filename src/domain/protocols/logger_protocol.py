"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging. Handlers and services receive a logger
through their constructor and never configure logging themselves.

Security:
    - NEVER log passwords, password hashes, session tokens, or one-time codes
    - Log account ids and emails only where needed to trace a flow

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("login_succeeded", account_id=str(account.id))

    scoped = logger.bind(handler="ResetPasswordHandler")
    scoped.warning("password_reset_rejected", reason="recently_reused")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: an event name plus key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for failures needing immediate attention."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Example:
            request_logger = logger.bind(account_id=str(account_id))
            request_logger.info("password_changed")
        """
        ...
