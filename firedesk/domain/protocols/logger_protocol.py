"""LoggerProtocol definition for structured logging.

Every log call is a short message plus key-value context. The audit
recorder and the authorization adapter report through this port, so the
backend (structlog today) stays swappable.

Usage:
    from firedesk.core.container import get_logger

    logger = get_logger()
    logger.warning("audit_user_unresolved", action="EKLE", table="Devices")

    request_logger = logger.bind(user_id=actor.user_id)
    request_logger.info("audit_logs_listed", total=42)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports DEBUG, INFO, WARNING, ERROR and CRITICAL levels plus context
    binding. Implementations must never log secrets such as session tokens.
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
        """Log an error-level message.

        Args:
            message: Event name or short description.
            error: Optional exception; adapters add its type and message.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message (service-wide failure)."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with ``context`` attached to every call.

        The original logger is left unchanged.
        """
        ...
