"""Domain entities."""

from firedesk.domain.entities.log_entry import LogEntry
from firedesk.domain.entities.user import User

__all__ = ["LogEntry", "User"]
