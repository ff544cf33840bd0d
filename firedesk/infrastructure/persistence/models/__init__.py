"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from firedesk.infrastructure.persistence.models.action import ActionModel
from firedesk.infrastructure.persistence.models.institution import InstitutionModel
from firedesk.infrastructure.persistence.models.log_entry import LogEntryModel
from firedesk.infrastructure.persistence.models.table_kind import TableKindModel
from firedesk.infrastructure.persistence.models.user import UserModel

__all__ = [
    "ActionModel",
    "InstitutionModel",
    "LogEntryModel",
    "TableKindModel",
    "UserModel",
]
