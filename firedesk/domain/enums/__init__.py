"""Domain enums for business logic.

Available Enums:
    - UserRole: Dashboard roles (admin, customer and provider levels)
    - ResourceKind: Protected resource kinds, doubling as audit table kinds
    - Operation: Operations on resources (view, create, update, delete, respond)
    - AuditAction: Audit trail action names
    - RequestStatus: Offer request lifecycle states
"""

from firedesk.domain.enums.audit_action import AuditAction
from firedesk.domain.enums.permission import Operation, ResourceKind
from firedesk.domain.enums.request_status import RequestStatus
from firedesk.domain.enums.user_role import UserRole

__all__ = [
    "AuditAction",
    "Operation",
    "RequestStatus",
    "ResourceKind",
    "UserRole",
]
