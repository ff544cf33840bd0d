"""API v1 routers.

Resources:
    /api/v1/audit-logs                - Audit log listing (admin only)
    /api/v1/audit-logs/filters        - Audit filter options (admin only)
    /api/v1/audit-logs/activity       - Monthly audit activity (admin only)
    /api/v1/authorization/decisions   - CRUD verdicts for the current actor
"""

from fastapi import APIRouter

from firedesk.core.config import settings
from firedesk.presentation.routers.api.v1.audit_logs import router as audit_logs_router
from firedesk.presentation.routers.api.v1.authorization import (
    router as authorization_router,
)

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(audit_logs_router)
v1_router.include_router(authorization_router)

__all__ = [
    "v1_router",
]
