"""Audit log endpoints (admin only).

GET /api/v1/audit-logs
GET /api/v1/audit-logs/filters
GET /api/v1/audit-logs/activity
"""

import math
from datetime import UTC, date, datetime, time
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from firedesk.core.config import settings
from firedesk.core.container import get_audit, get_logger
from firedesk.core.result import Failure, Success
from firedesk.domain.enums import Operation, ResourceKind
from firedesk.domain.protocols.audit_protocol import AuditProtocol
from firedesk.domain.protocols.logger_protocol import LoggerProtocol
from firedesk.domain.value_objects import Actor
from firedesk.presentation.routers.api.middleware.authorization_dependencies import (
    require_operation,
)
from firedesk.schemas.audit_log_schemas import (
    ActivitySummaryResponse,
    AuditFilterOptionsResponse,
    AuditLogEntryResponse,
    AuditLogListResponse,
    MonthlyActivity,
)

router = APIRouter(prefix="/audit-logs", tags=["Audit Logs"])

require_logs_view = require_operation(ResourceKind.LOGS, Operation.VIEW)


def _store_unavailable(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=detail,
    )


@router.get(
    "",
    response_model=AuditLogListResponse,
    summary="List audit log entries",
)
async def list_audit_logs(
    user_id: str | None = Query(None, description="Exact attributed user id"),
    action_id: str | None = Query(None, description="Exact action lookup id"),
    table_id: str | None = Query(None, description="Exact table lookup id"),
    ip: str | None = Query(None, description="Origin contains (case-insensitive)"),
    search: str | None = Query(
        None, description="User, action, table or origin contains"
    ),
    date_from: date | None = Query(None, description="First day (inclusive)"),
    date_to: date | None = Query(None, description="Last day (inclusive)"),
    sort_by: Literal["date", "user", "action", "table", "ip"] = Query("date"),
    sort_order: Literal["asc", "desc"] = Query("desc"),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    actor: Actor = Depends(require_logs_view),
    audit: AuditProtocol = Depends(get_audit),
    logger: LoggerProtocol = Depends(get_logger),
) -> AuditLogListResponse:
    """Paginated audit log listing, newest first by default."""
    if date_from and date_to and date_from > date_to:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="date_from must not be after date_to",
        )

    size = min(page_size or settings.items_per_page, settings.audit_query_max_limit)
    result = await audit.query(
        user_id=user_id,
        action_id=action_id,
        table_id=table_id,
        ip=ip,
        search=search,
        date_from=datetime.combine(date_from, time.min, UTC) if date_from else None,
        date_to=datetime.combine(date_to, time.max, UTC) if date_to else None,
        sort_by=sort_by,
        sort_order=sort_order,
        limit=size,
        offset=(page - 1) * size,
    )

    match result:
        case Success(value=(entries, total)):
            logger.debug("audit_logs_listed", user_id=actor.user_id, total=total)
            return AuditLogListResponse(
                items=[AuditLogEntryResponse(**entry) for entry in entries],
                total=total,
                page=page,
                page_size=size,
                total_pages=math.ceil(total / size) if total else 0,
            )
        case Failure(error=error):
            logger.error(
                "audit_logs_query_failed",
                error_code=error.code.value,
                error_message=error.message,
            )
            raise _store_unavailable("Audit logs are temporarily unavailable")


@router.get(
    "/filters",
    response_model=AuditFilterOptionsResponse,
    summary="List audit filter options",
)
async def list_audit_filters(
    _: Actor = Depends(require_logs_view),
    audit: AuditProtocol = Depends(get_audit),
) -> AuditFilterOptionsResponse:
    """Action and table lookup rows for the filter dropdowns."""
    match await audit.list_filter_options():
        case Success(value=options):
            return AuditFilterOptionsResponse.model_validate(options)
        case Failure():
            raise _store_unavailable("Audit filters are temporarily unavailable")


@router.get(
    "/activity",
    response_model=ActivitySummaryResponse,
    summary="Monthly audit activity by role group",
)
async def get_audit_activity(
    year: int | None = Query(None, ge=2000, le=9999),
    _: Actor = Depends(require_logs_view),
    audit: AuditProtocol = Depends(get_audit),
) -> ActivitySummaryResponse:
    """Entries per month of ``year`` (default: current year) by role group."""
    selected_year = year or datetime.now(UTC).year
    match await audit.activity_by_month(selected_year):
        case Success(value=months):
            return ActivitySummaryResponse(
                year=selected_year,
                months=[MonthlyActivity(**month) for month in months],
            )
        case Failure():
            raise _store_unavailable("Audit activity is temporarily unavailable")
