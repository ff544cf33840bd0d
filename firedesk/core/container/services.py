"""Application service factories (request-scoped)."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from firedesk.application.services.audit_recorder import AuditRecorder
from firedesk.core.config import settings
from firedesk.core.container.infrastructure import get_audit_session, get_logger


async def get_audit_recorder(
    audit_session: AsyncSession = Depends(get_audit_session),
) -> AuditRecorder:
    """Get audit recorder for the request.

    User lookups for attribution run on the audit session, next to the
    lookup-row and entry writes.

    Usage:
        @router.post("/devices")
        async def create_device(
            request: Request,
            actor: Actor = Depends(get_current_actor),
            recorder: AuditRecorder = Depends(get_audit_recorder),
        ):
            ...
            await recorder.record_action(actor.user_id, AuditAction.CREATE, ResourceKind.DEVICES, request.headers)
    """
    from firedesk.infrastructure.audit.postgres_adapter import PostgresAuditAdapter
    from firedesk.infrastructure.persistence.repositories import UserRepository

    return AuditRecorder(
        user_repo=UserRepository(session=audit_session),
        audit=PostgresAuditAdapter(
            session=audit_session,
            max_limit=settings.audit_query_max_limit,
        ),
        logger=get_logger(),
        fallback_ip=settings.audit_fallback_ip,
    )
