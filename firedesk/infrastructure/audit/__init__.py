"""Audit trail infrastructure (storage adapter, request origin)."""

from firedesk.infrastructure.audit.postgres_adapter import PostgresAuditAdapter
from firedesk.infrastructure.audit.request_origin import resolve_request_origin

__all__ = ["PostgresAuditAdapter", "resolve_request_origin"]
