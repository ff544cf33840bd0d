"""Audit recorder service.

Called after every successful mutation to append an audit entry. Recording
is best-effort: the recorder never raises, it reports failures through the
logger and returns False, so an audit problem never fails the mutation.

Attribution:
    The entry is attributed to the first of:
        1. the candidate user id, if non-empty and the user exists
        2. the earliest ADMIN user
        3. the earliest user of any role
    If none exists nothing is written (not even lookup rows).

Usage:
    recorder = AuditRecorder(user_repo, audit, logger, fallback_ip="127.0.0.1")

    await recorder.record_action(actor.user_id, AuditAction.CREATE, ResourceKind.DEVICES, request.headers)

    # Offer + notification created together
    await recorder.record_actions(
        actor.user_id,
        AuditAction.CREATE,
        [ResourceKind.OFFER_CARDS, ResourceKind.NOTIFICATIONS],
        request.headers,
    )
"""

from collections.abc import Mapping, Sequence
from enum import Enum

from firedesk.core.enums import ErrorCode
from firedesk.core.result import Failure, Result, Success
from firedesk.domain.entities.user import User
from firedesk.domain.enums import AuditAction, ResourceKind, UserRole
from firedesk.domain.errors import AuditError
from firedesk.domain.protocols.audit_protocol import AuditProtocol
from firedesk.domain.protocols.logger_protocol import LoggerProtocol
from firedesk.domain.protocols.user_repository import UserRepository
from firedesk.infrastructure.audit.request_origin import resolve_request_origin


def _name(value: AuditAction | ResourceKind | str) -> str:
    return value.value if isinstance(value, Enum) else value


class AuditRecorder:
    """Attributes and appends audit entries.

    Dependencies (injected via constructor):
        - UserRepository: attribution fallback chain
        - AuditProtocol: lookup rows and entry insert
        - LoggerProtocol: operator-facing diagnostics
    """

    def __init__(
        self,
        user_repo: UserRepository,
        audit: AuditProtocol,
        logger: LoggerProtocol,
        fallback_ip: str = "127.0.0.1",
    ) -> None:
        """Initialize recorder with dependencies.

        Args:
            user_repo: Repository used to resolve the attributed user.
            audit: Audit store.
            logger: Structured logger.
            fallback_ip: Origin recorded when no forwarding header is set.
        """
        self._user_repo = user_repo
        self._audit = audit
        self._logger = logger
        self._fallback_ip = fallback_ip

    async def resolve_user(
        self, candidate_user_id: str | None
    ) -> Result[User, AuditError]:
        """Walk the attribution fallback chain.

        Returns:
            Success(User): The attributed user.
            Failure(AuditError): No user exists at all.
        """
        if candidate_user_id:
            user = await self._user_repo.find_by_id(candidate_user_id)
            if user is not None:
                return Success(value=user)

        user = await self._user_repo.find_first_by_role(UserRole.ADMIN)
        if user is None:
            user = await self._user_repo.find_first()
        if user is None:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_USER_UNRESOLVED,
                    message="No user available to attribute the audit entry to",
                    details={"candidate_user_id": candidate_user_id or ""},
                )
            )

        if candidate_user_id:
            self._logger.info(
                "audit_user_fallback",
                candidate_user_id=candidate_user_id,
                attributed_user_id=user.id,
            )
        return Success(value=user)

    async def record_action(
        self,
        candidate_user_id: str | None,
        action: AuditAction | str,
        table_kind: ResourceKind | str,
        headers: Mapping[str, str],
    ) -> bool:
        """Append one audit entry.

        Args:
            candidate_user_id: Acting user id from the session (may be None
                or empty).
            action: Action name, e.g. AuditAction.CREATE.
            table_kind: Table kind, usually a ResourceKind.
            headers: Request headers used to derive the origin.

        Returns:
            bool: True if an entry was written, False otherwise. Never raises.
        """
        results = await self.record_actions(
            candidate_user_id, action, [table_kind], headers
        )
        return results[0]

    async def record_actions(
        self,
        candidate_user_id: str | None,
        action: AuditAction | str,
        table_kinds: Sequence[ResourceKind | str],
        headers: Mapping[str, str],
    ) -> list[bool]:
        """Append one entry per table kind for a compound mutation.

        The user and origin are resolved once. Entries are written in order
        and independently: a failure for one kind does not stop the others.

        Returns:
            list[bool]: One flag per table kind, in order.
        """
        action_name = _name(action)
        table_names = [_name(kind) for kind in table_kinds]

        try:
            match await self.resolve_user(candidate_user_id):
                case Success(value=user):
                    pass
                case Failure(error=error):
                    self._logger.warning(
                        "audit_user_unresolved",
                        action=action_name,
                        tables=table_names,
                        reason=error.message,
                    )
                    return [False] * len(table_names)

            ip = resolve_request_origin(headers, self._fallback_ip)
        except Exception as e:
            self._logger.error(
                "audit_record_failed",
                error=e,
                action=action_name,
                tables=table_names,
            )
            return [False] * len(table_names)

        outcomes: list[bool] = []
        for table_name in table_names:
            outcomes.append(
                await self._record_one(user.id, action_name, table_name, ip)
            )
        return outcomes

    async def _record_one(
        self, user_id: str, action_name: str, table_name: str, ip: str
    ) -> bool:
        try:
            result = await self._audit.record(
                user_id=user_id,
                action_name=action_name,
                table_name=table_name,
                ip=ip,
            )
        except Exception as e:
            self._logger.error(
                "audit_record_failed",
                error=e,
                user_id=user_id,
                action=action_name,
                table=table_name,
            )
            return False

        match result:
            case Success(value=entry):
                self._logger.debug(
                    "audit_recorded",
                    log_id=entry.id,
                    user_id=user_id,
                    action=action_name,
                    table=table_name,
                )
                return True
            case Failure(error=error):
                self._logger.error(
                    "audit_record_failed",
                    user_id=user_id,
                    action=action_name,
                    table=table_name,
                    error_code=error.code.value,
                    error_message=error.message,
                )
                return False
