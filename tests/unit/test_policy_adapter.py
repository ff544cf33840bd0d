"""Tests for firedesk/infrastructure/authorization/policy_adapter.py."""

from unittest.mock import patch

import pytest

from firedesk.domain.enums import Operation, ResourceKind, UserRole
from firedesk.domain.value_objects import Actor, Decision, OwnershipView
from firedesk.infrastructure.authorization.policy_adapter import (
    PolicyAuthorizationAdapter,
)


@pytest.fixture
def adapter(mock_logger) -> PolicyAuthorizationAdapter:
    return PolicyAuthorizationAdapter(logger=mock_logger)


@pytest.mark.unit
class TestPolicyAuthorizationAdapter:
    def test_allowed_check_logged_at_debug(self, adapter, mock_logger):
        admin = Actor(role=UserRole.ADMIN, user_id="admin-1")

        assert adapter.authorize(admin, Operation.VIEW, ResourceKind.LOGS) is True
        mock_logger.debug.assert_called_once()
        mock_logger.info.assert_not_called()

    def test_denial_logged_at_info(self, adapter, mock_logger):
        customer = Actor(role=UserRole.MUSTERI_SEVIYE1, user_id="u1", institution_id="i1")

        assert adapter.authorize(customer, Operation.VIEW, ResourceKind.LOGS) is False
        assert mock_logger.info.call_args.args[0] == "authorization_denied"
        assert mock_logger.info.call_args.kwargs["resource"] == "Logs"

    def test_policy_error_fails_closed(self, adapter, mock_logger):
        """Unexpected errors deny and are logged."""
        admin = Actor(role=UserRole.ADMIN, user_id="admin-1")
        with patch(
            "firedesk.infrastructure.authorization.policy_adapter.access_policy.authorize",
            side_effect=RuntimeError("broken rule"),
        ):
            assert adapter.authorize(admin, Operation.VIEW, ResourceKind.DEVICES) is False

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args[0] == "authorization_check_error"

    def test_decide_matches_pure_policy(self, adapter):
        provider = Actor(role=UserRole.HIZMETSAGLAYICI_SEVIYE1, institution_id="p1")
        card = OwnershipView(provider_ins_id="p1", customer_ins_id="c1")

        assert adapter.decide(provider, ResourceKind.MAINTENANCE_CARDS, card) == Decision(
            can_view=True, can_create=True, can_update=True, can_delete=True
        )

    def test_decide_includes_respond(self, adapter):
        provider = Actor(role=UserRole.HIZMETSAGLAYICI_SEVIYE2, user_id="p2", institution_id="pi")
        request = OwnershipView(creator_ins_id="ci", status="Aktif")

        decision = adapter.decide(provider, ResourceKind.OFFER_REQUESTS, request)

        assert decision.can_view is True
        assert decision.can_respond is True
        assert decision.can_delete is False
