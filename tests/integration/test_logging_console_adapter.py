"""Integration tests for ConsoleAdapter output."""

import json

import pytest

from firedesk.infrastructure.logging.console_adapter import ConsoleAdapter


def last_json_line(text: str) -> dict:
    lines = [line for line in text.splitlines() if line.strip()]
    return json.loads(lines[-1])


@pytest.mark.integration
class TestConsoleAdapterJson:
    def test_info_is_one_json_object(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="DEBUG")

        logger.info("audit_recorded", user_id="admin-1", table="Devices")

        event = last_json_line(capsys.readouterr().out)
        assert event["event"] == "audit_recorded"
        assert event["level"] == "info"
        assert event["user_id"] == "admin-1"
        assert event["table"] == "Devices"
        assert "timestamp" in event

    def test_error_folds_exception(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="DEBUG")

        logger.error("audit_record_failed", error=ValueError("boom"), table="Logs")

        event = last_json_line(capsys.readouterr().out)
        assert event["level"] == "error"
        assert event["error_type"] == "ValueError"
        assert event["error_message"] == "boom"

    def test_level_filters_lower_messages(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.debug("authorization_checked")
        logger.info("audit_user_fallback")
        logger.warning("audit_user_unresolved")

        out = capsys.readouterr().out
        assert "authorization_checked" not in out
        assert "audit_user_fallback" not in out
        assert last_json_line(out)["event"] == "audit_user_unresolved"

    def test_bind_adds_context(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="INFO").bind(request_id="r-1")

        logger.info("authorization_denied", role="GUEST")

        event = last_json_line(capsys.readouterr().out)
        assert event["request_id"] == "r-1"
        assert event["role"] == "GUEST"


@pytest.mark.integration
def test_console_renderer_is_plain_text(capsys):
    logger = ConsoleAdapter(use_json=False, level="INFO")

    logger.info("app_started", version="0.1.0")

    out = capsys.readouterr().out
    assert "app_started" in out
    with pytest.raises(json.JSONDecodeError):
        json.loads(out.strip().splitlines()[-1])
