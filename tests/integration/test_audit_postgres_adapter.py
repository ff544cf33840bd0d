"""Integration tests for PostgresAuditAdapter with a real database.

Tests cover:
- Lazy, idempotent creation of action/table lookup rows
- Attribution end to end through AuditRecorder
- Unique-name race on a brand-new table kind
- Listing filters, search, sorting and pagination
- Filter options and monthly activity summary

Architecture:
- SQLite file database per test (test_database fixture)
- Separate sessions for writing and verifying, as in production
"""

import asyncio
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from firedesk.application.services.audit_recorder import AuditRecorder
from firedesk.core.result import Failure, Success
from firedesk.infrastructure.audit.postgres_adapter import PostgresAuditAdapter
from firedesk.infrastructure.persistence.models import (
    ActionModel,
    LogEntryModel,
    TableKindModel,
)
from firedesk.infrastructure.persistence.repositories import UserRepository


async def count_rows(database, model) -> int:
    async with database.get_session() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


async def add_entry(database, *, user_id, action, table, ip="10.0.0.1", at=None):
    """Record an entry, optionally back-dated."""
    async with database.get_session() as session:
        adapter = PostgresAuditAdapter(session=session)
        result = await adapter.record(user_id=user_id, action_name=action, table_name=table, ip=ip)
        assert isinstance(result, Success)
        if at is not None:
            entry = await session.get(LogEntryModel, result.value.id)
            entry.created_at = at
        return result.value


@pytest.mark.integration
class TestRecord:
    """Test record() with a real database."""

    async def test_record_creates_lookup_rows_and_entry(self, test_database, seed_user):
        await seed_user("u1", role="MUSTERI_SEVIYE1")

        async with test_database.get_session() as session:
            adapter = PostgresAuditAdapter(session=session)
            result = await adapter.record(
                user_id="u1", action_name="EKLE", table_name="Devices", ip="10.0.0.1"
            )

        assert isinstance(result, Success)
        entry = result.value
        assert entry.user_id == "u1"
        assert entry.ip == "10.0.0.1"
        assert entry.date is not None

        async with test_database.get_session() as verify_session:
            action = (
                await verify_session.execute(select(ActionModel).where(ActionModel.name == "EKLE"))
            ).scalar_one()
            table = (
                await verify_session.execute(
                    select(TableKindModel).where(TableKindModel.name == "Devices")
                )
            ).scalar_one()
        assert entry.action_id == action.id
        assert entry.table_id == table.id

    async def test_lookup_rows_are_reused(self, test_database, seed_user):
        """Recording twice creates one action row, one table row and two entries."""
        await seed_user("u1", role="ADMIN")

        first = await add_entry(test_database, user_id="u1", action="SİL", table="OfferCards")
        second = await add_entry(test_database, user_id="u1", action="SİL", table="OfferCards")

        assert first.action_id == second.action_id
        assert first.table_id == second.table_id
        assert await count_rows(test_database, ActionModel) == 1
        assert await count_rows(test_database, TableKindModel) == 1
        assert await count_rows(test_database, LogEntryModel) == 2

    async def test_failed_insert_keeps_lookup_rows(self, test_database):
        """Steps commit separately: a failing insert leaves earlier rows."""
        async with test_database.get_session() as session:
            adapter = PostgresAuditAdapter(session=session)
            result = await adapter.record(
                user_id="u1", action_name="EKLE", table_name="Devices", ip=None  # type: ignore[arg-type]
            )

        assert isinstance(result, Failure)
        assert await count_rows(test_database, ActionModel) == 1
        assert await count_rows(test_database, TableKindModel) == 1
        assert await count_rows(test_database, LogEntryModel) == 0

    async def test_lost_race_rereads_winner(self, test_database, seed_user):
        """A unique violation on create resolves to the committed row."""
        await seed_user("u1", role="ADMIN")
        async with test_database.get_session() as session:
            winner = TableKindModel(name="NewTable")
            session.add(winner)
        winner_id = winner.id

        async with test_database.get_session() as session:
            adapter = PostgresAuditAdapter(session=session)
            real_find = adapter._find_lookup_id

            async def stale_then_real(model, name):
                if model is TableKindModel and not stale_then_real.called:
                    stale_then_real.called = True
                    return None
                return await real_find(model, name)

            stale_then_real.called = False
            adapter._find_lookup_id = stale_then_real  # type: ignore[method-assign]

            result = await adapter.record(
                user_id="u1", action_name="EKLE", table_name="NewTable", ip="10.0.0.1"
            )

        assert isinstance(result, Success)
        assert result.value.table_id == winner_id
        assert await count_rows(test_database, TableKindModel) == 1

    async def test_concurrent_new_table_kind(self, test_database, seed_user):
        """Two concurrent recorders naming a new table share one row."""
        await seed_user("u1", role="ADMIN")

        async def record_once():
            async with test_database.get_session() as session:
                adapter = PostgresAuditAdapter(session=session)
                return await adapter.record(
                    user_id="u1", action_name="EKLE", table_name="NewTable", ip="10.0.0.1"
                )

        first, second = await asyncio.gather(record_once(), record_once())

        assert isinstance(first, Success)
        assert isinstance(second, Success)
        assert first.value.table_id == second.value.table_id
        async with test_database.get_session() as session:
            names = (
                await session.execute(
                    select(func.count()).where(TableKindModel.name == "NewTable")
                )
            ).scalar_one()
        assert names == 1
        assert await count_rows(test_database, LogEntryModel) == 2


@pytest.mark.integration
class TestRecorderWithDatabase:
    """AuditRecorder wired to the real repository and adapter."""

    async def test_empty_candidate_attributed_to_admin(self, test_database, seed_user, mock_logger):
        await seed_user("admin-1", role="ADMIN")
        await seed_user("c1", role="MUSTERI_SEVIYE1")

        async with test_database.get_session() as session:
            recorder = AuditRecorder(
                user_repo=UserRepository(session=session),
                audit=PostgresAuditAdapter(session=session),
                logger=mock_logger,
            )
            ok = await recorder.record_action("", "EKLE", "Devices", {})

        assert ok is True
        async with test_database.get_session() as session:
            entry = (await session.execute(select(LogEntryModel))).scalar_one()
        assert entry.user_id == "admin-1"
        assert entry.ip == "127.0.0.1"

    async def test_empty_store_writes_nothing(self, test_database, mock_logger):
        async with test_database.get_session() as session:
            recorder = AuditRecorder(
                user_repo=UserRepository(session=session),
                audit=PostgresAuditAdapter(session=session),
                logger=mock_logger,
            )
            ok = await recorder.record_action("", "EKLE", "Devices", {})

        assert ok is False
        assert await count_rows(test_database, ActionModel) == 0
        assert await count_rows(test_database, TableKindModel) == 0
        assert await count_rows(test_database, LogEntryModel) == 0


@pytest.fixture
async def populated(test_database, seed_user):
    """Three users and five entries spread over 2026."""
    await seed_user("admin-1", role="ADMIN", name="Ada Admin")
    await seed_user("c1", role="MUSTERI_SEVIYE1", name="Cem Customer", institution_id="ic")
    await seed_user("p1", role="HIZMETSAGLAYICI_SEVIYE2", name="Pelin Provider", institution_id="ip")

    await add_entry(test_database, user_id="c1", action="EKLE", table="Devices",
                    ip="10.0.0.1", at=datetime(2026, 1, 10, 9, 0, tzinfo=UTC))
    await add_entry(test_database, user_id="c1", action="GÜNCELLE", table="Devices",
                    ip="10.0.0.2", at=datetime(2026, 2, 11, 9, 0, tzinfo=UTC))
    await add_entry(test_database, user_id="p1", action="EKLE", table="OfferCards",
                    ip="192.168.1.5", at=datetime(2026, 2, 12, 9, 0, tzinfo=UTC))
    await add_entry(test_database, user_id="p1", action="EKLE", table="Notifications",
                    ip="192.168.1.5", at=datetime(2026, 2, 12, 9, 0, 1, tzinfo=UTC))
    await add_entry(test_database, user_id="admin-1", action="SİL", table="Institutions",
                    ip="127.0.0.1", at=datetime(2026, 3, 1, 9, 0, tzinfo=UTC))
    return test_database


@pytest.mark.integration
class TestQuery:
    """Test query() filters, sorting and pagination."""

    async def run_query(self, database, **filters):
        async with database.get_session() as session:
            result = await PostgresAuditAdapter(session=session).query(**filters)
        assert isinstance(result, Success)
        return result.value

    async def test_default_is_newest_first_with_joined_names(self, populated):
        entries, total = await self.run_query(populated, limit=10)

        assert total == 5
        assert [e["table_name"] for e in entries][:2] == ["Institutions", "Notifications"]
        assert entries[0]["user_name"] == "Ada Admin"
        assert entries[0]["action_name"] == "SİL"

    async def test_pagination_keeps_total(self, populated):
        page, total = await self.run_query(populated, limit=2, offset=2)

        assert total == 5
        assert [e["table_name"] for e in page] == ["OfferCards", "Devices"]

    async def test_filter_by_user(self, populated):
        entries, total = await self.run_query(populated, user_id="p1")

        assert total == 2
        assert {e["user_id"] for e in entries} == {"p1"}

    async def test_ip_contains_filter(self, populated):
        entries, total = await self.run_query(populated, ip="192.168")
        assert total == 2

    async def test_search_matches_user_action_table_and_ip(self, populated):
        _, by_user = await self.run_query(populated, search="cem")
        _, by_action = await self.run_query(populated, search="GÜNCELLE")
        _, by_table = await self.run_query(populated, search="offer")
        _, by_ip = await self.run_query(populated, search="127.0")

        assert (by_user, by_action, by_table, by_ip) == (2, 1, 1, 1)

    async def test_date_range(self, populated):
        entries, total = await self.run_query(
            populated,
            date_from=datetime(2026, 2, 1, tzinfo=UTC),
            date_to=datetime(2026, 2, 28, 23, 59, 59, tzinfo=UTC),
        )
        assert total == 3

    async def test_sort_by_user_ascending(self, populated):
        entries, _ = await self.run_query(populated, sort_by="user", sort_order="asc")
        assert [e["user_name"] for e in entries][0] == "Ada Admin"
        assert [e["user_name"] for e in entries][-1] == "Pelin Provider"

    async def test_limit_is_capped(self, populated):
        async with populated.get_session() as session:
            result = await PostgresAuditAdapter(session=session, max_limit=2).query(limit=500)
        entries, total = result.value
        assert len(entries) == 2
        assert total == 5


@pytest.mark.integration
class TestFilterOptionsAndActivity:
    async def test_filter_options_sorted_by_name(self, populated):
        async with populated.get_session() as session:
            result = await PostgresAuditAdapter(session=session).list_filter_options()

        assert isinstance(result, Success)
        assert [a["name"] for a in result.value["actions"]] == sorted(["EKLE", "GÜNCELLE", "SİL"])
        assert [t["name"] for t in result.value["tables"]] == [
            "Devices",
            "Institutions",
            "Notifications",
            "OfferCards",
        ]

    async def test_activity_by_month_groups_roles(self, populated):
        async with populated.get_session() as session:
            result = await PostgresAuditAdapter(session=session).activity_by_month(2026)

        assert isinstance(result, Success)
        months = result.value
        assert len(months) == 12
        assert months[0] == {"month": 1, "customer": 1, "provider": 0, "admin": 0}
        assert months[1] == {"month": 2, "customer": 1, "provider": 2, "admin": 0}
        assert months[2] == {"month": 3, "customer": 0, "provider": 0, "admin": 1}
        assert all(m["customer"] + m["provider"] + m["admin"] == 0 for m in months[3:])

    async def test_other_year_is_empty(self, populated):
        async with populated.get_session() as session:
            result = await PostgresAuditAdapter(session=session).activity_by_month(2025)
        assert sum(m["admin"] + m["customer"] + m["provider"] for m in result.value) == 0


@pytest.mark.integration
class TestErrors:
    async def test_query_failure_is_wrapped(self):
        session = AsyncMock()
        session.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        result = await PostgresAuditAdapter(session=session).query()

        assert isinstance(result, Failure)
        assert result.error.code.value == "audit_query_failed"
