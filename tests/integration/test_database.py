"""Integration tests for Database session management."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from firedesk.infrastructure.persistence.models import ActionModel, UserModel


@pytest.mark.integration
class TestDatabase:
    async def test_check_connection(self, test_database):
        assert await test_database.check_connection() is True

    async def test_transaction_commits_as_unit(self, test_database):
        async with test_database.transaction() as session:
            session.add(ActionModel(name="EKLE"))
            session.add(ActionModel(name="SİL"))

        async with test_database.get_session() as session:
            count = (await session.execute(select(func.count(ActionModel.id)))).scalar_one()
        assert count == 2

    async def test_transaction_rolls_back_on_error(self, test_database):
        with pytest.raises(RuntimeError):
            async with test_database.transaction() as session:
                session.add(ActionModel(name="EKLE"))
                await session.flush()
                raise RuntimeError("abort")

        async with test_database.get_session() as session:
            count = (await session.execute(select(func.count(ActionModel.id)))).scalar_one()
        assert count == 0

    async def test_get_session_rolls_back_on_error(self, test_database):
        with pytest.raises(RuntimeError):
            async with test_database.get_session() as session:
                session.add(ActionModel(name="GÜNCELLE"))
                await session.flush()
                raise RuntimeError("abort")

        async with test_database.get_session() as session:
            names = (await session.execute(select(ActionModel.name))).scalars().all()
        assert names == []

    async def test_drop_all_removes_tables(self, test_database):
        await test_database.drop_all()

        with pytest.raises(OperationalError):
            async with test_database.get_session() as session:
                await session.execute(select(ActionModel))

    async def test_mutable_models_track_updated_at(self, test_database, seed_user):
        await seed_user("u1", role="ADMIN")

        async with test_database.get_session() as session:
            user = await session.get(UserModel, "u1")
            assert user.updated_at is not None
            assert user.created_at is not None
