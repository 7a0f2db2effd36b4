from uuid import uuid4

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from linkhub.db import session as db_session
from linkhub.db.models.link import Link
from linkhub.db.session import dispose_engine, get_session_factory, transaction_scope


async def _link_count(session) -> int:
    return await session.scalar(select(func.count()).select_from(Link))


@pytest.mark.asyncio
async def test_session_factory_is_created_with_the_engine():
    try:
        factory = get_session_factory()
        assert isinstance(factory, async_sessionmaker)
        assert get_session_factory() is factory
        assert db_session._engine is not None
    finally:
        await dispose_engine()

    assert db_session._session_factory is None


@pytest.mark.asyncio
async def test_transaction_scope_commits_on_success(test_db):
    async with transaction_scope(test_db):
        test_db.add(Link(user_id=uuid4(), title="a", url="https://a.test", position=0))

    await test_db.rollback()
    assert await _link_count(test_db) == 1


@pytest.mark.asyncio
async def test_transaction_scope_rolls_back_on_error(test_db):
    with pytest.raises(RuntimeError):
        async with transaction_scope(test_db):
            test_db.add(Link(user_id=uuid4(), title="a", url="https://a.test", position=0))
            await test_db.flush()
            raise RuntimeError("boom")

    assert await _link_count(test_db) == 0
