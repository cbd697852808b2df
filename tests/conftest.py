import pytest
import pytest_asyncio
from sqlalchemy import text

from account_store import Store


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "data" / "test.sqlite"


@pytest_asyncio.fixture
async def store(db_path):
    store = Store(db_path)
    await store.initialize()
    yield store
    await store.close_connections()


@pytest.fixture
def user_data():
    return {
        "id": "user-1",
        "email": "ada@example.com",
        "password": "$2b$12$hashedpasswordvalue",
        "name": "Ada",
        "verified": True,
    }


@pytest_asyncio.fixture
async def user(store, user_data):
    await store.create_user(user_data)
    return await store.find_user_by_id(user_data["id"])


async def count_rows(store, table, **where):
    sql = f"SELECT COUNT(*) FROM {table}"
    if where:
        sql += " WHERE " + " AND ".join(f"{column} = :{column}" for column in where)
    async with store.get_connection().connect() as conn:
        result = await conn.execute(text(sql), where)
        return result.scalar()


async def execute(store, sql, **params):
    async with store.get_connection().begin() as conn:
        await conn.execute(text(sql), params)
