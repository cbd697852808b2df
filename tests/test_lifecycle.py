import pytest
from sqlalchemy import text

from account_store import NotInitializedError, Store, settings

TABLES = ["payment_transactions", "token_usage_logs", "user_tokens", "users"]


async def table_names(store):
    async with store.get_connection().connect() as conn:
        result = await conn.execute(
            text("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name")
        )
        return [row[0] for row in result]


async def table_info(store, table):
    async with store.get_connection().connect() as conn:
        result = await conn.execute(text(f"PRAGMA table_info({table})"))
        return {row[1]: row for row in result}


def test_default_path_comes_from_settings():
    assert Store().db_path == settings.database_file


async def test_get_connection_before_initialize_fails(db_path):
    store = Store(db_path)

    with pytest.raises(NotInitializedError, match="Database not initialized"):
        store.get_connection()


async def test_accessors_before_initialize_fail(db_path):
    store = Store(db_path)

    with pytest.raises(NotInitializedError):
        await store.find_user_by_email("ada@example.com")


async def test_initialize_creates_file_and_tables(store, db_path):
    assert db_path.exists()
    assert await table_names(store) == TABLES


async def test_initialize_is_idempotent(store):
    assert await store.initialize() is True
    assert await store.initialize() is True

    assert await table_names(store) == TABLES


async def test_initialize_keeps_existing_rows(db_path, user_data):
    async with Store(db_path) as first:
        await first.create_user(user_data)

    async with Store(db_path) as second:
        assert await second.find_user_by_id(user_data["id"]) is not None


async def test_schema_columns_and_defaults(store):
    users = await table_info(store, "users")
    assert set(users) == {
        "id", "email", "password", "name", "verified", "exam_data",
        "onboarding_completed", "created_at", "updated_at",
    }
    assert users["id"][2] == "TEXT"
    assert users["id"][5] == 1
    assert users["email"][3] == 1
    assert users["verified"][4] == "0"
    assert users["onboarding_completed"][4] == "0"
    assert users["created_at"][2] == "DATETIME"
    assert users["created_at"][4] == "CURRENT_TIMESTAMP"

    tokens = await table_info(store, "user_tokens")
    assert tokens["tokens_available"][4] == "50"
    assert tokens["tokens_used"][4] == "0"
    assert tokens["total_purchased"][4] == "50"

    payments = await table_info(store, "payment_transactions")
    assert payments["amount"][2] == "REAL"
    assert payments["status"][4] == "'completed'"

    logs = await table_info(store, "token_usage_logs")
    assert set(logs) == {
        "id", "user_id", "action_type", "tokens_used", "description",
        "exam_type", "subject", "topic", "created_at",
    }


async def test_foreign_keys_are_enforced(store):
    async with store.get_connection().connect() as conn:
        result = await conn.execute(text("PRAGMA foreign_keys"))
        assert result.scalar() == 1


async def test_close_connections(store):
    await store.close_connections()

    with pytest.raises(NotInitializedError):
        store.get_connection()


async def test_close_connections_without_initialize_is_noop(db_path):
    store = Store(db_path)

    await store.close_connections()
    await store.close_connections()


async def test_check_connection(store, db_path):
    assert await store.check_connection() is True
    assert await Store(db_path).check_connection() is False
