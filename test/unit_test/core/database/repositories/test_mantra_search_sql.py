"""
Unit tests for the SQL the mantra search emits on PostgreSQL.

The session is mocked to report a PostgreSQL bind; the captured statement is
compiled with the asyncpg dialect.
"""

import uuid
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.dialects.postgresql import asyncpg

from dhivyuga.core.database.repositories import MantraRepository
from dhivyuga.core.database.repositories.mantras import search_document

MIGRATION = (
    Path(__file__).resolve().parents[5] / "alembic" / "versions" / "20260301_000000_initial_catalog_schema.py"
)


def _postgres_session() -> MagicMock:
    session = MagicMock()
    session.get_bind.return_value.dialect.name = "postgresql"
    result = MagicMock()
    result.scalars.return_value.all.return_value = []
    session.execute = AsyncMock(return_value=result)
    return session


async def _compiled_search(**kwargs):
    session = _postgres_session()
    await MantraRepository(session).search(**kwargs)
    statement = session.execute.await_args.args[0]
    return statement.compile(dialect=asyncpg.dialect())


class TestPostgresSearchStatement:
    async def test_uses_full_text_operator(self):
        compiled = await _compiled_search(query="peace of mind")
        sql = str(compiled)

        assert (
            "to_tsvector('english', coalesce(mantras.title, '') || ' ' || coalesce(mantras.text, '')) "
            "@@ websearch_to_tsquery('english', $1::VARCHAR)"
        ) in sql
        assert "ILIKE" not in sql.upper()
        assert "peace of mind" in compiled.params.values()

    async def test_filters_and_ordering(self):
        deity_id = uuid.uuid4()
        compiled = await _compiled_search(query="om", deity_id=deity_id, limit=5)
        sql = str(compiled)

        assert "mantras.deity_id = $" in sql
        assert "ORDER BY mantras.view_count DESC" in sql
        assert deity_id in compiled.params.values()
        assert 5 in compiled.params.values()

    async def test_blank_query_has_no_text_condition(self):
        sql = str(await _compiled_search(query="  "))
        assert "websearch_to_tsquery" not in sql
        assert "ORDER BY mantras.view_count DESC, mantras.created_at DESC" in sql


def test_document_matches_migration_index():
    compiled = search_document().compile(dialect=asyncpg.dialect())
    assert not compiled.params
    assert str(compiled).replace("mantras.", "") in MIGRATION.read_text()
