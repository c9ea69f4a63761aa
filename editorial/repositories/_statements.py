"""
Dialect-specific INSERT ... ON CONFLICT DO UPDATE statements.

PostgreSQL in production, SQLite in development and tests; both support
``on_conflict_do_update`` through their own ``insert`` constructs.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert


def _insert_for(dialect_name: str):
    if dialect_name == "postgresql":
        return pg_insert
    if dialect_name == "sqlite":
        return sqlite_insert
    raise NotImplementedError(f"No upsert support for dialect '{dialect_name}'")


def create_upsert_stmt(
    dialect_name: str,
    model: Any,
    rows: list[dict[str, Any]],
    index_elements: list[str],
    update_cols: list[str],
) -> Any:
    stmt = _insert_for(dialect_name)(model).values(rows)
    return stmt.on_conflict_do_update(
        index_elements=index_elements,
        set_={col: stmt.excluded[col] for col in update_cols},
    )
