"""Dialect-aware statement builders.

SQLAlchemy only exposes ``ON CONFLICT DO NOTHING`` through the dialect
specific ``insert()`` constructs, so pick the right one for the bound engine.
"""

from typing import Any

from sqlalchemy import Table
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.sql.dml import Insert


def insert_or_ignore(dialect_name: str, table: Table, values: dict[str, Any]) -> Insert:
    """Build ``INSERT ... ON CONFLICT (pk) DO NOTHING`` for *table*."""
    if dialect_name == "sqlite":
        stmt = sqlite.insert(table)
    elif dialect_name == "postgresql":
        stmt = postgresql.insert(table)
    else:
        raise NotImplementedError(f"Conditional insert is not supported on '{dialect_name}'")

    pk_columns = [column.name for column in table.primary_key.columns]
    return stmt.values(**values).on_conflict_do_nothing(index_elements=pk_columns)
