"""
Schema reader — the four catalog queries behind a TableModel.
SQL Server is queried through INFORMATION_SCHEMA and the sys.* catalog views;
every other dialect goes through SQLAlchemy reflection.
"""
import logging
from typing import Optional

from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection

from tablegen.core.errors import SchemaNotFoundError
from tablegen.models.table import Column, ForeignKeyRef, TableModel

logger = logging.getLogger(__name__)


# ── SQL Server catalog queries ───────────────────────────────────────────────

COLUMNS_SQL = """
SELECT
    c.COLUMN_NAME,
    c.DATA_TYPE,
    CASE c.IS_NULLABLE WHEN 'YES' THEN 1 ELSE 0 END AS IS_NULLABLE,
    c.CHARACTER_MAXIMUM_LENGTH,
    c.ORDINAL_POSITION
FROM INFORMATION_SCHEMA.COLUMNS c
WHERE c.TABLE_SCHEMA = :schema AND c.TABLE_NAME = :table
ORDER BY c.ORDINAL_POSITION
"""

PRIMARY_KEYS_SQL = """
SELECT kcu.COLUMN_NAME
FROM INFORMATION_SCHEMA.TABLE_CONSTRAINTS tc
JOIN INFORMATION_SCHEMA.KEY_COLUMN_USAGE kcu
  ON tc.CONSTRAINT_NAME = kcu.CONSTRAINT_NAME
 AND tc.CONSTRAINT_SCHEMA = kcu.CONSTRAINT_SCHEMA
 AND tc.TABLE_NAME = kcu.TABLE_NAME
WHERE tc.TABLE_SCHEMA = :schema AND tc.TABLE_NAME = :table
  AND tc.CONSTRAINT_TYPE = 'PRIMARY KEY'
"""

IDENTITY_SQL = """
SELECT c.name
FROM sys.columns c
JOIN sys.tables t  ON c.object_id = t.object_id
JOIN sys.schemas s ON t.schema_id = s.schema_id
WHERE s.name = :schema AND t.name = :table AND c.is_identity = 1
"""

FOREIGN_KEYS_SQL = """
SELECT
    pc.name AS parent_column,
    s2.name AS ref_schema,
    t2.name AS ref_table,
    rc.name AS ref_column
FROM sys.foreign_keys fk
JOIN sys.foreign_key_columns fkc ON fkc.constraint_object_id = fk.object_id
JOIN sys.tables t1  ON t1.object_id = fk.parent_object_id
JOIN sys.schemas s1 ON s1.schema_id = t1.schema_id
JOIN sys.columns pc ON pc.object_id = t1.object_id AND pc.column_id = fkc.parent_column_id
JOIN sys.tables t2  ON t2.object_id = fk.referenced_object_id
JOIN sys.schemas s2 ON s2.schema_id = t2.schema_id
JOIN sys.columns rc ON rc.object_id = t2.object_id AND rc.column_id = fkc.referenced_column_id
WHERE s1.name = :schema AND t1.name = :table
"""


def _is_mssql(conn: Connection) -> bool:
    return conn.dialect.name == "mssql"


def _run(conn: Connection, sql: str, schema: str, table: str):
    return conn.execute(text(sql), {"schema": schema, "table": table})


# ── Reflection helpers (non SQL Server dialects) ─────────────────────────────

def _type_name(col_type) -> str:
    # "VARCHAR(500)" -> "varchar", "TIMESTAMP WITHOUT TIME ZONE" stays whole
    return str(col_type).split("(")[0].strip().lower()


def _max_length(col_type) -> Optional[int]:
    length = getattr(col_type, "length", None)
    return int(length) if isinstance(length, int) else None


# ── The four queries ─────────────────────────────────────────────────────────

def load_columns(conn: Connection, schema: str, table: str) -> list[Column]:
    """Columns ordered by ordinal position; empty when the table does not exist."""
    if _is_mssql(conn):
        return [
            Column(
                name=row[0],
                data_type=row[1],
                is_nullable=int(row[2]) == 1,
                max_length=int(row[3]) if row[3] is not None else None,
                ordinal_position=int(row[4]),
            )
            for row in _run(conn, COLUMNS_SQL, schema, table)
        ]

    insp = inspect(conn)
    if not insp.has_table(table, schema=schema):
        return []
    return [
        Column(
            name=col["name"],
            data_type=_type_name(col["type"]),
            is_nullable=col.get("nullable", True),
            max_length=_max_length(col["type"]),
            ordinal_position=position,
        )
        for position, col in enumerate(insp.get_columns(table, schema=schema), start=1)
    ]


def load_primary_keys(conn: Connection, schema: str, table: str) -> set[str]:
    if _is_mssql(conn):
        return {row[0] for row in _run(conn, PRIMARY_KEYS_SQL, schema, table)}
    pk = inspect(conn).get_pk_constraint(table, schema=schema) or {}
    return set(pk.get("constrained_columns") or [])


def load_identity_columns(conn: Connection, schema: str, table: str) -> set[str]:
    if _is_mssql(conn):
        return {row[0] for row in _run(conn, IDENTITY_SQL, schema, table)}

    insp = inspect(conn)
    columns = insp.get_columns(table, schema=schema)
    identity = {c["name"] for c in columns if c.get("identity") or c.get("autoincrement") is True}

    if conn.dialect.name == "sqlite":
        # A lone INTEGER PRIMARY KEY is an alias for the rowid
        pk_cols = (insp.get_pk_constraint(table, schema=schema) or {}).get("constrained_columns") or []
        if len(pk_cols) == 1:
            pk_col = next((c for c in columns if c["name"] == pk_cols[0]), None)
            if pk_col is not None and _type_name(pk_col["type"]) == "integer":
                identity.add(pk_col["name"])
    return identity


def load_foreign_keys(conn: Connection, schema: str, table: str) -> dict[str, ForeignKeyRef]:
    """
    Column -> referenced column. A column in several FK constraints keeps
    only the last reference read.
    """
    fk_map: dict[str, ForeignKeyRef] = {}
    if _is_mssql(conn):
        for row in _run(conn, FOREIGN_KEYS_SQL, schema, table):
            fk_map[row[0]] = ForeignKeyRef(
                referenced_schema=row[1], referenced_table=row[2], referenced_column=row[3],
            )
        return fk_map

    for fk in inspect(conn).get_foreign_keys(table, schema=schema):
        ref_schema = fk.get("referred_schema") or schema
        for local_col, ref_col in zip(fk["constrained_columns"], fk["referred_columns"]):
            fk_map[local_col] = ForeignKeyRef(
                referenced_schema=ref_schema,
                referenced_table=fk["referred_table"],
                referenced_column=ref_col,
            )
    return fk_map


def read_table_model(conn: Connection, schema: str, table: str) -> TableModel:
    """
    Run the four catalog queries for [schema].[table].
    Raises SchemaNotFoundError before the key queries when no columns come back.
    """
    columns = load_columns(conn, schema, table)
    if not columns:
        raise SchemaNotFoundError(schema, table)
    logger.info("Read %d columns from [%s].[%s]", len(columns), schema, table)

    pk_cols = load_primary_keys(conn, schema, table)
    identity_cols = load_identity_columns(conn, schema, table)
    fk_map = load_foreign_keys(conn, schema, table)
    logger.debug(
        "Keys for [%s].[%s]: pk=%s identity=%s fk=%s",
        schema, table, sorted(pk_cols), sorted(identity_cols), sorted(fk_map),
    )

    return TableModel.build(
        schema_name=schema,
        table_name=table,
        columns=columns,
        primary_keys=pk_cols,
        identity_columns=identity_cols,
        foreign_keys=fk_map,
    )
