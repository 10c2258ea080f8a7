from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine

from tablegen.core.db_connector import resolve_schema
from tablegen.core.errors import SchemaNotFoundError
from tablegen.core.schema_reader import (
    load_columns,
    load_foreign_keys,
    load_identity_columns,
    load_primary_keys,
    read_table_model,
)
from tablegen.models.table import ForeignKeyRef


@pytest.fixture
def sqlite_conn(sqlite_url):
    engine = create_engine(sqlite_url)
    with engine.connect() as conn:
        yield conn
    engine.dispose()


# ── Reflection path (SQLite) ─────────────────────────────────────────────────

def test_load_columns_sqlite(sqlite_conn):
    cols = load_columns(sqlite_conn, "main", "Orders")
    assert [(c.name, c.ordinal_position) for c in cols] == [("Id", 1), ("CustomerId", 2), ("Notes", 3)]
    assert cols[0].data_type == "integer"
    assert cols[0].is_nullable is False
    assert cols[2].data_type == "nvarchar"
    assert cols[2].is_nullable is True
    assert cols[2].max_length == 500


def test_load_columns_missing_table_is_empty(sqlite_conn):
    assert load_columns(sqlite_conn, "main", "NoSuchTable") == []


def test_load_keys_sqlite(sqlite_conn):
    assert load_primary_keys(sqlite_conn, "main", "Orders") == {"Id"}
    assert load_primary_keys(sqlite_conn, "main", "order_items") == {"order_id", "line_no"}


def test_load_identity_columns_sqlite(sqlite_conn):
    assert load_identity_columns(sqlite_conn, "main", "Orders") == {"Id"}
    # composite key: no rowid alias
    assert load_identity_columns(sqlite_conn, "main", "order_items") == set()


def test_load_foreign_keys_sqlite(sqlite_conn):
    fks = load_foreign_keys(sqlite_conn, "main", "Orders")
    assert fks == {
        "CustomerId": ForeignKeyRef(referenced_schema="main", referenced_table="Customers", referenced_column="Id"),
    }
    assert load_foreign_keys(sqlite_conn, "main", "Customers") == {}


def test_read_table_model_sqlite(sqlite_conn):
    model = read_table_model(sqlite_conn, "main", "Orders")
    assert model.schema_name == "main"
    assert model.table_name == "Orders"
    assert len(model.columns) == 3
    assert model.is_primary_key("Id") and model.is_identity("Id")
    assert model.foreign_key_for("CustomerId").referenced_table == "Customers"


def test_read_table_model_missing_table(sqlite_conn):
    with pytest.raises(SchemaNotFoundError) as exc:
        read_table_model(sqlite_conn, "main", "NoSuchTable")
    assert exc.value.table == "NoSuchTable"


def test_resolve_schema(sqlite_conn):
    assert resolve_schema(None, " sales ", "dbo") == "sales"
    assert resolve_schema(None, "", "dbo") == "dbo"
    assert resolve_schema(sqlite_conn, None, None) == "main"


# ── SQL Server catalog path ──────────────────────────────────────────────────

class StubMssqlConnection:
    """Answers each catalog query from canned rows, keyed by a marker in the SQL."""

    dialect = SimpleNamespace(name="mssql")

    def __init__(self, rows_by_marker):
        self.rows_by_marker = rows_by_marker
        self.calls = []

    def execute(self, statement, params):
        sql = str(statement)
        self.calls.append((sql, params))
        for marker, rows in self.rows_by_marker.items():
            if marker in sql:
                return list(rows)
        return []


ORDERS_CATALOG = {
    "INFORMATION_SCHEMA.COLUMNS": [
        ("Id", "int", 0, None, 1),
        ("CustomerId", "int", 0, None, 2),
        ("Notes", "nvarchar", 1, 500, 3),
    ],
    "PRIMARY KEY": [("Id",)],
    "is_identity": [("Id",)],
    "sys.foreign_keys": [("CustomerId", "dbo", "Customers", "Id")],
}


def test_read_table_model_mssql():
    conn = StubMssqlConnection(ORDERS_CATALOG)
    model = read_table_model(conn, "dbo", "Orders")

    assert [c.name for c in model.columns] == ["Id", "CustomerId", "Notes"]
    assert model.columns[2].max_length == 500
    assert model.columns[2].is_nullable is True
    assert model.columns[0].is_nullable is False
    assert model.is_primary_key("ID")
    assert model.is_identity("id")
    assert str(model.foreign_key_for("customerid")) == "[dbo].[Customers].[Id]"

    assert len(conn.calls) == 4
    assert all(params == {"schema": "dbo", "table": "Orders"} for _, params in conn.calls)


def test_mssql_missing_table_skips_key_queries():
    conn = StubMssqlConnection({})
    with pytest.raises(SchemaNotFoundError):
        read_table_model(conn, "dbo", "Ghost")
    assert len(conn.calls) == 1


def test_mssql_foreign_key_last_reference_wins():
    conn = StubMssqlConnection({
        "sys.foreign_keys": [
            ("CustomerId", "dbo", "Customers", "Id"),
            ("CustomerId", "crm", "Accounts", "AccountId"),
        ],
    })
    fks = load_foreign_keys(conn, "dbo", "Orders")
    assert fks == {
        "CustomerId": ForeignKeyRef(referenced_schema="crm", referenced_table="Accounts", referenced_column="AccountId"),
    }
