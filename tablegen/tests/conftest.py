import os
import sqlite3
import tempfile

import pytest

from tablegen.config import Settings
from tablegen.models.table import Column, ForeignKeyRef, TableModel

DEMO_DDL = [
    """CREATE TABLE Customers (
        Id INTEGER NOT NULL PRIMARY KEY,
        Name NVARCHAR(200) NOT NULL
    );""",
    """CREATE TABLE Orders (
        Id INTEGER NOT NULL PRIMARY KEY,
        CustomerId INTEGER NOT NULL REFERENCES Customers(Id),
        Notes NVARCHAR(500)
    );""",
    """CREATE TABLE order_items (
        order_id INTEGER NOT NULL REFERENCES Orders(Id),
        line_no INTEGER NOT NULL,
        unit_price DECIMAL(10, 2) NOT NULL,
        discount REAL,
        PRIMARY KEY (order_id, line_no)
    );""",
]


@pytest.fixture
def temp_sqlite_db():
    fd, path = tempfile.mkstemp(suffix=".db")
    try:
        conn = sqlite3.connect(path)
        cur = conn.cursor()
        for stmt in DEMO_DDL:
            cur.execute(stmt)
        conn.commit()
        conn.close()
        yield path
    finally:
        os.close(fd)
        os.remove(path)


@pytest.fixture
def sqlite_url(temp_sqlite_db):
    return f"sqlite:///{temp_sqlite_db}"


@pytest.fixture
def test_settings(sqlite_url, tmp_path):
    return Settings(
        DB_CONNECTION_STRING=sqlite_url,
        OUTPUT_DIR=str(tmp_path / "out"),
        DEFAULT_SCHEMA=None,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def orders_model():
    """[dbo].[Orders]: identity PK, FK to Customers, bounded nullable text."""
    return TableModel.build(
        schema_name="dbo",
        table_name="Orders",
        columns=[
            Column(name="Notes", data_type="nvarchar", is_nullable=True, max_length=500, ordinal_position=3),
            Column(name="Id", data_type="int", is_nullable=False, ordinal_position=1),
            Column(name="CustomerId", data_type="int", is_nullable=False, ordinal_position=2),
        ],
        primary_keys={"Id"},
        identity_columns={"ID"},
        foreign_keys={
            "customerid": ForeignKeyRef(
                referenced_schema="dbo", referenced_table="Customers", referenced_column="Id"
            ),
        },
    )
