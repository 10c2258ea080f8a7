#!/usr/bin/env python3
"""
Create a local SQLite database with demo tables for trying out tablegen.
Usage (from the repository root):
    python scripts/seed_demo_db.py
    tablegen --connection sqlite:///scripts/demo.db --table Orders
Creates: scripts/demo.db
"""
import sqlite3
from pathlib import Path

DB_PATH = Path(__file__).parent / "demo.db"

DDL = [
    """
    CREATE TABLE IF NOT EXISTS Customers (
        Id          INTEGER NOT NULL PRIMARY KEY,
        Name        NVARCHAR(200) NOT NULL,
        Email       VARCHAR(320)  NOT NULL,
        IsActive    BOOLEAN       NOT NULL DEFAULT 1,
        CreatedAt   DATETIME
    )""",
    """
    CREATE TABLE IF NOT EXISTS Orders (
        Id          INTEGER NOT NULL PRIMARY KEY,
        CustomerId  INTEGER NOT NULL REFERENCES Customers(Id),
        Notes       NVARCHAR(500)
    )""",
    """
    CREATE TABLE IF NOT EXISTS order_items (
        order_id    INTEGER NOT NULL REFERENCES Orders(Id),
        line_no     INTEGER NOT NULL,
        product_sku CHAR(12) NOT NULL,
        quantity    SMALLINT NOT NULL,
        unit_price  DECIMAL(10, 2) NOT NULL,
        discount    REAL,
        PRIMARY KEY (order_id, line_no)
    )""",
    """
    CREATE TABLE IF NOT EXISTS "product photos" (
        "photo id"  INTEGER PRIMARY KEY AUTOINCREMENT,
        "2x image"  BLOB,
        "class"     TEXT,
        caption     VARCHAR(140)
    )""",
]


def seed():
    conn = sqlite3.connect(DB_PATH)
    cur = conn.cursor()
    cur.execute("PRAGMA foreign_keys = ON")

    for stmt in DDL:
        cur.execute(stmt)

    conn.commit()
    conn.close()
    print(f"Demo database created: {DB_PATH}")
    print("   Tables: Customers, Orders, order_items, product photos")


if __name__ == "__main__":
    seed()
