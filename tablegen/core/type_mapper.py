"""
SQL type name -> C# type name mapping.
Table-driven: every supported name is listed explicitly, nothing is parsed.
"""
from typing import Optional

DEFAULT_TYPE = "string"

SQL_TO_CSHARP: dict[str, str] = {
    # integers
    "tinyint": "byte",
    "smallint": "short",
    "int": "int",
    "integer": "int",
    "bigint": "long",
    # boolean
    "bit": "bool",
    "boolean": "bool",
    "bool": "bool",
    # exact / approximate numerics
    "decimal": "decimal",
    "numeric": "decimal",
    "money": "decimal",
    "smallmoney": "decimal",
    "float": "double",
    "double": "double",
    "double precision": "double",
    "real": "float",
    # date / time
    "date": "DateTime",
    "datetime": "DateTime",
    "datetime2": "DateTime",
    "smalldatetime": "DateTime",
    "timestamp": "DateTime",
    "timestamp without time zone": "DateTime",
    "time": "TimeSpan",
    "datetimeoffset": "DateTimeOffset",
    "timestamp with time zone": "DateTimeOffset",
    # text
    "char": "string",
    "nchar": "string",
    "varchar": "string",
    "nvarchar": "string",
    "text": "string",
    "ntext": "string",
    "character": "string",
    "character varying": "string",
    "xml": "string",
    # identifiers
    "uniqueidentifier": "Guid",
    "uuid": "Guid",
    # binary
    "binary": "byte[]",
    "varbinary": "byte[]",
    "image": "byte[]",
    "blob": "byte[]",
    "bytea": "byte[]",
}

# Already nullable in C#, never get a `?`
REFERENCE_TYPES = frozenset({"string", "byte[]"})

TEXT_TYPES = frozenset({
    "char", "nchar", "varchar", "nvarchar", "text", "ntext", "character", "character varying",
})


def _normalize(sql_type: Optional[str]) -> str:
    return (sql_type or "").strip().lower()


def map_type(sql_type: Optional[str], is_nullable: bool) -> str:
    core = SQL_TO_CSHARP.get(_normalize(sql_type), DEFAULT_TYPE)
    if core in REFERENCE_TYPES:
        return core
    return f"{core}?" if is_nullable else core


def is_text_type(sql_type: Optional[str]) -> bool:
    return _normalize(sql_type) in TEXT_TYPES
