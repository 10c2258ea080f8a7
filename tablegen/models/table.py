"""Pydantic schemas for table and column metadata."""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Column(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    data_type: str
    is_nullable: bool = True
    max_length: Optional[int] = None     # CHARACTER_MAXIMUM_LENGTH, -1 for (max)
    ordinal_position: int


class ForeignKeyRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    referenced_schema: str
    referenced_table: str
    referenced_column: str

    def __str__(self) -> str:
        return f"[{self.referenced_schema}].[{self.referenced_table}].[{self.referenced_column}]"


class TableModel(BaseModel):
    """
    Everything read from the catalog for one table.
    Key sets and the FK map are keyed by casefolded column name.
    """
    model_config = ConfigDict(frozen=True)

    schema_name: str
    table_name: str
    columns: tuple[Column, ...]
    primary_keys: frozenset[str] = frozenset()
    identity_columns: frozenset[str] = frozenset()
    foreign_keys: dict[str, ForeignKeyRef] = Field(default_factory=dict)

    @classmethod
    def build(
        cls,
        schema_name: str,
        table_name: str,
        columns: list[Column],
        primary_keys: set[str],
        identity_columns: set[str],
        foreign_keys: dict[str, ForeignKeyRef],
    ) -> "TableModel":
        return cls(
            schema_name=schema_name,
            table_name=table_name,
            columns=tuple(sorted(columns, key=lambda c: c.ordinal_position)),
            primary_keys=frozenset(name.casefold() for name in primary_keys),
            identity_columns=frozenset(name.casefold() for name in identity_columns),
            foreign_keys={name.casefold(): ref for name, ref in foreign_keys.items()},
        )

    def is_primary_key(self, column_name: str) -> bool:
        return column_name.casefold() in self.primary_keys

    def is_identity(self, column_name: str) -> bool:
        return column_name.casefold() in self.identity_columns

    def foreign_key_for(self, column_name: str) -> Optional[ForeignKeyRef]:
        return self.foreign_keys.get(column_name.casefold())
