"""Pydantic schemas for generation requests and results."""
from typing import Optional
from pydantic import BaseModel, Field


class GenerationRequest(BaseModel):
    schema_name: Optional[str] = Field(None, description="Blank means the configured/default schema")
    table_name: str = Field("", description="Table to generate an entity class for")
    dry_run: bool = Field(False, description="Render only, do not write the output file")


class GenerationResult(BaseModel):
    schema_name: str
    table_name: str
    class_name: str
    column_count: int
    code: str
    file_path: Optional[str] = None   # None on dry runs
