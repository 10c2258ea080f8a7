"""
Entity generator — read the table schema, render the class, write the file.
"""
import logging
from pathlib import Path
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from tablegen.config import Settings
from tablegen.core.db_connector import open_connection, resolve_schema
from tablegen.core.errors import DataAccessError, FileSystemError, UserInputError
from tablegen.core.naming import to_pascal_case
from tablegen.core.renderer import entity_file_name, render_entity
from tablegen.core.schema_reader import read_table_model
from tablegen.models.generation import GenerationRequest, GenerationResult
from tablegen.models.table import TableModel

logger = logging.getLogger(__name__)


def load_table_model(settings: Settings, schema: Optional[str], table: str) -> TableModel:
    """Open one connection, run the catalog queries, release the connection."""
    try:
        with open_connection(settings.DB_CONNECTION_STRING) as conn:
            resolved = resolve_schema(conn, schema, settings.DEFAULT_SCHEMA)
            logger.info("Reading schema for [%s].[%s]", resolved, table)
            return read_table_model(conn, resolved, table)
    except SQLAlchemyError as e:
        raise DataAccessError(f"Database error: {e}") from e


def write_entity(code: str, output_dir: str, class_name: str) -> Path:
    """Write UTF-8 (no BOM) with LF line endings, replacing any earlier file."""
    path = Path(output_dir) / entity_file_name(class_name)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(code)
    except OSError as e:
        raise FileSystemError(f"Could not write {path}: {e}") from e
    return path


def generate_entity(request: GenerationRequest, settings: Settings) -> GenerationResult:
    table = (request.table_name or "").strip()
    if not table:
        raise UserInputError("No table name given. Cancelled.")

    model = load_table_model(settings, request.schema_name, table)
    class_name = to_pascal_case(table)
    code = render_entity(model, class_name)

    file_path = None
    if request.dry_run:
        logger.info("Dry run, %s not written", entity_file_name(class_name))
    else:
        file_path = str(write_entity(code, settings.OUTPUT_DIR, class_name))
        logger.info("Generated %s", file_path)

    return GenerationResult(
        schema_name=model.schema_name,
        table_name=model.table_name,
        class_name=class_name,
        column_count=len(model.columns),
        code=code,
        file_path=file_path,
    )
