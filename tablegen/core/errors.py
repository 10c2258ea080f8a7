"""
Error taxonomy and process exit codes.
Exit codes are stable and meant for scripting.
"""
from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    USER_INPUT = 1
    SCHEMA_NOT_FOUND = 2
    FAILURE = 99


class TablegenError(Exception):
    exit_code: ExitCode = ExitCode.FAILURE


class UserInputError(TablegenError):
    """Required input (the table name) is missing or blank."""
    exit_code = ExitCode.USER_INPUT


class SchemaNotFoundError(TablegenError):
    """The column listing came back empty for the requested table."""
    exit_code = ExitCode.SCHEMA_NOT_FOUND

    def __init__(self, schema: str, table: str):
        super().__init__(f"No columns found for [{schema}].[{table}].")
        self.schema = schema
        self.table = table


class DataAccessError(TablegenError):
    exit_code = ExitCode.FAILURE


class FileSystemError(TablegenError):
    exit_code = ExitCode.FAILURE
