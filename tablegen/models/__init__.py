from tablegen.models.table import Column, ForeignKeyRef, TableModel  # noqa: F401
from tablegen.models.generation import GenerationRequest, GenerationResult  # noqa: F401
