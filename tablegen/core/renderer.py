"""
Code renderer — folds a TableModel into the text of a C# entity class.
Pure: the same model always renders to byte-identical output.
Annotations are emitted as comments for the developer to enable by hand.
"""
from tablegen.core.naming import escape_keyword, sanitize_identifier, to_camel_case, to_pascal_case
from tablegen.core.type_mapper import is_text_type, map_type
from tablegen.models.table import Column, TableModel

CLASS_PREFIX = "Cls"
FIELD_PREFIX = "var"
FILE_EXTENSION = ".cs"
INDENT = "    "


def entity_class_name(class_name: str) -> str:
    return sanitize_identifier(CLASS_PREFIX + class_name)


def entity_file_name(class_name: str) -> str:
    return f"{CLASS_PREFIX}{class_name}{FILE_EXTENSION}"


def field_name(column: Column) -> str:
    return sanitize_identifier(FIELD_PREFIX + column.name)


def parameter_name(column: Column) -> str:
    return escape_keyword(to_camel_case(column.name))


def _annotations(model: TableModel, column: Column) -> list[str]:
    lines = [f'//[Column("{column.name}")]']
    if column.max_length and column.max_length > 0 and is_text_type(column.data_type):
        lines.append(f"//[MaxLength({column.max_length})]")
    if model.is_primary_key(column.name):
        lines.append("//[Key]")
    if model.is_identity(column.name):
        lines.append("//[DatabaseGenerated(DatabaseGeneratedOption.Identity)]")
    fk = model.foreign_key_for(column.name)
    if fk is not None:
        lines.append(f"// FK -> {fk}")
    return lines


def render_entity(model: TableModel, class_name: str) -> str:
    cls = entity_class_name(class_name)
    out: list[str] = [
        "// Auto-generated file. Changes will be lost on regeneration.",
        f"// Source: [{model.schema_name}].[{model.table_name}]",
        "using System;",
        "using System.ComponentModel.DataAnnotations;",
        "using System.ComponentModel.DataAnnotations.Schema;",
        "",
        f'//[Table("{model.table_name}", Schema = "{model.schema_name}")]',
        f"public class {cls}",
        "{",
    ]

    # Backing fields
    for col in model.columns:
        out.append(f"{INDENT}private {map_type(col.data_type, col.is_nullable)} {field_name(col)};")
    out.append("")

    # Default constructor
    out.append(f"{INDENT}public {cls}() {{ }}")
    out.append("")

    # Full constructor, identity columns are left to the database
    ctor_cols = [c for c in model.columns if not model.is_identity(c.name)]
    if ctor_cols:
        params = ", ".join(f"{map_type(c.data_type, c.is_nullable)} {parameter_name(c)}" for c in ctor_cols)
        out.append(f"{INDENT}public {cls}({params})")
        out.append(f"{INDENT}{{")
        for col in ctor_cols:
            out.append(f"{INDENT * 2}this.{field_name(col)} = {parameter_name(col)};")
        out.append(f"{INDENT}}}")
        out.append("")

    # Properties
    for col in model.columns:
        out.extend(INDENT + line for line in _annotations(model, col))
        field = field_name(col)
        out.append(f"{INDENT}public {map_type(col.data_type, col.is_nullable)} {to_pascal_case(col.name)}")
        out.append(f"{INDENT}{{")
        out.append(f"{INDENT * 2}get => {field};")
        out.append(f"{INDENT * 2}set => {field} = value;")
        out.append(f"{INDENT}}}")
        out.append("")

    out.append("}")
    return "\n".join(out) + "\n"
