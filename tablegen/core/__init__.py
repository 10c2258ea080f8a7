from tablegen.core.naming import sanitize_identifier, to_camel_case, to_pascal_case  # noqa: F401
from tablegen.core.type_mapper import map_type, is_text_type  # noqa: F401
from tablegen.core.schema_reader import read_table_model  # noqa: F401
from tablegen.core.renderer import render_entity  # noqa: F401
from tablegen.core.generator import generate_entity  # noqa: F401
