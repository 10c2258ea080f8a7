"""
Identifier sanitizing and casing for generated C# code.
Every function here returns a syntactically valid identifier.
"""
import re

FALLBACK_IDENTIFIER = "Entity"
FALLBACK_CAMEL = "field"

_SEPARATORS = re.compile(r"[_\-\s]+")
# "orderId" -> order|Id, "XMLFile" -> XML|File, "line2Total" -> line2|Total
_HUMPS = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

CSHARP_KEYWORDS = frozenset({
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch", "char", "checked",
    "class", "const", "continue", "decimal", "default", "delegate", "do", "double", "else",
    "enum", "event", "explicit", "extern", "false", "finally", "fixed", "float", "for",
    "foreach", "goto", "if", "implicit", "in", "int", "interface", "internal", "is", "lock",
    "long", "namespace", "new", "null", "object", "operator", "out", "override", "params",
    "private", "protected", "public", "readonly", "ref", "return", "sbyte", "sealed",
    "short", "sizeof", "stackalloc", "static", "string", "struct", "switch", "this",
    "throw", "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort",
    "using", "virtual", "void", "volatile", "while",
})


def sanitize_identifier(raw: str) -> str:
    """Keep letters, digits and underscores; never empty, never digit-led."""
    cleaned = "".join(ch for ch in (raw or "") if ch.isalnum() or ch == "_")
    if not cleaned:
        return FALLBACK_IDENTIFIER
    if not (cleaned[0].isalpha() or cleaned[0] == "_"):
        cleaned = "_" + cleaned
    return cleaned


def _words(raw: str) -> list[str]:
    words = []
    for part in _SEPARATORS.split(raw or ""):
        words.extend(w for w in _HUMPS.split(part) if w)
    return words


def to_pascal_case(raw: str) -> str:
    pascal = "".join(w[:1].upper() + w[1:].lower() for w in _words(raw))
    return sanitize_identifier(pascal)


def to_camel_case(raw: str) -> str:
    pascal = to_pascal_case(raw)
    if not pascal:
        return FALLBACK_CAMEL
    return pascal[:1].lower() + pascal[1:]


def escape_keyword(identifier: str) -> str:
    """Verbatim-prefix C# reserved words (`class` -> `@class`)."""
    return f"@{identifier}" if identifier in CSHARP_KEYWORDS else identifier
