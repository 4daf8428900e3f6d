"""Recognition markers for upstream issue tree shapes."""

from __future__ import annotations

ENGINE_TREE_NAMES: frozenset[str] = frozenset({"ZodError", "$ZodError"})

CURRENT_ONLY_CODES: frozenset[str] = frozenset(
    {"invalid_format", "invalid_value", "invalid_element", "invalid_key"}
)

CURRENT_ONLY_FIELDS: frozenset[str] = frozenset({"origin", "divisor", "values", "format"})

LEGACY_VALUE_CODES: frozenset[str] = frozenset(
    {"invalid_literal", "invalid_enum_value", "invalid_union_discriminator"}
)

# JSON Schema format names that differ from the issue format vocabulary.
JSONSCHEMA_FORMAT_NAMES: dict[str, str] = {
    "uri": "url",
    "uri-reference": "url",
    "iri": "url",
    "date-time": "datetime",
    "idn-email": "email",
    "idn-hostname": "hostname",
}
