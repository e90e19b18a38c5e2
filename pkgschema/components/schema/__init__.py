"""
Schema metadata components.
"""

from .namespace_metadata_comp import (
    NamespaceMetadata,
    compare_namespaces,
    read_namespace_metadata,
    sort_namespaces,
)
from .overrides_comp import build_type_overrides, collect_schema_type_declarations
from .prefixes_comp import build_namespace_prefixes
from .type_reference_comp import (
    describe_type_expression,
    read_type_reference,
    resolve_type_identifier,
    type_identifier,
)

__all__ = [
    "NamespaceMetadata",
    "build_namespace_prefixes",
    "build_type_overrides",
    "collect_schema_type_declarations",
    "compare_namespaces",
    "describe_type_expression",
    "read_namespace_metadata",
    "read_type_reference",
    "resolve_type_identifier",
    "sort_namespaces",
    "type_identifier",
]
