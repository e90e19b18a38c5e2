"""Type reference resolution component.

Turns the type named by an XmlSchemaType declaration into a fully-qualified
type identifier. Resolution happens in two steps:

1. read_type_reference() classifies the raw reference without raising:
   a live class is Resolved, a source-level reference is Unresolved (carrying
   a TypeDescription), and the DEFAULT marker or any other value is Invalid.
2. resolve_type_identifier() turns that classification into an identifier,
   raising InvalidTypeReference for anything that is not a declared type.

Identifiers are dotted "module.QualName" strings. Builtin classes are reported
by their bare name ("list", not "builtins.list"). Primitives (int, str, ...)
and object are never declared types, whether given as a live class or as
source text.
"""

from __future__ import annotations

import ast
import builtins
import logging
import typing
from collections.abc import Mapping

from pkgschema.helpers.dto.declarations_dto import DEFAULT, XmlSchemaType
from pkgschema.helpers.dto.schema_dto import SourcePosition
from pkgschema.helpers.dto.type_reference_dto import (
    Invalid,
    Resolved,
    TypeDescription,
    TypeKind,
    TypeReference,
    Unresolved,
)
from pkgschema.helpers.exceptions import InvalidTypeReference

logger = logging.getLogger(__name__)

MISSING_TYPE_MESSAGE = "A type must be specified in XmlSchemaType at the package-level."

PRIMITIVE_NAMES = frozenset({"int", "str", "float", "bool", "bytes", "complex"})

# Last dotted component of a subscripted container that makes the reference an array
ARRAY_CONTAINERS = frozenset(
    {"list", "tuple", "set", "frozenset", "List", "Tuple", "Set", "FrozenSet", "Sequence", "MutableSequence"}
)

WILDCARD_NAMES = frozenset({"Any", "object", "typing.Any", "builtins.object"})

# Builtin classes other than the primitives and object count as declared types
BUILTIN_CLASS_NAMES = frozenset(name for name, value in vars(builtins).items() if isinstance(value, type))


def type_identifier(cls: type) -> str:
    """Fully-qualified identifier of a live class."""
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _dotted_name(node: ast.expr) -> str | None:
    """Return "a.b.C" for a Name/Attribute chain, None for anything else."""
    parts: list[str] = []
    while isinstance(node, ast.Attribute):
        parts.append(node.attr)
        node = node.value
    if not isinstance(node, ast.Name):
        return None
    parts.append(node.id)
    return ".".join(reversed(parts))


def describe_type_node(
    node: ast.expr,
    imports: Mapping[str, str] | None = None,
    local_names: Mapping[str, str] | None = None,
) -> TypeDescription:
    """
    Describe a parsed type expression.

    Args:
        node: Expression node of the reference
        imports: Local alias -> qualified name, from the module's import statements
        local_names: Class name -> qualified name, for classes defined in the module

    Returns:
        TypeDescription; DECLARED only when a qualified name could be attributed.
    """
    text = ast.unparse(node)

    if isinstance(node, ast.Constant):
        if node.value is Ellipsis:
            return TypeDescription(TypeKind.WILDCARD, text)
        if isinstance(node.value, str):
            # Quoted forward reference
            return describe_type_expression(node.value, imports, local_names)
        return TypeDescription(TypeKind.PLACEHOLDER, text)

    if isinstance(node, ast.Subscript):
        base = _dotted_name(node.value)
        if base is not None and base.rsplit(".", 1)[-1] in ARRAY_CONTAINERS:
            return TypeDescription(TypeKind.ARRAY, text)
        return TypeDescription(TypeKind.PLACEHOLDER, text)

    dotted = _dotted_name(node)
    if dotted is None:
        return TypeDescription(TypeKind.PLACEHOLDER, text)

    head, _, rest = dotted.partition(".")
    if imports and head in imports:
        qualified = f"{imports[head]}.{rest}" if rest else imports[head]
    elif not rest and local_names and head in local_names:
        qualified = local_names[head]
    else:
        qualified = dotted
    return _describe_qualified_name(qualified, text)


def _describe_qualified_name(qualified: str, text: str) -> TypeDescription:
    if qualified in WILDCARD_NAMES:
        return TypeDescription(TypeKind.WILDCARD, text)

    module, _, name = qualified.rpartition(".")
    if module in ("", "builtins"):
        if name in PRIMITIVE_NAMES:
            return TypeDescription(TypeKind.PRIMITIVE, text)
        if name in BUILTIN_CLASS_NAMES:
            return TypeDescription(TypeKind.DECLARED, text, name)
        # Bare name that is not imported, not defined locally and not a builtin
        return TypeDescription(TypeKind.PLACEHOLDER, text)
    return TypeDescription(TypeKind.DECLARED, text, qualified)


def describe_type_expression(
    text: str,
    imports: Mapping[str, str] | None = None,
    local_names: Mapping[str, str] | None = None,
) -> TypeDescription:
    """
    Describe a type reference given as source text (a forward reference).

    Examples:
        >>> describe_type_expression("acme.money.Money").qualified_name
        'acme.money.Money'
        >>> describe_type_expression("list[int]").kind
        <TypeKind.ARRAY: 'array'>
    """
    stripped = text.strip()
    if stripped in ("?", "..."):
        return TypeDescription(TypeKind.WILDCARD, stripped)
    if stripped.endswith("[]"):
        return TypeDescription(TypeKind.ARRAY, stripped)

    try:
        node = ast.parse(stripped, mode="eval").body
    except SyntaxError:
        return TypeDescription(TypeKind.PLACEHOLDER, stripped)
    return describe_type_node(node, imports, local_names)


def read_type_reference(declaration: XmlSchemaType) -> TypeReference:
    """
    Classify the type named by a declaration without raising.

    Args:
        declaration: The XmlSchemaType declaration

    Returns:
        Resolved for a live class, Unresolved for a TypeDescription, a string,
        a parameterized generic or a builtin primitive, Invalid for DEFAULT or
        any other value.
    """
    ref = declaration.type

    if ref is DEFAULT:
        return Invalid(MISSING_TYPE_MESSAGE)
    if isinstance(ref, TypeDescription):
        return Unresolved(ref)
    if isinstance(ref, str):
        return Unresolved(describe_type_expression(ref))
    if ref is typing.Any:
        return Unresolved(TypeDescription(TypeKind.WILDCARD, "typing.Any"))
    if typing.get_origin(ref) is not None:
        # list[int], typing.Sequence[str], ...
        return Unresolved(describe_type_expression(repr(ref)))
    if isinstance(ref, type):
        identifier = type_identifier(ref)
        if ref.__module__ == "builtins":
            description = describe_type_expression(identifier)
            if description.kind is not TypeKind.DECLARED:
                return Unresolved(description)
        return Resolved(identifier)
    return Invalid(f"Unrecognized type : {ref!r}")


def resolve_type_identifier(declaration: XmlSchemaType, position: SourcePosition | None = None) -> str:
    """
    Resolve the fully-qualified identifier of the type named by a declaration.

    Args:
        declaration: The XmlSchemaType declaration
        position: Where the declaration lives, for the error message

    Returns:
        Fully-qualified type identifier

    Raises:
        InvalidTypeReference: The declaration names DEFAULT, or its reference
            does not describe a declared (class-like) type.
    """
    reference = read_type_reference(declaration)

    if isinstance(reference, Resolved):
        return reference.identifier

    if isinstance(reference, Unresolved):
        description = reference.description
        if description.kind is TypeKind.DECLARED and description.qualified_name:
            logger.debug("Resolved %r from its description to %s", description.text, description.qualified_name)
            return description.qualified_name
        raise InvalidTypeReference(f"Unrecognized type : {description}", position)

    raise InvalidTypeReference(reference.reason, position)
