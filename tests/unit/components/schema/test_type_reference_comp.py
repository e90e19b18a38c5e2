"""
Unit tests for the type reference component.

Covers the two-step resolution: classification of raw references
(Resolved / Unresolved / Invalid) and identifier resolution with
InvalidTypeReference for everything that is not a declared type.
"""

from __future__ import annotations

import datetime
import typing
from decimal import Decimal

import pytest

from pkgschema.components.schema.type_reference_comp import (
    MISSING_TYPE_MESSAGE,
    describe_type_expression,
    read_type_reference,
    resolve_type_identifier,
    type_identifier,
)
from pkgschema.helpers.dto.declarations_dto import XmlSchemaType
from pkgschema.helpers.dto.schema_dto import SourcePosition
from pkgschema.helpers.dto.type_reference_dto import Invalid, Resolved, TypeDescription, TypeKind, Unresolved
from pkgschema.helpers.exceptions import InvalidTypeReference, PkgSchemaError


class Outer:
    class Inner:
        pass


class TestTypeIdentifier:
    """Tests for identifiers of live classes."""

    @pytest.mark.unit
    def test_module_qualified(self) -> None:
        assert type_identifier(Decimal) == "decimal.Decimal"
        assert type_identifier(datetime.date) == "datetime.date"

    @pytest.mark.unit
    def test_nested_class_uses_qualname(self) -> None:
        assert type_identifier(Outer.Inner) == f"{__name__}.Outer.Inner"

    @pytest.mark.unit
    def test_builtins_are_bare(self) -> None:
        assert type_identifier(int) == "int"
        assert type_identifier(str) == "str"


class TestDescribeTypeExpression:
    """Tests for structural descriptions of source-level references."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("int", TypeKind.PRIMITIVE),
            ("builtins.bool", TypeKind.PRIMITIVE),
            ("list[int]", TypeKind.ARRAY),
            ("typing.Sequence[str]", TypeKind.ARRAY),
            ("Money[]", TypeKind.ARRAY),
            ("Any", TypeKind.WILDCARD),
            ("typing.Any", TypeKind.WILDCARD),
            ("?", TypeKind.WILDCARD),
            ("...", TypeKind.WILDCARD),
            ("Money", TypeKind.PLACEHOLDER),
            ("dict[str, int]", TypeKind.PLACEHOLDER),
            ("not a type", TypeKind.PLACEHOLDER),
            ("acme.money.Money", TypeKind.DECLARED),
            ("object", TypeKind.WILDCARD),
            ("list", TypeKind.DECLARED),
            ("ValueError", TypeKind.DECLARED),
        ],
    )
    def test_kinds(self, text: str, kind: TypeKind) -> None:
        assert describe_type_expression(text).kind is kind

    @pytest.mark.unit
    def test_dotted_path_is_declared_with_qualified_name(self) -> None:
        description = describe_type_expression("acme.money.Money")

        assert description == TypeDescription(TypeKind.DECLARED, "acme.money.Money", "acme.money.Money")

    @pytest.mark.unit
    def test_builtin_class_is_declared_by_bare_name(self) -> None:
        assert describe_type_expression("list").qualified_name == "list"
        assert describe_type_expression("builtins.dict").qualified_name == "dict"

    @pytest.mark.unit
    def test_local_class_shadows_builtin(self) -> None:
        description = describe_type_expression("list", local_names={"list": "acme.shop.list"})

        assert description.qualified_name == "acme.shop.list"

    @pytest.mark.unit
    def test_imported_alias_is_expanded(self) -> None:
        description = describe_type_expression("m.Money", imports={"m": "acme.money"})

        assert description.kind is TypeKind.DECLARED
        assert description.qualified_name == "acme.money.Money"

    @pytest.mark.unit
    def test_imported_any_stays_wildcard(self) -> None:
        description = describe_type_expression("Any", imports={"Any": "typing.Any"})

        assert description.kind is TypeKind.WILDCARD

    @pytest.mark.unit
    def test_local_class_name_is_declared(self) -> None:
        description = describe_type_expression("Invoice", local_names={"Invoice": "acme.shop.Invoice"})

        assert description.qualified_name == "acme.shop.Invoice"

    @pytest.mark.unit
    def test_quoted_reference_is_unwrapped(self) -> None:
        description = describe_type_expression("'acme.money.Money'")

        assert description.qualified_name == "acme.money.Money"


class TestReadTypeReference:
    """Tests for classification without raising."""

    @pytest.mark.unit
    def test_class_is_resolved(self) -> None:
        reference = read_type_reference(XmlSchemaType(name="date", type=datetime.date))

        assert reference == Resolved("datetime.date")

    @pytest.mark.unit
    def test_default_marker_is_invalid(self) -> None:
        reference = read_type_reference(XmlSchemaType(name="date"))

        assert reference == Invalid(MISSING_TYPE_MESSAGE)

    @pytest.mark.unit
    def test_description_is_unresolved(self) -> None:
        description = TypeDescription(TypeKind.DECLARED, "Money", "acme.Money")

        assert read_type_reference(XmlSchemaType(name="decimal", type=description)) == Unresolved(description)

    @pytest.mark.unit
    def test_string_is_described(self) -> None:
        reference = read_type_reference(XmlSchemaType(name="decimal", type="acme.Money"))

        assert isinstance(reference, Unresolved)
        assert reference.description.qualified_name == "acme.Money"

    @pytest.mark.unit
    def test_generic_alias_is_unresolved_array(self) -> None:
        reference = read_type_reference(XmlSchemaType(name="list", type=list[int]))

        assert isinstance(reference, Unresolved)
        assert reference.description.kind is TypeKind.ARRAY

    @pytest.mark.unit
    def test_typing_any_is_unresolved_wildcard(self) -> None:
        reference = read_type_reference(XmlSchemaType(name="anyType", type=typing.Any))

        assert isinstance(reference, Unresolved)
        assert reference.description.kind is TypeKind.WILDCARD

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("cls", "kind"),
        [
            (int, TypeKind.PRIMITIVE),
            (str, TypeKind.PRIMITIVE),
            (bool, TypeKind.PRIMITIVE),
            (object, TypeKind.WILDCARD),
        ],
    )
    def test_builtin_primitive_class_is_unresolved(self, cls: type, kind: TypeKind) -> None:
        reference = read_type_reference(XmlSchemaType(name="x", type=cls))

        assert isinstance(reference, Unresolved)
        assert reference.description.kind is kind

    @pytest.mark.unit
    @pytest.mark.parametrize("cls", [list, dict, ValueError])
    def test_other_builtin_class_is_resolved(self, cls: type) -> None:
        reference = read_type_reference(XmlSchemaType(name="x", type=cls))

        assert reference == Resolved(cls.__name__)

    @pytest.mark.unit
    def test_instance_is_invalid(self) -> None:
        reference = read_type_reference(XmlSchemaType(name="x", type=42))

        assert isinstance(reference, Invalid)
        assert "42" in reference.reason


class TestResolveTypeIdentifier:
    """Tests for identifier resolution and its failures."""

    @pytest.mark.unit
    def test_resolved_class(self) -> None:
        assert resolve_type_identifier(XmlSchemaType(name="decimal", type=Decimal)) == "decimal.Decimal"

    @pytest.mark.unit
    def test_declared_description(self) -> None:
        declaration = XmlSchemaType(name="decimal", type=TypeDescription(TypeKind.DECLARED, "Money", "acme.Money"))

        assert resolve_type_identifier(declaration) == "acme.Money"

    @pytest.mark.unit
    def test_default_marker_raises(self) -> None:
        with pytest.raises(InvalidTypeReference, match="A type must be specified"):
            resolve_type_identifier(XmlSchemaType(name="date"))

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["int", "list[int]", "Any", "Money"])
    def test_non_declared_description_raises(self, text: str) -> None:
        with pytest.raises(InvalidTypeReference, match="Unrecognized type"):
            resolve_type_identifier(XmlSchemaType(name="x", type=text))

    @pytest.mark.unit
    def test_live_primitive_raises_like_its_source_text(self) -> None:
        with pytest.raises(InvalidTypeReference, match=r"^Unrecognized type : int$"):
            resolve_type_identifier(XmlSchemaType(name="x", type=int))

    @pytest.mark.unit
    def test_error_carries_position(self) -> None:
        position = SourcePosition("acme/__init__.py", 7)

        with pytest.raises(InvalidTypeReference) as excinfo:
            resolve_type_identifier(XmlSchemaType(name="x", type="list[int]"), position)

        assert excinfo.value.position == position
        assert str(excinfo.value).startswith("acme/__init__.py:7: ")

    @pytest.mark.unit
    def test_error_is_pkgschema_error(self) -> None:
        with pytest.raises(PkgSchemaError):
            resolve_type_identifier(XmlSchemaType(name="date"))
