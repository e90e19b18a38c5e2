"""Imported-module package source component.

Reads declarations straight from the attributes of an imported module.
String type references in XmlSchemaType declarations are described against
the module's own globals, so ``type="Money"`` resolves when the module
defines or imports ``Money``.
"""

from __future__ import annotations

import dataclasses
import importlib
import inspect
import logging
from types import ModuleType
from typing import TypeVar

from pkgschema.components.schema.type_reference_comp import describe_type_expression, type_identifier
from pkgschema.helpers.dto.declarations_dto import DECLARATION_ATTRIBUTES, XmlSchemaType, XmlSchemaTypes
from pkgschema.helpers.dto.schema_dto import SourcePosition
from pkgschema.helpers.exceptions import PackageNotFoundError

logger = logging.getLogger(__name__)

D = TypeVar("D")


class ModulePackageSource:
    """PackageSource over a live module object."""

    def __init__(self, module: ModuleType) -> None:
        self._module = module

    @classmethod
    def from_name(cls, name: str) -> ModulePackageSource:
        """
        Import a package by dotted name.

        Raises:
            PackageNotFoundError: The package cannot be imported, or running
                its module body raised
        """
        try:
            module = importlib.import_module(name)
        except Exception as e:
            raise PackageNotFoundError(f"Cannot import package {name!r}: {e}") from e
        return cls(module)

    @property
    def qualified_name(self) -> str:
        return self._module.__name__

    @property
    def position(self) -> SourcePosition | None:
        path = getattr(self._module, "__file__", None)
        return SourcePosition(path) if path else None

    def get_declaration(self, kind: type[D]) -> D | None:
        attribute = DECLARATION_ATTRIBUTES.get(kind)
        if attribute is None:
            raise ValueError(f"{kind.__name__} is not a package-level declaration")

        value = getattr(self._module, attribute, None)
        if value is None:
            return None
        if not isinstance(value, kind):
            logger.warning(
                "Ignoring %s.%s: expected %s, got %s",
                self.qualified_name,
                attribute,
                kind.__name__,
                type(value).__name__,
            )
            return None

        if isinstance(value, XmlSchemaType):
            return self._describe_forward_reference(value)  # type: ignore[return-value]
        if isinstance(value, XmlSchemaTypes):
            return XmlSchemaTypes(tuple(self._describe_forward_reference(v) for v in value.value))  # type: ignore[return-value]
        return value

    def _describe_forward_reference(self, declaration: XmlSchemaType) -> XmlSchemaType:
        if not isinstance(declaration.type, str):
            return declaration
        description = describe_type_expression(declaration.type, imports=self._global_names())
        return dataclasses.replace(declaration, type=description)

    def _global_names(self) -> dict[str, str]:
        """Module globals bound to classes or modules -> their qualified names."""
        names: dict[str, str] = {}
        for name, value in vars(self._module).items():
            if inspect.isclass(value):
                names[name] = type_identifier(value)
            elif inspect.ismodule(value):
                names[name] = value.__name__
        return names
