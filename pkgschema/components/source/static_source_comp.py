"""Static (AST) package source component.

Reads declarations from a package's source file without importing it, so a
package whose imports are broken or expensive can still be described.

Only a literal subset of Python is evaluated for declaration values:
declaration constructors, enum members, strings, numbers, booleans, None,
lists and tuples. The ``type`` of an XmlSchemaType is never evaluated; it is
described structurally and resolved through the file's own imports and class
definitions. Anything else raises DeclarationSyntaxError.

A type imported from another module is followed through that module's own
imports until the module defining the class is reached, as long as the
modules involved can be found under the search paths.
"""

from __future__ import annotations

import ast
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, TypeVar

from pkgschema.components.schema.type_reference_comp import describe_type_node
from pkgschema.helpers.dto.declarations_dto import (
    DECLARATION_ATTRIBUTES,
    DEFAULT,
    XmlAccessOrder,
    XmlAccessorOrder,
    XmlAccessorType,
    XmlAccessType,
    XmlNs,
    XmlNsForm,
    XmlSchema,
    XmlSchemaType,
    XmlSchemaTypes,
)
from pkgschema.helpers.dto.schema_dto import SourcePosition
from pkgschema.helpers.dto.type_reference_dto import TypeDescription, TypeKind
from pkgschema.helpers.exceptions import DeclarationSyntaxError, PackageNotFoundError

logger = logging.getLogger(__name__)

D = TypeVar("D")

_CONSTRUCTORS: dict[str, type] = {
    cls.__name__: cls
    for cls in (XmlSchema, XmlNs, XmlSchemaType, XmlSchemaTypes, XmlAccessorType, XmlAccessorOrder)
}

_ENUMS: dict[str, Any] = {cls.__name__: cls for cls in (XmlNsForm, XmlAccessType, XmlAccessOrder)}

_ATTRIBUTE_NAMES = frozenset(DECLARATION_ATTRIBUTES.values())

# Position of the ``type`` argument in XmlSchemaType(name, namespace, type)
_TYPE_ARG_INDEX = 2


def resolve_relative_module(package: str, level: int, module: str | None, *, is_package: bool) -> str:
    """
    Resolve ``from <dots><module> import ...`` to an absolute module name.

    Args:
        package: Qualified name of the file being parsed
        level: Number of leading dots
        module: Module name after the dots (None for ``from . import x``)
        is_package: True when the file is a package ``__init__.py``; level 1
            then means the package itself rather than its parent
    """
    parts = package.split(".")
    effective_level = level - 1 if is_package else level
    if effective_level > 0:
        parts = parts[:-effective_level] if effective_level <= len(parts) else []
    if module:
        parts = [*parts, module]
    return ".".join(parts)


def find_module_source(name: str, search_paths: Sequence[str | Path]) -> Path | None:
    """
    Locate a module's source under the given roots.

    Tries ``<root>/a/b/__init__.py`` then ``<root>/a/b.py`` for each root in order.
    """
    parts = name.split(".")
    for root in search_paths:
        base = Path(root)
        package_init = base.joinpath(*parts, "__init__.py")
        if package_init.is_file():
            return package_init
        module_file = base.joinpath(*parts[:-1], f"{parts[-1]}.py")
        if module_file.is_file():
            return module_file
    return None


def parse_module_source(path: Path) -> ast.Module:
    """
    Parse a source file, honouring its PEP 263 coding declaration.

    Raises:
        DeclarationSyntaxError: The file cannot be read, decoded or parsed
    """
    position = SourcePosition(str(path))
    try:
        source = path.read_bytes()
    except OSError as e:
        raise DeclarationSyntaxError(f"Cannot read package source: {e.strerror or e}", position) from e
    try:
        return ast.parse(source, filename=str(path))
    except SyntaxError as e:
        raise DeclarationSyntaxError(
            f"Cannot parse package source: {e.msg}", SourcePosition(str(path), e.lineno)
        ) from e
    except ValueError as e:
        # Undecodable bytes or null bytes, depending on the interpreter version
        raise DeclarationSyntaxError(f"Cannot parse package source: {e}", position) from e


@dataclass
class ModuleScan:
    """Top-level names of one parsed module."""

    imports: dict[str, str] = field(default_factory=dict)
    local_classes: dict[str, str] = field(default_factory=dict)
    assignments: dict[str, ast.expr] = field(default_factory=dict)


def scan_module(tree: ast.Module, qualified_name: str, *, is_package: bool) -> ModuleScan:
    """Collect top-level imports, classes and declaration assignments."""
    scan = ModuleScan()
    for stmt in tree.body:
        if isinstance(stmt, ast.Import):
            for alias in stmt.names:
                if alias.asname:
                    scan.imports[alias.asname] = alias.name
                else:
                    top = alias.name.split(".", 1)[0]
                    scan.imports[top] = top
        elif isinstance(stmt, ast.ImportFrom):
            if stmt.level:
                module = resolve_relative_module(qualified_name, stmt.level, stmt.module, is_package=is_package)
            else:
                module = stmt.module or ""
            for alias in stmt.names:
                if alias.name == "*":
                    continue
                scan.imports[alias.asname or alias.name] = f"{module}.{alias.name}"
        elif isinstance(stmt, ast.ClassDef):
            scan.local_classes[stmt.name] = f"{qualified_name}.{stmt.name}"
        elif isinstance(stmt, ast.Assign):
            for target in stmt.targets:
                if isinstance(target, ast.Name) and target.id in _ATTRIBUTE_NAMES:
                    scan.assignments[target.id] = stmt.value
        elif isinstance(stmt, ast.AnnAssign):
            if isinstance(stmt.target, ast.Name) and stmt.target.id in _ATTRIBUTE_NAMES and stmt.value:
                scan.assignments[stmt.target.id] = stmt.value
    return scan


class StaticPackageSource:
    """PackageSource over a parsed source file."""

    def __init__(
        self,
        path: str | Path,
        qualified_name: str,
        search_paths: Sequence[str | Path] | None = None,
    ) -> None:
        """
        Args:
            path: Source file of the package (its ``__init__.py``) or module
            qualified_name: Dotted name of the package
            search_paths: Roots used to follow imported types to their defining
                module; defaults to the root the package itself lives under.
        """
        self._path = Path(path)
        self._qualified_name = qualified_name
        self._is_package = self._path.name == "__init__.py"
        self._search_paths = list(search_paths) if search_paths is not None else [self._package_root()]

        self._scan = scan_module(parse_module_source(self._path), qualified_name, is_package=self._is_package)
        self._module_scans: dict[str, ModuleScan | None] = {qualified_name: self._scan}

    @classmethod
    def from_package_name(cls, name: str, search_paths: Sequence[str | Path]) -> StaticPackageSource:
        """
        Locate a package's source under the given roots.

        Raises:
            PackageNotFoundError: No root contains the package
        """
        path = find_module_source(name, search_paths)
        if path is None:
            searched = ", ".join(str(p) for p in search_paths) or "<none>"
            raise PackageNotFoundError(f"Package {name!r} not found in search paths: {searched}")
        return cls(path, name, search_paths)

    @property
    def qualified_name(self) -> str:
        return self._qualified_name

    @property
    def position(self) -> SourcePosition | None:
        return SourcePosition(str(self._path))

    def get_declaration(self, kind: type[D]) -> D | None:
        attribute = DECLARATION_ATTRIBUTES.get(kind)
        if attribute is None:
            raise ValueError(f"{kind.__name__} is not a package-level declaration")

        node = self._scan.assignments.get(attribute)
        if node is None:
            return None
        value = self._evaluate(node)
        if value is None:
            return None
        if not isinstance(value, kind):
            logger.warning(
                "Ignoring %s.%s at %s: expected %s, got %s",
                self._qualified_name,
                attribute,
                self._position(node.lineno),
                kind.__name__,
                type(value).__name__,
            )
            return None
        return value

    def _package_root(self) -> Path:
        # <root>/a/b/__init__.py or <root>/a/b.py for package a.b
        depth = self._qualified_name.count(".") + (1 if self._is_package else 0)
        parents = self._path.absolute().parents
        return parents[depth] if depth < len(parents) else self._path.absolute().parent

    # ----------------------------------------------------------------------
    # Following imported types
    # ----------------------------------------------------------------------

    def _module_scan(self, module: str) -> ModuleScan | None:
        if module not in self._module_scans:
            scan = None
            path = find_module_source(module, self._search_paths)
            if path is not None:
                try:
                    tree = parse_module_source(path)
                except DeclarationSyntaxError as e:
                    logger.warning("Not following imports through %s: %s", module, e)
                else:
                    scan = scan_module(tree, module, is_package=path.name == "__init__.py")
            self._module_scans[module] = scan
        return self._module_scans[module]

    def _defining_name(self, qualified: str, seen: frozenset[str] = frozenset()) -> str:
        """Follow re-exports of a qualified class name to the module that defines it."""
        if qualified in seen:
            return qualified
        parts = qualified.split(".")
        for split in range(len(parts) - 1, 0, -1):
            scan = self._module_scan(".".join(parts[:split]))
            if scan is None:
                continue
            name, rest = parts[split], parts[split + 1 :]
            if name in scan.local_classes:
                return qualified
            target = scan.imports.get(name)
            if target is None:
                return qualified
            return self._defining_name(".".join([target, *rest]), seen | {qualified})
        # Not found under the search paths (stdlib, third party)
        return qualified

    # ----------------------------------------------------------------------
    # Evaluation of the literal subset
    # ----------------------------------------------------------------------

    def _position(self, line: int | None) -> SourcePosition:
        return SourcePosition(str(self._path), line)

    def _unsupported(self, node: ast.expr, what: str = "Unsupported expression") -> DeclarationSyntaxError:
        return DeclarationSyntaxError(f"{what}: {ast.unparse(node)}", self._position(node.lineno))

    def _evaluate(self, node: ast.expr) -> Any:
        if isinstance(node, ast.Constant):
            if node.value is None or isinstance(node.value, str | int | float | bool):
                return node.value
            raise self._unsupported(node)

        if isinstance(node, ast.List | ast.Tuple):
            return tuple(self._evaluate(element) for element in node.elts)

        if isinstance(node, ast.Call):
            return self._evaluate_call(node)

        if isinstance(node, ast.Attribute) and isinstance(node.value, ast.Name | ast.Attribute):
            enum_name = node.value.attr if isinstance(node.value, ast.Attribute) else node.value.id
            enum_cls = _ENUMS.get(enum_name)
            if enum_cls is not None:
                try:
                    return enum_cls[node.attr]
                except KeyError:
                    raise self._unsupported(node, f"Unknown {enum_name} member") from None

        raise self._unsupported(node)

    def _evaluate_call(self, node: ast.Call) -> Any:
        func = node.func
        name = func.attr if isinstance(func, ast.Attribute) else getattr(func, "id", None)
        constructor = _CONSTRUCTORS.get(name or "")
        if constructor is None:
            raise self._unsupported(node, "Unsupported constructor")
        if any(isinstance(arg, ast.Starred) for arg in node.args) or any(kw.arg is None for kw in node.keywords):
            raise self._unsupported(node, "Argument unpacking is not supported")

        args: list[Any] = []
        for index, arg in enumerate(node.args):
            if constructor is XmlSchemaType and index == _TYPE_ARG_INDEX:
                args.append(self._describe_type(arg))
            else:
                args.append(self._evaluate(arg))

        kwargs: dict[str, Any] = {}
        for keyword in node.keywords:
            if constructor is XmlSchemaType and keyword.arg == "type":
                kwargs["type"] = self._describe_type(keyword.value)
            else:
                kwargs[keyword.arg] = self._evaluate(keyword.value)  # type: ignore[index]

        try:
            return constructor(*args, **kwargs)
        except TypeError as e:
            raise self._unsupported(node, f"Invalid {constructor.__name__} arguments ({e})") from e

    def _describe_type(self, node: ast.expr) -> Any:
        """Type references stay unresolved, except the DEFAULT marker."""
        if isinstance(node, ast.Name) and node.id == "DEFAULT":
            return DEFAULT
        if isinstance(node, ast.Attribute) and node.attr == "DEFAULT":
            return DEFAULT

        description: TypeDescription = describe_type_node(node, self._scan.imports, self._scan.local_classes)
        if description.kind is TypeKind.DECLARED and description.qualified_name:
            defining = self._defining_name(description.qualified_name)
            if defining != description.qualified_name:
                logger.debug("Followed %s to its definition %s", description.qualified_name, defining)
                description = replace(description, qualified_name=defining)
        return description
