#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pkgschema.components.schema.namespace_metadata_comp import NamespaceMetadata

console = Console()

# Color scheme constants
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"
COLOR_MUTED = "dim"


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


def _or_muted(value: str | None, placeholder: str = "unset") -> str:
    if value is None:
        return f"[{COLOR_MUTED}]{placeholder}[/{COLOR_MUTED}]"
    if value == "":
        return f"[{COLOR_MUTED}](default namespace)[/{COLOR_MUTED}]"
    return escape(value)


def show_namespace(metadata: NamespaceMetadata):
    """Show one package's schema metadata as a panel, plus a table of type overrides."""
    element_form = metadata.element_form_default.value if metadata.element_form_default else None
    attribute_form = metadata.attribute_form_default.value if metadata.attribute_form_default else None
    lines = [
        f"[bold]Namespace:[/bold] {_or_muted(metadata.namespace_uri, 'none')}",
        f"[bold]Element form:[/bold] {_or_muted(element_form)}",
        f"[bold]Attribute form:[/bold] {_or_muted(attribute_form)}",
        f"[bold]Access type:[/bold] {metadata.access_type.value}",
        f"[bold]Access order:[/bold] {metadata.access_order.value}",
    ]
    if metadata.namespace_prefixes:
        prefixes = ", ".join(
            f"{escape(prefix)}={escape(uri)}" for uri, prefix in sorted(metadata.namespace_prefixes.items())
        )
        lines.append(f"[bold]Prefixes:[/bold] {prefixes}")
    InfoPanel.show(metadata.qualified_name, "\n".join(lines))

    if metadata.type_overrides:
        table = Table(box=box.SIMPLE, show_header=True, header_style=f"bold {COLOR_INFO}")
        table.add_column("Python type")
        table.add_column("Schema type")
        table.add_column("Schema namespace", style=COLOR_MUTED)
        for identifier, override in sorted(metadata.type_overrides.items()):
            table.add_row(identifier, escape(override.name), escape(override.namespace))
        console.print(table)


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {escape(message)}", soft_wrap=True)


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {escape(message)}", soft_wrap=True)
