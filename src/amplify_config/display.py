"""Display functions for Amplify-Config CLI output."""

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .constants import RESOURCE_SECTIONS
from .error_guidance import ErrorGuidance, GuidanceProvider


def display_sections_table(resources_config: dict[str, Any], console: Console) -> None:
    """
    Display which resources config sections were produced.

    Args:
        resources_config: Translated resources config
        console: Rich console instance for output
    """
    table = Table(title="Resources Config Sections")
    table.add_column("Section", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Contents", style="magenta")

    for section in RESOURCE_SECTIONS:
        value = resources_config.get(section)
        if value is None:
            table.add_row(section, "[dim]- Omitted[/dim]", "")
            continue

        contents = ", ".join(value) if isinstance(value, dict) else ""
        table.add_row(section, "✓ Present", contents)

    console.print(table)

    produced = sum(1 for section in RESOURCE_SECTIONS if section in resources_config)
    console.print(f"{produced} of {len(RESOURCE_SECTIONS)} section(s) produced")


def display_error(guidance: ErrorGuidance, console: Console) -> None:
    """
    Display error guidance in a panel.

    Args:
        guidance: Guidance to render
        console: Rich console instance for output
    """
    console.print(
        Panel(
            GuidanceProvider.format_guidance(guidance),
            title="Error",
            border_style="red",
        )
    )
