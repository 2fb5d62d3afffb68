"""CLI interface for Amplify-Config."""

import logging
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .constants import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVELS
from .display import display_error, display_sections_table
from .error_guidance import GuidanceProvider
from .errors import InvalidConfigError
from .settings import load_settings
from .translator import parse_aws_exports
from .utils import dump_resources_config, ensure_dir, load_legacy_config

console = Console()
logger = logging.getLogger(__name__)


def _translate_source(source: Path) -> dict[str, Any]:
    """Load and translate a legacy config file, exiting with guidance on failure."""
    try:
        legacy_config = load_legacy_config(source)
    except (ValueError, OSError) as e:
        display_error(GuidanceProvider.get_unreadable_source(str(source), e), console)
        sys.exit(1)

    try:
        return parse_aws_exports(legacy_config)
    except InvalidConfigError as e:
        display_error(GuidanceProvider.get_invalid_config(e, str(source)), console)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--settings",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Custom settings file path",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: from settings)",
)
@click.pass_context
def cli(ctx: click.Context, settings: Path | None, log_level: str | None) -> None:
    """Amplify-Config: translate legacy Amplify CLI configuration files."""
    ctx.ensure_object(dict)

    try:
        ctx.obj["settings"] = load_settings(settings)
    except (FileNotFoundError, ValueError, OSError, PermissionError) as e:
        console.print(f"[red]Error:[/red] Settings: {escape(str(e))}")
        sys.exit(1)

    level = (log_level or ctx.obj["settings"].log_level).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    logging.getLogger("amplify_config").setLevel(level)


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the resources config to this file instead of stdout",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="JSON indentation, 0 for a single line (default: from settings)",
)
@click.option(
    "--sort-keys/--no-sort-keys",
    default=None,
    help="Sort keys in the JSON output (default: from settings)",
)
@click.pass_context
def translate(
    ctx: click.Context,
    source: Path,
    output: Path | None,
    indent: int | None,
    sort_keys: bool | None,
) -> None:
    """
    Translate a legacy config file into the resources config layout.

    SOURCE is an `amplifyconfiguration.json` file generated by the Amplify CLI.

    Examples:

        \b
        # Print the translated config
        amplify-config translate amplifyconfiguration.json

        \b
        # Write it to a file with sorted keys
        amplify-config translate amplifyconfiguration.json -o resources.json --sort-keys
    """
    settings = ctx.obj["settings"]

    resources_config = _translate_source(source)
    text = dump_resources_config(
        resources_config,
        indent=settings.indent if indent is None else indent,
        sort_keys=settings.sort_keys if sort_keys is None else sort_keys,
    )

    if output is None:
        click.echo(text, nl=False)
        return

    try:
        ensure_dir(output.parent)
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error:[/red] Could not write {output}: {escape(str(e))}")
        sys.exit(1)

    logger.info(f"Wrote {len(resources_config)} section(s) to {output}")
    console.print(f"[green]✓[/green] Wrote resources config to {output}")


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def sections(source: Path) -> None:
    """
    Show which resources config sections a legacy config produces.

    Examples:

        \b
        amplify-config sections amplifyconfiguration.json
    """
    display_sections_table(_translate_source(source), console)


if __name__ == "__main__":
    cli()
