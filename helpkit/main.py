"""
Command line entry point for helpkit.

Exposes the locale resolver, rounding and object hashing for quick checks
from a shell.
"""

import json
import sys
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from helpkit.core.config import get_settings, print_configuration_summary
from helpkit.core.exceptions import HelpkitError
from helpkit.core.logging import cli_logger, set_correlation_id, setup_logging
from helpkit.core.models import RoundingMode
from helpkit.utils.i18n import get_localized_value, parse_locale
from helpkit.utils.numeric import round_value
from helpkit.utils.objects import create_object_hash

console = Console()
error_console = Console(stderr=True)


def _fail(ctx: click.Context, label: str, error: Exception) -> None:
    error_console.print(f"[red]{label}:[/red] {error}")
    if ctx.obj and ctx.obj.get("debug"):
        error_console.print_exception()
    sys.exit(1)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit JSON log lines instead of rich output")
@click.option("--correlation-id", help="Set correlation ID for log tracing")
@click.pass_context
def main(ctx, debug: bool, json_logs: bool, correlation_id: Optional[str]):
    """Pure helpers for collections, rounding, locale lookup and objects."""
    ctx.ensure_object(dict)

    try:
        settings = get_settings()
    except HelpkitError as e:
        _fail(ctx, "Configuration Error", e)

    debug = debug or settings.debug
    json_logs = json_logs or settings.json_logs
    setup_logging(debug=debug, rich_output=not json_logs)

    if correlation_id:
        set_correlation_id(correlation_id)

    ctx.obj["debug"] = debug
    ctx.obj["correlation_id"] = correlation_id


def _parse_values(pairs: Tuple[str, ...]) -> dict:
    values = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--value")
        values[key] = value
    return values


@main.command()
@click.argument("locale")
@click.option(
    "--value",
    "values",
    multiple=True,
    required=True,
    help="Localized value as LOCALE=TEXT (repeatable)",
)
@click.option(
    "--fallback",
    "fallbacks",
    multiple=True,
    help=(
        "Fallback locale to try after LOCALE (repeatable, in order; "
        "defaults to HELPKIT_DEFAULT_FALLBACK_LOCALES)"
    ),
)
@click.pass_context
def localize(ctx, locale: str, values: Tuple[str, ...], fallbacks: Tuple[str, ...]):
    """Resolve the value for LOCALE from the given localized values."""
    mapping = _parse_values(values)
    fallback_locales = list(fallbacks) or get_settings().default_fallback_locales
    result = get_localized_value(mapping, locale, fallback_locales)

    if result is None:
        cli_logger.info("No localized value", locale=locale, fallbacks=fallback_locales)
        error_console.print(f"[yellow]No value found for locale {locale}[/yellow]")
        sys.exit(1)

    click.echo(result)


@main.command(name="parse-locale")
@click.argument("locale")
def parse_locale_command(locale: str):
    """Show the language tag and subtag of LOCALE."""
    parsed = parse_locale(locale)

    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Language", parsed.language_tag)
    table.add_row("Subtag", parsed.sub_tag if parsed.sub_tag is not None else "-")
    console.print(table)


@main.command(name="round")
@click.argument("value", type=float)
@click.option(
    "--mode",
    type=click.Choice([m.value for m in RoundingMode]),
    help="Rounding mode (defaults to HELPKIT_ROUNDING_MODE)",
)
@click.pass_context
def round_command(ctx, value: float, mode: Optional[str]):
    """Round VALUE to an integer."""
    try:
        result = round_value(value, mode or get_settings().rounding_mode)
    except HelpkitError as e:
        _fail(ctx, "Rounding Error", e)

    click.echo(result)


@main.command(name="hash")
@click.argument("payload")
@click.pass_context
def hash_command(ctx, payload: str):
    """Print the order-independent hash of a JSON object."""
    try:
        obj = json.loads(payload)
    except json.JSONDecodeError as e:
        _fail(ctx, "Invalid JSON", e)

    try:
        click.echo(create_object_hash(obj))
    except HelpkitError as e:
        _fail(ctx, "Hash Error", e)


@main.command()
def config():
    """Show the current configuration."""
    print_configuration_summary(console)


if __name__ == "__main__":
    main()
