"""
Click-based CLI for provider-schema.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .api import (
    get_difference_by_data,
    get_fields,
    get_provider_assets,
    get_provider_data,
)
from .constants import is_valid_asset_id
from .core.store import field_attr
from .domain.errors import ProviderSchemaError
from .domain.results import Response

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="provider-schema")
@click.option("--verbose", "-v", is_flag=True, help="Log schema selection to stderr")
def cli(verbose: bool) -> None:
    """Decode, encode and diff data provider records"""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--assets", is_flag=True, help="Decode assets instead of the provider profile")
@click.option("--json", "json_output", is_flag=True, help="Print responses as JSON")
def decode(path: Path, assets: bool, json_output: bool) -> None:
    """Decode a JSON list of key/type/value triples"""

    try:
        fields = _load_json(path)
        if not isinstance(fields, list):
            raise click.ClickException("Expected a JSON list of fields")

        responses = get_provider_assets(fields) if assets else [get_provider_data(fields)]

        if json_output:
            payload: Any = [r.to_dict() for r in responses] if assets else responses[0].to_dict()
            click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            if assets and not responses:
                console.print("[yellow]No assets found[/yellow]")
            for response in responses:
                _print_response(response)

        if any(not response.ok for response in responses):
            sys.exit(1)

    except (OSError, ValueError, click.ClickException) as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        sys.exit(1)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Print fields as JSON")
def encode(path: Path, json_output: bool) -> None:
    """Encode a provider or asset JSON object into triples"""

    try:
        data = _load_json(path)
        if not isinstance(data, dict):
            raise click.ClickException("Expected a JSON object")

        _print_fields(get_fields(data), json_output, title="Fields")

    except (OSError, ValueError, ProviderSchemaError, click.ClickException) as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        sys.exit(1)


@cli.command()
@click.argument("previous", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("next_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Print changed fields as JSON")
def diff(previous: Path, next_path: Path, json_output: bool) -> None:
    """Show fields to write to turn PREVIOUS into NEXT_PATH

    Each file holds either an entity object or a list of triples.
    """

    try:
        documents = [_load_json(previous), _load_json(next_path)]
        if not all(isinstance(doc, (dict, list)) for doc in documents):
            raise click.ClickException("Expected a JSON object or a JSON list of fields")

        changed = get_difference_by_data(*documents)

        if not changed and not json_output:
            console.print("[green]✓[/green] No changes")
            return

        _print_fields(changed, json_output, title="Changed fields")

    except (OSError, ValueError, ProviderSchemaError, click.ClickException) as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        sys.exit(1)


@cli.command("validate-id")
@click.argument("asset_ids", nargs=-1, required=True)
def validate_id(asset_ids: tuple[str, ...]) -> None:
    """Check asset ids against the Base58 id format"""

    invalid = 0
    for asset_id in asset_ids:
        if is_valid_asset_id(asset_id):
            console.print(f"  [green]✓[/green] {escape(asset_id)}")
        else:
            invalid += 1
            console.print(f"  [red]✗[/red] {escape(asset_id)}")

    if invalid:
        sys.exit(1)


def _load_json(path: Path) -> Any:
    """Read a JSON document (ValueError on malformed content)."""
    return json.loads(path.read_text(encoding="utf-8"))


def _field_to_dict(item: Any) -> dict[str, Any]:
    return {
        "key": field_attr(item, "key"),
        "type": str(field_attr(item, "type")),
        "value": field_attr(item, "value"),
    }


def _print_fields(fields: list[Any], json_output: bool, title: str) -> None:
    if json_output:
        click.echo(json.dumps([_field_to_dict(f) for f in fields], indent=2, ensure_ascii=False))
        return

    table = Table(title=title)
    table.add_column("Key", style="cyan")
    table.add_column("Type")
    table.add_column("Value")
    for item in fields:
        entry = _field_to_dict(item)
        table.add_row(escape(str(entry["key"])), entry["type"], escape(repr(entry["value"])))
    console.print(table)


def _print_response(response: Response) -> None:
    title = escape(str(response.content.get("id", "provider")))
    if response.ok:
        console.print(f"[green]✓[/green] {title}")
    else:
        console.print(f"[red]✗[/red] {title}")

    table = Table(show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in response.content.items():
        table.add_row(escape(name), escape(repr(value)))
    console.print(table)

    for error in response.errors:
        console.print(f"  [red]{escape(error.path)}[/red]: {escape(error.error.message)}")


if __name__ == "__main__":
    cli()
