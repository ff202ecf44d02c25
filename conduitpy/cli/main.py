"""conduitpy CLI - Compose and inspect requests."""
import json
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from conduitpy.core.api import RequestBuilder
from conduitpy.core.exceptions import InvalidUrlError

app = typer.Typer(
    name="conduitpy",
    help="Compose Conduit API requests",
    add_completion=False
)
console = Console()


def parse_params(values: List[str]) -> Dict[str, str]:
    """Parse NAME=VALUE pairs."""
    params = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"Expected NAME=VALUE, got {item!r}", param_hint="--param")
        params[name] = value
    return params


def parse_headers(values: List[str]) -> Dict[str, str]:
    """Parse 'Name: value' pairs."""
    headers = {}
    for item in values:
        name, sep, value = item.partition(":")
        if not sep or not name.strip():
            raise typer.BadParameter(f"Expected 'Name: value', got {item!r}", param_hint="--header")
        headers[name.strip()] = value.strip()
    return headers


def make_builder(
    base_url: Optional[str],
    path: str,
    params: List[str],
    headers: List[str]
) -> RequestBuilder:
    builder = RequestBuilder().set_path(path)
    if base_url:
        builder.set_base_url(base_url)
    if params:
        builder.set_query_params(parse_params(params))
    if headers:
        builder.set_headers(parse_headers(headers))
    return builder


@app.command()
def compose(
    path: str = typer.Option("", "--path", "-p", help="Endpoint path"),
    base_url: str = typer.Option(None, "--base-url", "-u", help="Origin (defaults to the demo API)"),
    param: Optional[List[str]] = typer.Option(None, "--param", "-q", help="Query parameter NAME=VALUE"),
):
    """Print the composed URL."""
    builder = make_builder(base_url, path, param or [], [])

    try:
        console.print(builder.compose_url(), markup=False, highlight=False, soft_wrap=True)
    except InvalidUrlError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def describe(
    path: str = typer.Option("", "--path", "-p", help="Endpoint path"),
    base_url: str = typer.Option(None, "--base-url", "-u", help="Origin (defaults to the demo API)"),
    param: Optional[List[str]] = typer.Option(None, "--param", "-q", help="Query parameter NAME=VALUE"),
    header: Optional[List[str]] = typer.Option(None, "--header", "-H", help="Header 'Name: value'"),
    body: str = typer.Option(None, "--body", "-b", help="JSON request body"),
    method: str = typer.Option("GET", "--method", "-X", help="HTTP method"),
):
    """Show the full request descriptor."""
    builder = make_builder(base_url, path, param or [], header or [])
    if body is not None:
        try:
            builder.set_body(json.loads(body))
        except json.JSONDecodeError as e:
            raise typer.BadParameter(f"Invalid JSON: {e}", param_hint="--body")

    try:
        descriptor = builder.build(method)
    except InvalidUrlError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", overflow="fold")

    table.add_row("Method", descriptor.method)
    table.add_row("URL", escape(descriptor.url))
    for name, value in descriptor.headers.items():
        table.add_row(escape(f"Header {name}"), escape(value))
    if descriptor.has_body:
        table.add_row("Body", escape(json.dumps(descriptor.body, indent=2)))

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
