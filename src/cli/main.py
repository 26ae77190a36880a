"""`das-resolve` command line interface.

Thin layer over `DasService`: parses options, runs one query, renders the
result with Rich. Resolution and transport errors are reported and turned
into exit code 1.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, TypeVar

import httpx
import typer
from rich.console import Console

from adapters.json_exporter import export_account_json
from adapters.naming_services import DasService
from cli import doctor
from cli.ui_components import build_key_value_table, build_records_table, print_account
from core.config import AppSettings
from core.domain.network import DasNetwork
from core.errors import ConfigurationError, ConfigurationErrorCode, DasResolutionError
from core.log import setup_logger

T = TypeVar("T")

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Resolve .bit (DAS) domains.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@dataclass
class CliState:
    settings: AppSettings
    url: str | None = None
    network: str | None = None
    as_json: bool = False

    def build_service(self) -> DasService:
        url = self.url or self.settings.url
        network = self.network or self.settings.network.value
        if not DasNetwork.is_supported(network):
            raise ConfigurationError(
                ConfigurationErrorCode.UNSUPPORTED_NETWORK,
                method=DasService.name.value,
                network=network,
            )
        return DasService.autonetwork(url=url, network=network, settings=self.settings)


@app.callback()
def main(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(None, "--url", help="Indexer endpoint (overrides DAS_URL)."),
    network: Optional[str] = typer.Option(
        None, "--network", "-n", help="mainnet, testnet or aggron (overrides DAS_NETWORK)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of tables."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    # Without handlers, logging's last-resort handler already prints warnings.
    if verbose or settings.log_level.upper() != "WARNING":
        setup_logger(logging.DEBUG if verbose else settings.log_level)
    ctx.obj = CliState(settings=settings, url=url, network=network, as_json=as_json)


def _run(ctx: typer.Context, query: Callable[[DasService], Awaitable[T]]) -> T:
    state: CliState = ctx.obj
    try:
        service = state.build_service()
        return asyncio.run(query(service))
    except DasResolutionError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        logger.debug("Transport failure", exc_info=True)
        _err_console.print(f"[red]Indexer request failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _print_json(value: Any) -> None:
    _console.print_json(json.dumps(value, ensure_ascii=False))


@app.command()
def owner(ctx: typer.Context, domain: str = typer.Argument(..., help="e.g. alice.bit")) -> None:
    """Print the owner lock args of a domain."""

    _console.print(_run(ctx, lambda service: service.owner(domain)))


@app.command()
def record(ctx: typer.Context, domain: str, key: str) -> None:
    """Print a single record value (key is case-insensitive)."""

    _console.print(_run(ctx, lambda service: service.record(domain, key)))


@app.command()
def records(ctx: typer.Context, domain: str, keys: list[str]) -> None:
    """Print several records; missing keys show as empty."""

    values = _run(ctx, lambda service: service.records(domain, keys))
    if ctx.obj.as_json:
        _print_json(values)
    else:
        _console.print(build_key_value_table(values, title=domain))


@app.command(name="all-records")
def all_records(ctx: typer.Context, domain: str) -> None:
    """Print every record of a domain as a flattened key/value map."""

    values = _run(ctx, lambda service: service.all_records(domain))
    if ctx.obj.as_json:
        _print_json(values)
    else:
        _console.print(build_key_value_table(values, title=domain))


@app.command(name="records-by-key")
def records_by_key(ctx: typer.Context, domain: str, key: str) -> None:
    """Print every record stored under an exact key."""

    found = _run(ctx, lambda service: service.records_by_key(domain, key))
    if ctx.obj.as_json:
        _print_json([r.model_dump(mode="json") for r in found])
    else:
        _console.print(build_records_table(found, title=f"{domain} {key}"))


@app.command()
def addr(ctx: typer.Context, domain: str, ticker: str) -> None:
    """Print the address a domain holds for a currency ticker."""

    _console.print(_run(ctx, lambda service: service.addr(domain, ticker)))


@app.command()
def account(
    ctx: typer.Context,
    domain: str,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the account view to a JSON file."),
) -> None:
    """Show the categorized account view."""

    view = _run(ctx, lambda service: service.account(domain))
    if output is not None:
        path = export_account_json(account=view, output_path=output)
        _console.print(f"[green]Saved account to:[/green] {path}")
    if ctx.obj.as_json:
        _print_json(view.model_dump(mode="json"))
    else:
        print_account(_console, view)


@app.command(name="is-registered")
def is_registered(ctx: typer.Context, domain: str) -> None:
    """Print whether a domain is registered."""

    registered = _run(ctx, lambda service: service.is_registered(domain))
    _console.print("registered" if registered else "not registered")


@app.command()
def reverse(
    ctx: typer.Context,
    address: str,
    currency: str = typer.Option("ETH", "--currency", "-c", help="ETH or CKB."),
) -> None:
    """Print the primary domain claiming an address."""

    domain = _run(ctx, lambda service: service.reverse(address, currency))
    if domain is None:
        _err_console.print(f"[yellow]No domain found for {address}[/yellow]")
        raise typer.Exit(code=1)
    _console.print(domain)


@app.command(name="all-reverse")
def all_reverse(ctx: typer.Context, address: str) -> None:
    """Print every domain claiming an address."""

    domains = _run(ctx, lambda service: service.all_reverse(address))
    if ctx.obj.as_json:
        _print_json(domains)
    else:
        for domain in domains:
            _console.print(domain)


def run() -> None:
    app()
