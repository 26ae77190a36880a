"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.naming_services import DasService
from core.config import AppSettings, write_user_env_vars
from core.domain.network import DasNetwork
from core.errors import DasResolutionError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_PROBE_DOMAIN = "bestcase.bit"


async def _check_indexer(service: DasService) -> tuple[bool, str]:
    try:
        registered = await service.is_registered(_PROBE_DOMAIN)
    except (DasResolutionError, httpx.HTTPError) as exc:
        return False, str(exc)
    return True, f"{_PROBE_DOMAIN} registered={registered}"


@app.command()
def run() -> None:
    """Run baseline diagnostics against the configured indexer."""

    settings = AppSettings()

    table = Table(title="DAS Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Network", "OK", settings.network.value)
    if settings.url:
        table.add_row("Indexer URL", "OK", settings.url)
    else:
        table.add_row("Indexer URL", "DEFAULT", settings.network.default_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    try:
        service = DasService.autonetwork(
            url=settings.url,
            network=settings.network.value,
            settings=settings,
        )
    except DasResolutionError as exc:
        table.add_row("Configuration", "FAIL", str(exc))
        _console.print(table)
        raise typer.Exit(code=1) from exc

    ok, detail = asyncio.run(_check_indexer(service))
    table.add_row("Indexer connectivity", "OK" if ok else "FAIL", detail)

    _console.print(table)
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def setup(
    url: str = typer.Option(None, "--url", help="Indexer endpoint to store."),
    network: str = typer.Option(None, "--network", "-n", help="mainnet, testnet or aggron."),
) -> None:
    """Store indexer settings in the user config .env."""

    interactive = url is None and network is None
    if interactive:
        network = typer.prompt("DAS network", default=DasNetwork.default().value, show_default=True).strip()

    if network is not None and not DasNetwork.is_supported(network):
        raise typer.BadParameter(f"unsupported network {network!r}", param_hint="--network")

    if interactive:
        url = typer.prompt("Indexer URL", default=DasNetwork(network).default_url, show_default=True).strip()

    env_path = write_user_env_vars({"DAS_URL": url, "DAS_NETWORK": network})
    _console.print(f"[green]Saved DAS config to:[/green] {env_path}")
