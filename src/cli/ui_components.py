"""Rich UI components for the CLI.

Why separate components:
- Keeps command logic apart from presentation details.
- Tables and panels are reused across several commands.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import AccountRecord, ConstructedAccount


def build_records_table(records: Iterable[AccountRecord], *, title: str = "Records") -> Table:
    """Table of raw account records, in source order."""

    table = Table(title=title)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Key", style="white")
    table.add_column("Value", style="green")
    table.add_column("Label", style="dim")
    table.add_column("TTL", style="magenta", justify="right")
    for record in records:
        table.add_row(
            record.type,
            record.stripped_key,
            record.value,
            record.label or "",
            f"{record.ttl:g}",
        )
    return table


def build_key_value_table(values: Mapping[str, str], *, title: str = "Records") -> Table:
    table = Table(title=title)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    for key, value in values.items():
        table.add_row(key, value or Text("-", style="dim"))
    return table


def build_account_panel(account: ConstructedAccount) -> Panel:
    """Summary panel for the aggregate account view."""

    body = Text()
    body.append("Avatar: ", style="bold")
    body.append(f"{account.avatar}\n")
    for label, group in (
        ("Profile", account.profile),
        ("Address", account.address),
        ("DWeb", account.dweb),
        ("Custom", account.custom),
    ):
        body.append(f"{label}: ", style="bold")
        body.append(", ".join(sorted(group)) or "-")
        body.append("\n")
    body.append(f"Total records: {len(account.records)}", style="dim")

    return Panel(body, title=Text(account.account, style="bold cyan"), border_style="cyan")


def print_account(console: Console, account: ConstructedAccount) -> None:
    console.print(build_account_panel(account))
    if account.records:
        console.print(build_records_table(account.records))
