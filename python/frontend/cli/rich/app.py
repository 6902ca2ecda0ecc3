"""Rich terminal frontend: coloured coin row and flip table.

Uses the ``rich`` library for styled output of the same report the
vanilla frontend prints.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from coinflip.models.coins import Coins
from coinflip.models.masks import HEADS, TAILS, positions_of

console = Console()


# -- row rendering ------------------------------------------------------------


def _render_row(coins: Coins) -> Table:
    """Return a Rich Table with one cell per coin."""
    table = Table(
        show_header=True,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for i in range(coins.n):
        table.add_column(str(i), justify="center", header_style="dim")

    cells: list[str] = []
    for i in range(coins.n):
        if coins.coins >> i & 1:
            cells.append(f"[bold green]{TAILS}[/bold green]")
        else:
            cells.append(f"[bold white]{HEADS}[/bold white]")
    table.add_row(*cells)
    return table


def _render_flips(coins: Coins) -> Table:
    """Return a Rich Table listing every flip, marking the coins it turns."""
    table = Table(box=rich.box.SIMPLE, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("positions")
    table.add_column("mask")

    for k, mask in enumerate(coins.get_flips()):
        marks = "".join(
            "[cyan]●[/cyan]" if mask >> i & 1 else "[dim]·[/dim]"
            for i in range(coins.n)
        )
        table.add_row(str(k), ", ".join(map(str, positions_of(mask))), marks)
    return table


def build_report(coins: Coins) -> Panel:
    status = Text()
    if coins.is_goal():
        status.append("Solved!", style="bold green")
    else:
        status.append(f"{coins.tails()}/{coins.n} tails", style="yellow")

    return Panel(
        Group(
            Align.center(_render_row(coins)),
            Align.center(status),
            _render_flips(coins),
        ),
        title=f"[bold cyan]{coins.n} coins, flip {coins.m}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )


# -- entry point --------------------------------------------------------------


def run(coins: Coins) -> None:
    console.print(build_report(coins))
