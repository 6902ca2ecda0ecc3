#!/usr/bin/env python3
"""Coin flipping puzzle.

Usage::

    python main.py                    # 7 coins, flip 3, plain output
    python main.py -n 5 -m 2 -f rich  # Rich terminal
    python main.py -c "O|1|1|O" -m 2  # start from a given row
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from coinflip.models.coins import Coins  # noqa: E402

DEFAULT_LENGTH = 7
DEFAULT_FLIP_COUNT = 3
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


def _build(length: int, flip_count: int, coins: Optional[str]) -> Coins:
    try:
        if coins is not None:
            return Coins.from_string(coins, flip_count)
        return Coins(length, flip_count)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    length: int = typer.Option(
        DEFAULT_LENGTH, "-n", "--length",
        envvar="COINFLIP_LENGTH",
        help="Number of coins.",
    ),
    flip_count: int = typer.Option(
        DEFAULT_FLIP_COUNT, "-m", "--flip-count",
        envvar="COINFLIP_FLIP_COUNT",
        help="Number of coins flipped by one move.",
    ),
    coins: Optional[str] = typer.Option(
        None, "-c", "--coins",
        help="Starting row such as 'O|1|O' (O = heads, 1 = tails). Overrides --length.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log debug messages.",
    ),
) -> None:
    """Print a coin row and every move that flips FLIP_COUNT of its coins."""
    _configure_logging(verbose)
    state = _build(length, flip_count, coins)
    logger.debug("Showing %r with the %s frontend", state, frontend.value)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(state)


if __name__ == "__main__":
    app()
