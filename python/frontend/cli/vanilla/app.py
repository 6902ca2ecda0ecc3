"""Vanilla terminal frontend: no third-party dependencies.

Uses only stdlib print and ANSI codes to show a coin row and its flips.
"""

from __future__ import annotations

import sys

from coinflip.models.coins import Coins
from coinflip.models.masks import format_mask


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _paint(text: str, code: str, colour: bool) -> str:
    return f"{code}{text}{_R}" if colour else text


# -- rendering ----------------------------------------------------------------


def render_report(coins: Coins, colour: bool = False) -> str:
    """Return the state line, goal status and flip catalog as text."""
    flips = coins.get_flips()
    status = (
        _paint("solved", _G, colour) if coins.is_goal()
        else _paint(f"{coins.tails()}/{coins.n} tails", _Y, colour)
    )
    lines = [
        str(coins),
        f"n={coins.n}  m={coins.m}  {status}",
        _paint(f"{len(flips)} flips:", _DIM, colour),
        "[" + ", ".join(format_mask(f) for f in flips) + "]",
    ]
    return "\n".join(lines)


# -- entry point --------------------------------------------------------------


def run(coins: Coins) -> None:
    print(render_report(coins, colour=sys.stdout.isatty()))
