"""Helpers for flip masks and facing patterns.

Both are plain ``int`` bit-vectors: bit *i* (``1 << i``) stands for coin
position *i*.  In a facing pattern a set bit is a tail, in a flip mask it
marks a coin to turn over.
"""

from __future__ import annotations

from collections.abc import Iterable

HEADS = "O"
TAILS = "1"
SEPARATOR = "|"


def mask_of(positions: Iterable[int]) -> int:
    """Return the mask with a bit set at every index in *positions*.

    Example::

        mask_of([0, 2]) == 0b101
    """
    mask = 0
    for i in positions:
        if i < 0:
            raise ValueError(f"Coin positions must be non-negative, got {i}.")
        mask |= 1 << i
    return mask


def positions_of(mask: int) -> tuple[int, ...]:
    """Return the indices of the set bits of *mask* in ascending order."""
    return tuple(i for i in range(mask.bit_length()) if mask >> i & 1)


def format_mask(mask: int) -> str:
    return "{" + ", ".join(str(i) for i in positions_of(mask)) + "}"


def render(length: int, pattern: int) -> str:
    """Render *pattern* as *length* heads/tails tokens, left to right."""
    return SEPARATOR.join(
        TAILS if pattern >> i & 1 else HEADS for i in range(length)
    )


def parse_facings(text: str) -> tuple[int, int]:
    """Parse the rendering format back into ``(length, pattern)``.

    Example::

        parse_facings("O|1|1") == (3, 0b110)
    """
    tokens = [t.strip() for t in text.strip().split(SEPARATOR)]
    pattern = 0
    for i, token in enumerate(tokens):
        if token == TAILS:
            pattern |= 1 << i
        elif token != HEADS:
            raise ValueError(
                f"Unknown coin token {token!r} at position {i}; "
                f"expected {HEADS!r} or {TAILS!r}."
            )
    return len(tokens), pattern
