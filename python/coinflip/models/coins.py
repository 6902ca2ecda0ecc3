"""State of the coin flipping puzzle."""

from __future__ import annotations

import itertools
import logging

from coinflip.models.masks import mask_of, parse_facings, render

logger = logging.getLogger(__name__)


class Coins:
    """A row of *n* coins where every move flips exactly *m* of them.

    Coins are stored as an ``int`` bit-vector: a 0 bit is a head and a 1 bit
    is a tail.  The puzzle is solved when every coin shows tails.
    """

    def __init__(self, n: int, m: int, coins: int = 0) -> None:
        _check_arguments(n, m)
        if isinstance(coins, bool) or not isinstance(coins, int) or coins < 0:
            raise ValueError(f"Coins must be a non-negative int, got {coins!r}.")
        if coins.bit_length() > n:
            raise ValueError(
                f"Coins reference position {coins.bit_length() - 1}, "
                f"but there are only {n} coins."
            )
        self._n = n
        self._m = m
        self._coins = coins
        self._flips: tuple[int, ...] = tuple(Coins.generate_flips(n, m))
        logger.debug("Created %d-coin state with %d flips of %d", n, len(self._flips), m)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_string(cls, text: str, m: int) -> Coins:
        """Create a state from its rendering.

        Example::

            Coins.from_string("O|1|O|O", 2)
        """
        n, coins = parse_facings(text)
        return cls(n, m, coins)

    @staticmethod
    def generate_flips(n: int, m: int) -> list[int]:
        """Return every mask that flips *m* of *n* coins.

        Masks come in colexicographic order of their position tuples, which
        is ascending mask value: ``generate_flips(4, 2)`` gives ``{0, 1}``,
        ``{0, 2}``, ``{1, 2}``, ``{0, 3}``, ``{1, 3}``, ``{2, 3}``.
        """
        _check_arguments(n, m)
        return sorted(mask_of(indices) for indices in itertools.combinations(range(n), m))

    # -- queries --------------------------------------------------------------

    @property
    def n(self) -> int:
        """Number of coins."""
        return self._n

    @property
    def m(self) -> int:
        """Number of coins to flip in a move."""
        return self._m

    @property
    def coins(self) -> int:
        return self._coins

    def get_coins(self) -> int:
        return self._coins

    def get_flips(self) -> list[int]:
        """Return a new list holding every possible flip."""
        return list(self._flips)

    def tails(self) -> int:
        return self._coins.bit_count()

    def is_goal(self) -> bool:
        """Check if every coin shows tails."""
        return self._coins.bit_count() == self._n

    def can_flip(self, which: int) -> bool:
        """Check if *which* is a legal move for this puzzle.

        Any mask of *m* positions inside the row qualifies; it does not have
        to come from :meth:`get_flips`.
        """
        return which >= 0 and which.bit_length() <= self._n and which.bit_count() == self._m

    # -- moves ----------------------------------------------------------------

    def flip(self, which: int) -> None:
        """Flip the coins at the set bits of *which*.

        No legality check is made; validate with :meth:`can_flip` first.
        Bits outside the row, including the sign of a negative mask, are
        ignored.
        """
        self._coins ^= which & ((1 << self._n) - 1)

    # -- value semantics ------------------------------------------------------

    def copy(self) -> Coins:
        obj = object.__new__(Coins)
        obj._n = self._n
        obj._m = self._m
        obj._coins = self._coins
        obj._flips = self._flips
        return obj

    def __copy__(self) -> Coins:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Coins:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Coins):
            return NotImplemented
        return self._n == other._n and self._m == other._m and self._coins == other._coins

    def __hash__(self) -> int:
        return hash((self._n, self._m, self._coins))

    def __str__(self) -> str:
        return render(self._n, self._coins)

    def __repr__(self) -> str:
        return f"Coins(n={self._n}, m={self._m}, coins={str(self)!r})"


def _check_arguments(n: int, m: int) -> None:
    if n < 1 or m < 1 or n < m:
        raise ValueError(
            f"Expected 1 <= m <= n, got n={n} and m={m}."
        )
