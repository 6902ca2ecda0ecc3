"""Coin flipping puzzle: state representation and move generator."""

from coinflip.models import Coins

__all__ = ["Coins"]
