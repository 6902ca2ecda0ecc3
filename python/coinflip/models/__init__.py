from coinflip.models.coins import Coins
from coinflip.models.masks import format_mask, mask_of, parse_facings, positions_of

__all__ = ["Coins", "format_mask", "mask_of", "parse_facings", "positions_of"]
