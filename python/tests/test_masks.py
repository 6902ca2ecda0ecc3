"""Mask helper tests."""

from __future__ import annotations

import pytest

from coinflip.models.masks import (
    format_mask,
    mask_of,
    parse_facings,
    positions_of,
    render,
)


def test_mask_of() -> None:
    assert mask_of([]) == 0
    assert mask_of([0, 1, 2]) == 0b111
    assert mask_of([4, 0, 4]) == 0b10001


def test_mask_of_rejects_negative_positions() -> None:
    with pytest.raises(ValueError):
        mask_of([1, -1])


def test_positions_of() -> None:
    assert positions_of(0) == ()
    assert positions_of(0b101001) == (0, 3, 5)


def test_format_mask() -> None:
    assert format_mask(0b111) == "{0, 1, 2}"
    assert format_mask(0b1000010) == "{1, 6}"
    assert format_mask(0) == "{}"


def test_render() -> None:
    assert render(3, 0) == "O|O|O"
    assert render(5, 0b00101) == "1|O|1|O|O"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("O", (1, 0)),
        ("1", (1, 1)),
        ("O|1|1", (3, 0b110)),
        (" 1 | O | 1 ", (3, 0b101)),
    ],
)
def test_parse_facings(text: str, expected: tuple[int, int]) -> None:
    assert parse_facings(text) == expected


@pytest.mark.parametrize("text", ["", "O||1", "0|1", "H|T"])
def test_parse_facings_rejects_bad_tokens(text: str) -> None:
    with pytest.raises(ValueError):
        parse_facings(text)
