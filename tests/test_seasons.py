from __future__ import annotations

import pytest

from ridestats.core.seasons import season_for_month


@pytest.mark.parametrize(
    ("month", "expected"),
    [
        (12, "Zima"),
        (1, "Zima"),
        (2, "Zima"),
        (3, "Wiosna"),
        (5, "Wiosna"),
        (6, "Lato"),
        (8, "Lato"),
        (9, "Jesień"),
        (11, "Jesień"),
    ],
)
def test_season_for_month(month: int, expected: str) -> None:
    assert season_for_month(month) == expected


@pytest.mark.parametrize("month", [0, 13, -1])
def test_season_for_out_of_range_month_is_unknown(month: int) -> None:
    assert season_for_month(month) == "Nieznana"
