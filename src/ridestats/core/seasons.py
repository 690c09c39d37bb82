from __future__ import annotations

WINTER = "Zima"
SPRING = "Wiosna"
SUMMER = "Lato"
AUTUMN = "Jesień"
UNKNOWN = "Nieznana"

_SEASON_BY_MONTH = {
    12: WINTER,
    1: WINTER,
    2: WINTER,
    3: SPRING,
    4: SPRING,
    5: SPRING,
    6: SUMMER,
    7: SUMMER,
    8: SUMMER,
    9: AUTUMN,
    10: AUTUMN,
    11: AUTUMN,
}


def season_for_month(month: int) -> str:
    return _SEASON_BY_MONTH.get(month, UNKNOWN)
