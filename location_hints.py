"""Durable Objects location hints – the fixed set of placement regions.

The placement API accepts exactly these nine lowercase tokens. Adding or
removing a region means editing this enum; nothing discovers hints at runtime.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class LocationHint(Enum):
    """One placement region.  Value is ``(code, display_name)``."""

    WNAM = ("wnam", "Western North America")
    ENAM = ("enam", "Eastern North America")
    WEUR = ("weur", "Western Europe")
    EEUR = ("eeur", "Eastern Europe")
    APAC = ("apac", "Asia-Pacific")
    OC = ("oc", "Oceania")
    SAM = ("sam", "South America")
    AFR = ("afr", "Africa")
    ME = ("me", "Middle East")

    def __init__(self, code: str, display_name: str) -> None:
        self.code = code
        self.display_name = display_name

    def __str__(self) -> str:
        return self.code

    def as_str(self) -> str:
        """Token passed verbatim to the placement API, e.g. ``"wnam"``."""
        return self.code

    @classmethod
    def parse(cls, code: str) -> LocationHint | None:
        """Exact, case-sensitive lookup.  Unknown codes return None."""
        return _BY_CODE.get(code)


# ---------------------------------------------------------------------------
# Lookup tables, built once at import time
# ---------------------------------------------------------------------------

ALL: tuple[LocationHint, ...] = tuple(LocationHint)
LocationHint.ALL = ALL

_BY_CODE: dict[str, LocationHint] = {h.code: h for h in ALL}
