"""Data items stored in graph vertices, and the city item with its distance."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Iterable

EARTH_RADIUS_KM = 6378.0


def key_of(item: Any) -> Any:
    """Return the key of a vertex item.

    Items that define a ``key()`` method are keyed by its result; any other
    value (an int, a string, a single character) is its own key.
    """
    key = getattr(item, "key", None)
    if callable(key):
        return key()
    return item


@total_ordering
@dataclass(eq=False)
class City:
    """A named place on the Earth's surface.

    Cities compare, order and hash by name alone.
    """

    name: str = ""
    latitude: float = field(default=0.0)
    longitude: float = field(default=0.0)

    def key(self) -> str:
        """Return the city's key: its name."""
        return self.name

    @classmethod
    def parse(cls, tokens: Iterable[str]) -> "City":
        """Read a city from three tokens: name, latitude and longitude.

        Only three tokens are taken when ``tokens`` is an iterator.  Raises
        ValueError if tokens are missing or the coordinates are not numbers.
        """
        stream = iter(tokens)
        try:
            name = next(stream)
            latitude = float(next(stream))
            longitude = float(next(stream))
        except StopIteration:
            raise ValueError("incomplete city data") from None
        return cls(name, latitude, longitude)

    def __str__(self) -> str:
        return f"{self.name} {self.latitude:g} {self.longitude:g}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, City):
            return self.name == other.name
        return NotImplemented

    def __lt__(self, other: "City") -> bool:
        if isinstance(other, City):
            return self.name < other.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)


def distance(source: City, destination: City) -> float:
    """Return the great-circle distance in kilometres between two cities."""
    dif_latitude = math.radians(destination.latitude - source.latitude)
    dif_longitude = math.radians(destination.longitude - source.longitude)
    a = (
        math.sin(dif_latitude / 2.0) ** 2
        + math.cos(math.radians(source.latitude))
        * math.cos(math.radians(destination.latitude))
        * math.sin(dif_longitude / 2.0) ** 2
    )
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return c * EARTH_RADIUS_KM