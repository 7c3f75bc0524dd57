"""
Plain records for the travel network: attractions, cities and routes.

Routes point at cities by their position in the graph's city list rather
than holding the City objects themselves.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Attraction:
    name: str
    description: str

    def describe(self) -> str:
        return f"Attraction: {self.name} ({self.description})"

    def display_info(self) -> None:
        print(self.describe())


@dataclass(frozen=True)
class City:
    name: str
    region: str
    attractions: Tuple[Attraction, ...] = field(default_factory=tuple)

    def describe(self) -> str:
        """Header line, attraction lines in insertion order, then a blank line."""
        lines = [f"City: {self.name} (Region: {self.region})", "Attractions:"]
        lines.extend(attraction.describe() for attraction in self.attractions)
        lines.append("")
        return "\n".join(lines) + "\n"

    def display_info(self) -> None:
        print(self.describe(), end="")


@dataclass(frozen=True)
class Route:
    start_index: int
    end_index: int
    distance_km: int
    travel_time_hours: int
    cost: int

    def __post_init__(self):
        for attr in ("distance_km", "travel_time_hours", "cost"):
            value = getattr(self, attr)
            # bool is an int subclass but never a valid measurement
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{attr} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{attr} must be non-negative, got {value}")

    def connects(self, i: int, j: int) -> bool:
        return {self.start_index, self.end_index} == {i, j}

    def attributes_line(self) -> str:
        return (
            f"Distance: {self.distance_km} KM, "
            f"Travel Time: {self.travel_time_hours} hours, "
            f"Cost: {self.cost} IDR"
        )

    def describe(self, cities: Sequence[City], reverse: bool = False) -> str:
        start, end = self.start_index, self.end_index
        if reverse:
            start, end = end, start
        return "\nRoute from " + cities[start].describe() + "to " + cities[end].describe()

    def display_info(self, cities: Sequence[City], reverse: bool = False) -> None:
        print(self.describe(cities, reverse=reverse), end="")
