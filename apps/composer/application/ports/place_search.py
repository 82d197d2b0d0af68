"""Place search port for location autocomplete."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PlaceSuggestion:
    place_name: str
    address: str
    latitude: float
    longitude: float

    @property
    def label(self) -> str:
        """Text written into the draft's location field."""
        if self.address and self.address != self.place_name:
            return f"{self.place_name}, {self.address}"
        return self.place_name


class PlaceSearchPort(ABC):
    @abstractmethod
    async def suggest(self, query: str, size: int = 5) -> list[PlaceSuggestion]:
        ...

    @abstractmethod
    async def close(self) -> None:
        ...
