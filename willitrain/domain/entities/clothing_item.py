"""Clothing item entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClothingItem:
    """Piece of clothing or gear suggested for the estimated conditions."""

    id: str
    name: str
    description: str
    icon: str
    essential: bool = False

    def __str__(self) -> str:
        return self.name
