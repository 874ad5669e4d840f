
"""Piece catalog, active piece model, rotation, spawn"""
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

Offset = Tuple[int, int]
Shape = Tuple[Offset, ...]

class Anchor(NamedTuple):
    x: int
    y: int

@dataclass(frozen=True)
class CatalogEntry:
    name: str
    shape: Shape
    color: str

CATALOG: Tuple[CatalogEntry, ...] = (
    CatalogEntry("Square", ((1,0),(0,0),(0,1),(1,1)), "yellow"),
    CatalogEntry("T",      ((0,1),(1,1),(2,1),(1,0)), "purple"),
    CatalogEntry("L",      ((0,0),(1,0),(2,0),(2,1)), "blue"),
    CatalogEntry("J",      ((0,1),(1,1),(2,1),(2,0)), "orange"),
    CatalogEntry("Z",      ((0,0),(1,0),(1,1),(2,1)), "green"),
    CatalogEntry("S",      ((0,1),(1,1),(1,0),(2,0)), "red"),
    CatalogEntry("T-down", ((0,1),(1,1),(2,1),(1,2)), "cyan"),
    CatalogEntry("Line",   ((0,0),(1,0),(2,0),(3,0)), "magenta"),
)

def color_for(kind: int) -> str:
    # kind 0 is the empty cell and has no color
    return CATALOG[kind - 1].color

@dataclass(frozen=True)
class Piece:
    shape: Shape
    kind: int
    image_index: Optional[int] = None

    @property
    def color(self) -> str:
        return color_for(self.kind)

    @staticmethod
    def from_catalog(index: int, image_index: Optional[int] = None) -> "Piece":
        return Piece(CATALOG[index].shape, index + 1, image_index)

# rotation

def rotate(piece: Piece) -> Piece:
    """Quarter turn about the shape's local origin; the input is left as is."""
    return Piece(tuple((-y, x) for x, y in piece.shape), piece.kind, piece.image_index)

def spawn_piece(rng, image_count: int = 0) -> Piece:
    index = rng.index(len(CATALOG))
    image_index = rng.index(image_count) if image_count > 0 else None
    return Piece.from_catalog(index, image_index)
