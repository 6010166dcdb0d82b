"""
Tetromino definitions and generation.

Each piece is a set of four (dx, dy) cell offsets around a pivot cell.
x grows to the right and y grows downwards, matching the board grid.
"""
from __future__ import annotations

import numpy as np
from typing import Dict, Iterator, List, Optional, Tuple
from dataclasses import dataclass

Coords = Tuple[Tuple[int, int], ...]


PIECE_COORDS: Dict[str, Coords] = {
    "I": ((-1, 0), (0, 0), (1, 0), (2, 0)),
    "L": ((1, -1), (-1, 0), (0, 0), (1, 0)),
    "J": ((-1, -1), (-1, 0), (0, 0), (1, 0)),
    "S": ((0, -1), (1, -1), (-1, 0), (0, 0)),
    "Z": ((-1, -1), (0, -1), (0, 0), (1, 0)),
    "O": ((0, -1), (1, -1), (0, 0), (1, 0)),
    "T": ((0, -1), (-1, 0), (0, 0), (1, 0)),
}

PIECE_NAMES: List[str] = list(PIECE_COORDS.keys())

# Grid value written for each piece; 0 is reserved for empty cells
PIECE_CODES: Dict[str, int] = {name: i + 1 for i, name in enumerate(PIECE_NAMES)}


@dataclass(frozen=True)
class Piece:
    """A falling piece in one orientation. Hashable, so it can key a visited set."""

    name: str
    coords: Coords

    @classmethod
    def from_name(cls, name: str) -> Piece:
        """Create a piece in its spawn orientation."""
        if name not in PIECE_COORDS:
            available = ", ".join(PIECE_NAMES)
            raise ValueError(f"Unknown piece: {name}. Available: {available}")
        return cls(name, PIECE_COORDS[name])

    @property
    def code(self) -> int:
        return PIECE_CODES[self.name]

    def rotate(self) -> Piece:
        """Rotate a quarter turn clockwise around the pivot. O pieces don't rotate."""
        if self.name == "O":
            return self
        return Piece(self.name, tuple((-y, x) for x, y in self.coords))

    def cells(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """Absolute (x, y) cells covered when the pivot sits at (x, y)."""
        for dx, dy in self.coords:
            yield x + dx, y + dy

    def __str__(self) -> str:
        xs = [dx for dx, _ in self.coords]
        ys = [dy for _, dy in self.coords]
        filled = set(self.coords)
        lines = []
        for dy in range(min(ys), max(ys) + 1):
            lines.append("".join(
                "#" if (dx, dy) in filled else " "
                for dx in range(min(xs), max(xs) + 1)
            ))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Piece({self.name}, coords={list(self.coords)})"


def all_orientations(piece: Piece) -> List[Piece]:
    """Distinct orientations reachable by rotating the piece."""
    orientations = [piece]
    current = piece.rotate()
    while current not in orientations:
        orientations.append(current)
        current = current.rotate()
    return orientations


class PieceGenerator:
    """
    Generates random pieces.

    The generator can be seeded for reproducible sequences,
    which is useful for testing and benchmarking.
    """

    def __init__(
        self,
        names: Optional[List[str]] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the piece generator.

        Args:
            names: Piece names to draw from. If None, uses all seven tetrominoes.
            seed: Random seed for reproducibility.
        """
        self.pieces = [Piece.from_name(name) for name in (names or PIECE_NAMES)]
        self.rng = np.random.default_rng(seed)

    def generate_one(self) -> Piece:
        """Generate a single random piece."""
        return self.pieces[self.rng.integers(len(self.pieces))]

    def generate_different(self, piece: Piece) -> Piece:
        """Generate a random piece of a different kind than the given one."""
        candidates = [p for p in self.pieces if p.name != piece.name]
        if not candidates:
            return piece
        return candidates[self.rng.integers(len(candidates))]
