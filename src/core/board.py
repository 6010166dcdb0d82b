"""
Board representation for the falling-block game.
"""
from __future__ import annotations

import numpy as np
from typing import Iterable, Optional, Set, Tuple

from .pieces import Piece

# Pivot position where new pieces spawn (x, y)
START_POSITION: Tuple[int, int] = (4, 2)

HIGHLIGHT_CODE = 9


class Board:
    """
    Immutable game board.

    The board uses a read-only numpy array where:
    - 0 = empty cell
    - 1-7 = cell filled by a locked piece (its piece code)
    - 9 = cell of a completed row shown in a flash frame

    Rows are indexed top to bottom, columns left to right. Every operation
    that changes cells returns a new Board, so a board can be shared freely
    between search nodes.
    """

    N_ROWS = 22
    N_COLS = 10
    # The top rows are hidden spawn space and are not drawn
    ROWS_CUTOFF = 2

    def __init__(self, grid: Optional[np.ndarray] = None):
        """Initialize the board, optionally from an existing grid."""
        if grid is not None:
            values = np.asarray(grid)
            if values.ndim != 2 or 0 in values.shape:
                raise ValueError(f"Grid must be a non-empty 2D array, got shape {values.shape}")
            if not np.issubdtype(values.dtype, np.integer):
                raise ValueError(f"Grid cells must be integers, got {values.dtype}")
            if values.min() < 0 or values.max() > HIGHLIGHT_CODE:
                raise ValueError(f"Grid cells must be between 0 and {HIGHLIGHT_CODE}")
            grid = values.astype(np.int8)
        else:
            grid = np.zeros((self.N_ROWS, self.N_COLS), dtype=np.int8)
        grid.setflags(write=False)
        self.grid = grid

    @classmethod
    def empty(cls, n_rows: int = N_ROWS, n_cols: int = N_COLS) -> Board:
        return cls(np.zeros((n_rows, n_cols), dtype=np.int8))

    @property
    def n_rows(self) -> int:
        return self.grid.shape[0]

    @property
    def n_cols(self) -> int:
        return self.grid.shape[1]

    def piece_fits(self, piece: Piece, x: int, y: int) -> bool:
        """
        Check if a piece can occupy the given pivot position.

        Args:
            piece: The piece in its current orientation
            x: Pivot column
            y: Pivot row

        Returns:
            True if every cell is inside the board and empty
        """
        for cx, cy in piece.cells(x, y):
            if cx < 0 or cy < 0 or cx >= self.n_cols or cy >= self.n_rows:
                return False
            if self.grid[cy, cx]:
                return False
        return True

    def write_piece(self, piece: Piece, x: int, y: int) -> Board:
        """Return a copy of the board with the piece written into it."""
        grid = self.grid.copy()
        for cx, cy in piece.cells(x, y):
            if 0 <= cx < self.n_cols and 0 <= cy < self.n_rows:
                grid[cy, cx] = piece.code
        return Board(grid)

    def write_piece_behind(self, piece: Piece, x: int, y: int) -> Board:
        """Like write_piece, but only fills cells that are currently empty."""
        grid = self.grid.copy()
        for cx, cy in piece.cells(x, y):
            if 0 <= cx < self.n_cols and 0 <= cy < self.n_rows and not grid[cy, cx]:
                grid[cy, cx] = piece.code
        return Board(grid)

    def hard_drop_y(self, piece: Piece, x: int, y: int) -> int:
        """Lowest pivot row the piece reaches by falling straight down from (x, y)."""
        while self.piece_fits(piece, x, y + 1):
            y += 1
        return y

    def filled_row_indices(self) -> Set[int]:
        """Find all rows that are completely filled."""
        return set(np.where(np.all(self.grid != 0, axis=1))[0].tolist())

    def tower_height(self) -> int:
        """Number of rows from the bottom up to the highest filled cell."""
        occupied = np.flatnonzero(np.any(self.grid != 0, axis=1))
        if occupied.size == 0:
            return 0
        return self.n_rows - int(occupied[0])

    def highlight_rows(self, rows: Iterable[int]) -> Board:
        """Return a copy with the given rows marked for a flash frame."""
        grid = self.grid.copy()
        grid[sorted(rows), :] = HIGHLIGHT_CODE
        return Board(grid)

    def collapse_rows(self, rows: Iterable[int]) -> Board:
        """Remove the given rows and pad the top with empty rows."""
        rows = set(rows)
        if not rows:
            return self
        keep = [i for i in range(self.n_rows) if i not in rows]
        grid = np.zeros_like(self.grid)
        grid[self.n_rows - len(keep):, :] = self.grid[keep, :]
        return Board(grid)

    def get_filled_cells(self) -> int:
        """Return the count of filled cells."""
        return int(np.sum(self.grid != 0))

    def to_array(self) -> np.ndarray:
        """Return a writable copy of the grid as a numpy array."""
        return self.grid.copy()

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Board:
        """Create a Board from a numpy array."""
        return cls(arr)

    def __str__(self) -> str:
        """Return a string representation of the board."""
        lines = []
        lines.append("+" + "-" * (self.n_cols * 2 + 1) + "+")
        for row in self.grid:
            row_str = "| " + " ".join("#" if cell else "." for cell in row) + " |"
            lines.append(row_str)
        lines.append("+" + "-" * (self.n_cols * 2 + 1) + "+")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({self.n_rows}x{self.n_cols}, filled={self.get_filled_cells()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash((self.grid.shape, self.grid.tobytes()))
