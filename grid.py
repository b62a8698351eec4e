from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional

import pandas as pd

import constants
from exceptions import OutOfBoundsError
from result import VISITED


class Kind(Enum):
    """Classification of a grid cell."""

    EMPTY = "empty"
    START = "start"
    TARGET = "target"
    OBSTACLE = "obstacle"
    # Presentation markers, written after a result has been consumed
    VISITED = "visited"
    PATH = "path"


ENDPOINTS = (Kind.START, Kind.TARGET)
MARKERS = (Kind.VISITED, Kind.PATH)


class Position(NamedTuple):
    """A plain (row, col) coordinate."""

    row: int
    col: int


@dataclass(frozen=True)
class Cell:
    """Snapshot of one cell: classification plus the scratch values of the last run."""

    row: int
    col: int
    # Markers painted between runs do not change the identity of a snapshot
    kind: Kind = field(compare=False)
    g: float = math.inf
    h: float = 0.0
    f: float = math.inf
    predecessor: Optional[Position] = None

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)


class Grid:
    """Fixed-size 2D grid of cells.

    Classification persists across runs. The per-run scratch values (g, h, f,
    predecessor) live in flat arrays indexed by ``row * cols + col`` and are
    only meaningful during and right after a search.
    """

    def __init__(self, rows: int = constants.GRID_SIZE, cols: int = constants.GRID_SIZE):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        size = rows * cols
        self._kinds = [Kind.EMPTY] * size
        self._start: Optional[int] = None
        self._target: Optional[int] = None
        self.g = [math.inf] * size
        self.h = [0.0] * size
        self.f = [math.inf] * size
        self.predecessor: list[Optional[int]] = [None] * size

    def __repr__(self):
        return f"Grid({self.rows}x{self.cols}, start={self.start}, target={self.target})"

    def __len__(self):
        return self.rows * self.cols

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------

    def in_bounds(self, pos) -> bool:
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def index(self, pos) -> int:
        """Arena index of a position; raises OutOfBoundsError outside the grid."""
        if not self.in_bounds(pos):
            raise OutOfBoundsError(pos, self.rows, self.cols)
        row, col = pos
        return row * self.cols + col

    def position(self, index: int) -> Position:
        return Position(*divmod(index, self.cols))

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    @property
    def start(self) -> Optional[Position]:
        return None if self._start is None else self.position(self._start)

    @property
    def target(self) -> Optional[Position]:
        return None if self._target is None else self.position(self._target)

    def kind(self, pos) -> Kind:
        return self._kinds[self.index(pos)]

    def is_obstacle_at(self, index: int) -> bool:
        return self._kinds[index] is Kind.OBSTACLE

    def set_classification(self, pos, kind):
        """Apply a user classification to a cell.

        start/target are singletons: the previous holder is demoted to empty.
        obstacle toggles, and leaves start/target cells alone. empty erases.
        """
        kind = Kind(kind)
        idx = self.index(pos)
        current = self._kinds[idx]

        if kind in MARKERS:
            raise ValueError(f"{kind.value!r} is a presentation marker; use mark_result()")

        if kind is Kind.OBSTACLE:
            if current is Kind.OBSTACLE:
                self._kinds[idx] = Kind.EMPTY
            elif current not in ENDPOINTS:
                self._kinds[idx] = Kind.OBSTACLE
            return

        if kind is Kind.EMPTY:
            self._release(idx)
            self._kinds[idx] = Kind.EMPTY
            return

        slot = self._start if kind is Kind.START else self._target
        if slot == idx:
            return
        if slot is not None:
            self._kinds[slot] = Kind.EMPTY
            self._release(slot)
        # Overwriting the other endpoint clears it
        self._release(idx)
        self._kinds[idx] = kind
        if kind is Kind.START:
            self._start = idx
        else:
            self._target = idx

    def _release(self, idx):
        if self._start == idx:
            self._start = None
        if self._target == idx:
            self._target = None

    def clear(self):
        """Reset every cell to empty and forget start/target."""
        self._kinds = [Kind.EMPTY] * len(self)
        self._start = None
        self._target = None
        self.reset_scratch()

    def clear_markers(self):
        """Turn visited/path markers back into empty cells."""
        for idx, kind in enumerate(self._kinds):
            if kind in MARKERS:
                self._kinds[idx] = Kind.EMPTY

    def mark_result(self, result):
        """Paint a search result onto the grid: visited cells first, then the path.

        Start and target keep their classification.
        """
        for phase, cell in result.playback():
            idx = self.index(cell.position)
            if self._kinds[idx] in ENDPOINTS:
                continue
            self._kinds[idx] = Kind.VISITED if phase == VISITED else Kind.PATH

    # ------------------------------------------------------------------
    # Adjacency and scratch state
    # ------------------------------------------------------------------

    def neighbors(self, pos) -> list[Position]:
        """In-bounds 4-neighbours in canonical order: up, down, left, right."""
        return [self.position(i) for i in self.neighbor_indices(self.index(pos))]

    def neighbor_indices(self, index: int) -> list[int]:
        row, col = divmod(index, self.cols)
        out = []
        if row > 0:
            out.append(index - self.cols)  # up
        if row < self.rows - 1:
            out.append(index + self.cols)  # down
        if col > 0:
            out.append(index - 1)  # left
        if col < self.cols - 1:
            out.append(index + 1)  # right
        return out

    def reset_scratch(self):
        size = len(self)
        self.g = [math.inf] * size
        self.h = [0.0] * size
        self.f = [math.inf] * size
        self.predecessor = [None] * size

    def cell(self, pos) -> Cell:
        return self.cell_at(self.index(pos))

    def cell_at(self, index: int) -> Cell:
        row, col = divmod(index, self.cols)
        pred = self.predecessor[index]
        return Cell(
            row=row,
            col=col,
            kind=self._kinds[index],
            g=self.g[index],
            h=self.h[index],
            f=self.f[index],
            predecessor=None if pred is None else self.position(pred),
        )

    def to_frame(self) -> pd.DataFrame:
        """Classification matrix as a DataFrame of kind values."""
        data = [
            [self._kinds[r * self.cols + c].value for c in range(self.cols)]
            for r in range(self.rows)
        ]
        return pd.DataFrame(data, index=range(self.rows), columns=range(self.cols))
