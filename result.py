from dataclasses import dataclass

import pandas as pd

VISITED = "visited"
PATH = "path"


@dataclass(frozen=True)
class Result:
    """Outcome of one search run.

    ``visited`` holds every expanded cell in expansion order, ``path`` runs
    start -> target inclusive and is empty when ``found`` is False.
    """

    path: tuple
    visited: tuple
    found: bool
    algorithm: str = ""

    @property
    def path_length(self):
        return len(self.path)

    @property
    def visited_count(self):
        return len(self.visited)

    @property
    def path_positions(self):
        return [cell.position for cell in self.path]

    @property
    def visited_positions(self):
        return [cell.position for cell in self.visited]

    def playback(self):
        """Yield (phase, cell) for every visited cell, then every path cell."""
        for cell in self.visited:
            yield VISITED, cell
        for cell in self.path:
            yield PATH, cell

    def to_frame(self):
        """Playback sequence as a DataFrame (step, phase, row, col, g, h, f)."""
        rows = [
            {
                "step": step,
                "phase": phase,
                "row": cell.row,
                "col": cell.col,
                "g": cell.g,
                "h": cell.h,
                "f": cell.f,
            }
            for step, (phase, cell) in enumerate(self.playback())
        ]
        return pd.DataFrame(rows, columns=["step", "phase", "row", "col", "g", "h", "f"])
