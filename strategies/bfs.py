from collections import deque

from strategies.common import admit_first_discovery, expand


def _pop_oldest(frontier, grid):
    return frontier.popleft()


def run_bfs(grid, start, target):
    """Breadth-First Search: FIFO frontier, guarantees the fewest steps."""
    return expand(grid, start, target, deque(), _pop_oldest, admit_first_discovery, "bfs")
