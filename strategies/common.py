import logging

from result import Result

logger = logging.getLogger(__name__)


def manhattan(a, b):
    """Manhattan distance between (row, col) pairs a and b."""
    (r1, c1), (r2, c2) = a, b
    return abs(r1 - r2) + abs(c1 - c2)


def heuristic(grid, index, target):
    """Manhattan distance from arena index to target index."""
    return manhattan(divmod(index, grid.cols), divmod(target, grid.cols))


def step_cost(grid, current):
    """Cost of reaching a neighbour of ``current``; the start (None) costs 0."""
    return 0 if current is None else grid.g[current] + 1


def pop_lowest(frontier, scores):
    """Remove and return the frontier entry with the lowest score.

    Ties go to the entry admitted earliest (lowest list index).
    """
    best = 0
    for i in range(1, len(frontier)):
        if scores[frontier[i]] < scores[frontier[best]]:
            best = i
    return frontier.pop(best)


def admit_first_discovery(grid, frontier, current, neighbor, target):
    """Admit a cell only the first time it is seen (its g is still infinite)."""
    if grid.g[neighbor] != float('inf'):
        return False
    grid.g[neighbor] = step_cost(grid, current)
    grid.predecessor[neighbor] = current
    frontier.append(neighbor)
    return True


def reconstruct_path(grid, current):
    """Follows predecessor links back from ``current``; returns indices start -> current."""
    path = [current]
    while grid.predecessor[current] is not None:
        current = grid.predecessor[current]
        path.append(current)
    path.reverse()
    return path


def expand(grid, start, target, frontier, pop, admit, algorithm=""):
    """Shared expansion loop for every strategy.

    Args:
        grid: Grid whose scratch arrays have been reset
        start, target: (row, col) positions
        frontier: empty container with ``append`` (deque or list)
        pop: ``pop(frontier, grid) -> index`` selection rule
        admit: ``admit(grid, frontier, current, neighbor, target)`` admission rule;
            called with ``current=None`` to seed the start cell
        algorithm: name recorded on the result
    Returns:
        Result with the expansion order and the reconstructed path
    """
    start_idx = grid.index(start)
    target_idx = grid.index(target)
    logger.debug("%s: searching %s -> %s on %r", algorithm, start, target, grid)

    closed = set()
    visited = []
    admit(grid, frontier, None, start_idx, target_idx)

    while frontier:
        current = pop(frontier, grid)
        closed.add(current)
        visited.append(current)

        # Goal test at pop time
        if current == target_idx:
            path = reconstruct_path(grid, current)
            logger.debug("%s: found path of %d cells after %d expansions",
                         algorithm, len(path), len(visited))
            return _package(grid, path, visited, True, algorithm)

        for neighbor in grid.neighbor_indices(current):
            if grid.is_obstacle_at(neighbor) or neighbor in closed:
                continue
            admit(grid, frontier, current, neighbor, target_idx)

    logger.debug("%s: frontier exhausted after %d expansions, no path", algorithm, len(visited))
    return _package(grid, [], visited, False, algorithm)


def _package(grid, path, visited, found, algorithm):
    return Result(
        path=tuple(grid.cell_at(i) for i in path),
        visited=tuple(grid.cell_at(i) for i in visited),
        found=found,
        algorithm=algorithm,
    )
