from strategies.common import admit_first_discovery, expand, heuristic, pop_lowest


def _pop_lowest_h(frontier, grid):
    return pop_lowest(frontier, grid.h)


def _admit(grid, frontier, current, neighbor, target):
    if admit_first_discovery(grid, frontier, current, neighbor, target):
        # h is fixed when the cell is first admitted
        grid.h[neighbor] = heuristic(grid, neighbor, target)


def run_gbfs(grid, start, target):
    """Greedy Best-First Search using Manhattan distance to the target as heuristic.

    The open list is scanned every step for the lowest h; equal h values go to
    the cell admitted first.
    """
    return expand(grid, start, target, [], _pop_lowest_h, _admit, "greedy")
