from strategies.common import expand, heuristic, pop_lowest, step_cost


def _pop_lowest_f(frontier, grid):
    return pop_lowest(frontier, grid.f)


def _admit(grid, frontier, current, neighbor, target):
    """Admit, or update in place, whenever the tentative g improves."""
    tentative_g = step_cost(grid, current)
    if tentative_g >= grid.g[neighbor]:
        return
    grid.g[neighbor] = tentative_g
    grid.h[neighbor] = heuristic(grid, neighbor, target)
    grid.f[neighbor] = tentative_g + grid.h[neighbor]
    grid.predecessor[neighbor] = current
    if neighbor not in frontier:
        frontier.append(neighbor)


def run_astar(grid, start, target):
    """
    Performs A* search from start to target with unit step cost.
    Args:
        grid: Grid with freshly reset scratch state
        start: (row, col) of the start cell
        target: (row, col) of the target cell
    Returns:
        Result; the path is shortest because Manhattan distance never
        overestimates on a 4-connected unit-cost grid
    """
    return expand(grid, start, target, [], _pop_lowest_f, _admit, "astar")
