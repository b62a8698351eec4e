from strategies.common import admit_first_discovery, expand


def _pop_newest(frontier, grid):
    return frontier.pop()


def run_dfs(grid, start, target):
    """Depth-First Search: LIFO frontier, no optimality guarantee.

    Neighbours are pushed up, down, left, right, so the right-hand neighbour
    of each expanded cell is explored first.
    """
    return expand(grid, start, target, [], _pop_newest, admit_first_discovery, "dfs")
