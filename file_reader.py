import constants
from grid import Grid, Kind

CHAR_TO_KIND = {
    constants.CHAR_EMPTY: Kind.EMPTY,
    constants.CHAR_START: Kind.START,
    constants.CHAR_TARGET: Kind.TARGET,
    constants.CHAR_OBSTACLE: Kind.OBSTACLE,
}

KIND_TO_CHAR = {
    Kind.EMPTY: constants.CHAR_EMPTY,
    Kind.START: constants.CHAR_START,
    Kind.TARGET: constants.CHAR_TARGET,
    Kind.OBSTACLE: constants.CHAR_OBSTACLE,
    Kind.VISITED: constants.CHAR_VISITED,
    Kind.PATH: constants.CHAR_PATH,
}


def parse_grid_text(text):
    """Parses a grid map into a Grid object

    Args:
        text (string): One row per line using '.', 'S', 'T' and '#'. Blank lines
            and lines starting with ';' are ignored.

    Returns:
        grid: Grid with start, target and obstacles classified
    """
    rows = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith(constants.COMMENT_PREFIX):
            continue
        if rows and len(line) != len(rows[0][1]):
            raise ValueError(
                f"Line {line_no}: expected {len(rows[0][1])} columns, got {len(line)}")
        rows.append((line_no, line))

    if not rows:
        raise ValueError("Grid map is empty")

    grid = Grid(len(rows), len(rows[0][1]))
    for r, (line_no, line) in enumerate(rows):
        for c, ch in enumerate(line):
            kind = CHAR_TO_KIND.get(ch)
            if kind is None:
                raise ValueError(f"Line {line_no}: unknown cell character {ch!r}")
            if kind is Kind.EMPTY:
                continue
            if kind is Kind.START and grid.start is not None:
                raise ValueError(f"Line {line_no}: more than one start cell")
            if kind is Kind.TARGET and grid.target is not None:
                raise ValueError(f"Line {line_no}: more than one target cell")
            grid.set_classification((r, c), kind)
    return grid


def parse_grid_file(path):
    """Reads a grid map file (see parse_grid_text for the format)."""
    with open(path, "r", encoding="utf-8") as f:
        return parse_grid_text(f.read())


def format_grid(grid):
    """Render a grid back to its text form, including visited/path markers."""
    lines = []
    for r in range(grid.rows):
        lines.append("".join(KIND_TO_CHAR[grid.kind((r, c))] for c in range(grid.cols)))
    return "\n".join(lines)
