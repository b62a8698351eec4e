# Board size used by the interactive visualizer
GRID_SIZE = 20

# Method codes accepted on the command line, mapped to Algorithm values
METHOD_CODES = {
    'BFS': 'bfs',
    'DFS': 'dfs',
    'GBFS': 'greedy',
    'AS': 'astar',
}
DEFAULT_ALGORITHM = 'bfs'

# Grid file characters
CHAR_EMPTY = '.'
CHAR_START = 'S'
CHAR_TARGET = 'T'
CHAR_OBSTACLE = '#'
CHAR_VISITED = '+'
CHAR_PATH = '*'
COMMENT_PREFIX = ';'

# Plot colours per cell kind
KIND_COLORS = {
    'empty': '#ffffff',
    'obstacle': '#2d3436',
    'visited': '#74b9ff',
    'path': '#fdcb6e',
    'start': '#00b894',
    'target': '#d63031',
}
PATH_LINE_COLOR = 'red'
