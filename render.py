import plotly.graph_objects as go

import constants
from grid import ENDPOINTS, Kind
from result import VISITED

KIND_ORDER = [Kind.EMPTY, Kind.OBSTACLE, Kind.VISITED, Kind.PATH, Kind.START, Kind.TARGET]
KIND_CODE = {kind: i for i, kind in enumerate(KIND_ORDER)}


def kind_colorscale():
    """Discrete colorscale: one flat band per kind, in KIND_ORDER."""
    n = len(KIND_ORDER)
    scale = []
    for i, kind in enumerate(KIND_ORDER):
        color = constants.KIND_COLORS[kind.value]
        scale.append([i / n, color])
        scale.append([(i + 1) / n, color])
    return scale


def kind_matrix(grid, result=None):
    """Matrix of kind codes; a result's visited/path cells are overlaid without touching the grid."""
    z = [[KIND_CODE[grid.kind((r, c))] for c in range(grid.cols)] for r in range(grid.rows)]
    if result is not None:
        for phase, cell in result.playback():
            if grid.kind(cell.position) in ENDPOINTS:
                continue
            z[cell.row][cell.col] = KIND_CODE[Kind.VISITED if phase == VISITED else Kind.PATH]
    return z


def draw_path(fig, result):
    """Draw the result path as a line through cell centres

    Args:
        fig: Plotly figure object
        result: search Result
    """
    if not result.path:
        return
    fig.add_trace(go.Scatter(
        x=[cell.col for cell in result.path],
        y=[cell.row for cell in result.path],
        mode='lines',
        line=dict(width=4, color=constants.PATH_LINE_COLOR),
        name='path',
        showlegend=False
    ))


def draw_endpoints(fig, grid):
    for label, pos in (("S", grid.start), ("T", grid.target)):
        if pos is None:
            continue
        fig.add_trace(go.Scatter(
            x=[pos.col],
            y=[pos.row],
            mode='text',
            text=[label],
            textfont=dict(size=14, color='white'),
            name='start' if label == "S" else 'target',
            showlegend=False
        ))


def grid_figure(grid, result=None, title=None):
    """Build a plotly figure of the grid, optionally with a search result overlaid."""
    fig = go.Figure()
    fig.add_trace(go.Heatmap(
        z=kind_matrix(grid, result),
        colorscale=kind_colorscale(),
        zmin=-0.5,
        zmax=len(KIND_ORDER) - 0.5,
        showscale=False,
        xgap=1,
        ygap=1,
        hoverinfo='x+y'
    ))
    if result is not None:
        draw_path(fig, result)
    draw_endpoints(fig, grid)

    if title is None and result is not None:
        status = f"path {result.path_length}" if result.found else "no path"
        title = f"{result.algorithm}: visited {result.visited_count}, {status}"
    fig.update_layout(
        title=title,
        plot_bgcolor='white',
        margin=dict(l=10, r=10, t=40, b=10),
    )
    fig.update_xaxes(showgrid=False, zeroline=False, showticklabels=False)
    fig.update_yaxes(showgrid=False, zeroline=False, showticklabels=False,
                     autorange='reversed', scaleanchor='x')
    return fig


def save_figure(fig, path):
    fig.write_html(path)
