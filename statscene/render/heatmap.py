from collections.abc import Sequence

from statscene.render.color import darken
from statscene.render.color import normalize_color
from statscene.render.config import RenderConfig
from statscene.render.models import CalendarCell
from statscene.render.models import Layer
from statscene.render.models import PolygonShape
from statscene.render.projection import project


def bar_height(count: int, config: RenderConfig) -> float:
    """Return bar height for a day; zero days still get a thin slab."""

    return max(count * config.height_scale, config.min_height)


def season_color(week_index: int, count: int, config: RenderConfig) -> str:
    """Pick a palette color from the quarter bucket of a week index.

    Buckets are fixed week ranges, not calendar quarters.
    """

    if count == 0:
        return config.empty_color

    for boundary, color in zip(config.season_boundaries, config.season_colors):
        if week_index < boundary:
            return color
    return config.season_colors[-1]


def cell_color(week_index: int, cell: CalendarCell, config: RenderConfig) -> str:
    """Own color of the cell when set, malformed ones replaced by the fallback."""

    if cell.color is not None:
        return normalize_color(cell.color)
    return season_color(week_index, cell.count, config)


def prism_faces(
    x: float, y: float, height: float, color: str, config: RenderConfig
) -> list[PolygonShape]:
    """Build the left, right and top faces of a unit prism at (x, y)."""

    top_back = project(x, y, height, config)
    top_left = project(x + 1, y, height, config)
    top_right = project(x, y + 1, height, config)
    top_front = project(x + 1, y + 1, height, config)
    bottom_left = project(x + 1, y, 0, config)
    bottom_right = project(x, y + 1, 0, config)
    bottom_front = project(x + 1, y + 1, 0, config)

    return [
        PolygonShape(
            points=(top_left, top_front, bottom_front, bottom_left),
            fill=darken(color, config.left_shade),
        ),
        PolygonShape(
            points=(top_right, top_front, bottom_front, bottom_right),
            fill=darken(color, config.right_shade),
        ),
        PolygonShape(
            points=(top_back, top_left, top_front, top_right),
            fill=color,
        ),
    ]


def render_heatmap(
    grid: Sequence[Sequence[CalendarCell]], config: RenderConfig
) -> Layer:
    """Render the calendar as isometric bars, one prism per present day.

    Weeks are drawn outer and days inner so later prisms overlap earlier
    ones.
    """

    shapes: list[PolygonShape] = []
    for week_index, week in enumerate(grid):
        for day_index, cell in enumerate(week):
            shapes.extend(
                prism_faces(
                    float(week_index),
                    float(day_index),
                    bar_height(cell.count, config),
                    cell_color(week_index, cell, config),
                    config,
                )
            )

    return Layer(name="heatmap", offset=config.heatmap_offset, shapes=tuple(shapes))
