import math
from collections.abc import Mapping
from typing import NamedTuple

from statscene.render.color import normalize_color
from statscene.render.config import RenderConfig
from statscene.render.models import Layer
from statscene.render.models import LanguageStat
from statscene.render.models import PathShape
from statscene.render.models import Point2D
from statscene.render.models import PolygonShape
from statscene.render.models import Shape
from statscene.render.models import TextShape
from statscene.render.models import TextStyle
from statscene.render.models import fmt_number


FULL_TURN = 2 * math.pi


class DonutSlice(NamedTuple):
    name: str
    color: str
    start: float
    sweep: float


def ordered_languages(
    languages: Mapping[str, LanguageStat], top_n: int | None = None
) -> list[tuple[str, LanguageStat]]:
    """Sort by descending size, ties by name, then keep the first top_n."""

    ordered = sorted(languages.items(), key=lambda item: (-item[1].size, item[0]))
    if top_n is not None:
        ordered = ordered[:top_n]
    return ordered


def donut_slices(
    languages: Mapping[str, LanguageStat], top_n: int | None = None
) -> list[DonutSlice]:
    """Lay out proportional slices starting at angle 0.

    Returns an empty list when the total size is zero.
    """

    ordered = ordered_languages(languages, top_n)
    total = sum(stat.size for _, stat in ordered)
    if total == 0:
        return []

    slices: list[DonutSlice] = []
    current_angle = 0.0
    for name, stat in ordered:
        sweep = stat.size / total * FULL_TURN
        slices.append(
            DonutSlice(name, normalize_color(stat.color), current_angle, sweep)
        )
        current_angle += sweep
    return slices


def _polar(radius: float, angle: float) -> str:
    x = fmt_number(math.cos(angle) * radius)
    y = fmt_number(math.sin(angle) * radius)
    return f"{x} {y}"


def slice_path(item: DonutSlice, outer: float, inner: float) -> str:
    """Path data of one annulus segment centered on the origin."""

    o, i = fmt_number(outer), fmt_number(inner)
    end = item.start + item.sweep
    outer_start, outer_end = _polar(outer, item.start), _polar(outer, end)
    large_arc = 1 if item.sweep > math.pi else 0

    if large_arc and outer_start == outer_end:
        # Arc endpoints coincide once rounded; draw the whole ring instead.
        return (
            f"M {o} 0 A {o} {o} 0 1 1 -{o} 0 A {o} {o} 0 1 1 {o} 0 Z "
            f"M {i} 0 A {i} {i} 0 1 0 -{i} 0 A {i} {i} 0 1 0 {i} 0 Z"
        )

    return (
        f"M {outer_start} "
        f"A {o} {o} 0 {large_arc} 1 {outer_end} "
        f"L {_polar(inner, end)} "
        f"A {i} {i} 0 {large_arc} 0 {_polar(inner, item.start)} Z"
    )


def legend_entry(
    index: int, name: str, color: str, config: RenderConfig
) -> list[Shape]:
    """Swatch and label for legend position index, tiled column by column."""

    column, row = divmod(index, config.legend_rows)
    x = config.legend_x + column * config.legend_column_width
    y = config.legend_y + row * config.legend_row_height
    size = config.swatch_size

    swatch = PolygonShape(
        points=(
            Point2D(x, y),
            Point2D(x + size, y),
            Point2D(x + size, y + size),
            Point2D(x, y + size),
        ),
        fill=color,
    )
    label = TextShape(
        position=Point2D(x + size + 6, y + size - 2),
        content=name,
        style=TextStyle(fill=config.text_color, font_size=config.legend_font_size),
    )
    return [swatch, label]


def render_donut(
    languages: Mapping[str, LanguageStat], config: RenderConfig
) -> Layer:
    """Render the language donut and its legend.

    Empty or all-zero input gives an empty layer.
    """

    shapes: list[Shape] = []
    for index, item in enumerate(donut_slices(languages, config.top_languages)):
        shapes.append(
            PathShape(
                d=slice_path(item, config.outer_radius, config.inner_radius),
                fill=item.color,
            )
        )
        shapes.extend(legend_entry(index, item.name, item.color, config))

    return Layer(name="donut", offset=config.donut_offset, shapes=tuple(shapes))
