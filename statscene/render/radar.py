import math
from collections.abc import Sequence

from statscene.render.config import RenderConfig
from statscene.render.models import METRIC_LABELS
from statscene.render.models import Layer
from statscene.render.models import Point2D
from statscene.render.models import PolygonShape
from statscene.render.models import Shape
from statscene.render.models import TextShape
from statscene.render.models import TextStyle


def axis_angle(index: int) -> float:
    """Angle of spoke index; spoke 0 points up."""

    return math.radians(index * 72.0 - 90.0)


def radar_scale(value: int, divisor: float = 4.0) -> float:
    """Compress a count into [0, 1] with log10(value + 1) / divisor.

    With the default divisor values near 9999 saturate the scale.
    """

    if value < 0:
        raise ValueError(f"radar metrics must be non-negative, got {value}")
    return min(1.0, max(0.0, math.log10(value + 1) / divisor))


def pentagon(radius: float) -> tuple[Point2D, ...]:
    return tuple(
        Point2D(math.cos(axis_angle(i)) * radius, math.sin(axis_angle(i)) * radius)
        for i in range(len(METRIC_LABELS))
    )


def render_radar(metrics: Sequence[int], config: RenderConfig) -> Layer:
    if len(metrics) != len(METRIC_LABELS):
        raise ValueError(
            f"radar needs exactly {len(METRIC_LABELS)} metrics, got {len(metrics)}"
        )

    shapes: list[Shape] = [
        PolygonShape(
            points=pentagon(config.max_radius * level),
            fill="none",
            stroke=config.grid_color,
        )
        for level in config.grid_levels
    ]

    label_style = TextStyle(fill=config.text_color, font_size=config.radar_font_size)
    data_points: list[Point2D] = []
    for index, (value, label) in enumerate(zip(metrics, METRIC_LABELS)):
        angle = axis_angle(index)
        radius = radar_scale(value, config.log_divisor) * config.max_radius
        data_points.append(Point2D(math.cos(angle) * radius, math.sin(angle) * radius))
        shapes.append(
            TextShape(
                position=Point2D(
                    math.cos(angle) * config.label_radius - config.label_shift,
                    math.sin(angle) * config.label_radius,
                ),
                content=label,
                style=label_style,
            )
        )

    shapes.append(
        PolygonShape(
            points=tuple(data_points),
            fill=config.data_fill,
            stroke=config.data_stroke,
            stroke_width=config.data_stroke_width,
        )
    )
    return Layer(name="radar", offset=config.radar_offset, shapes=tuple(shapes))
