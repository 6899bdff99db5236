import logging

from statscene.render.config import DEFAULT_CONFIG
from statscene.render.config import RenderConfig
from statscene.render.donut import render_donut
from statscene.render.heatmap import render_heatmap
from statscene.render.models import Layer
from statscene.render.models import Point2D
from statscene.render.models import Scene
from statscene.render.models import StatsRecord
from statscene.render.models import Summary
from statscene.render.models import TextShape
from statscene.render.models import TextStyle
from statscene.render.radar import render_radar


logger = logging.getLogger(__name__)


def footer_text(summary: Summary) -> str:
    return (
        f"{summary.total_contributions} contributions    "
        f"★ {summary.total_stars}    ⑂ {summary.total_forks}"
    )


def render_footer(summary: Summary, config: RenderConfig) -> Layer:
    label = TextShape(
        position=Point2D(config.width / 2, config.height - config.footer_margin),
        content=footer_text(summary),
        style=TextStyle(
            fill=config.text_color,
            font_size=config.footer_font_size,
            font_weight="bold",
            anchor="middle",
        ),
    )
    return Layer(name="footer", shapes=(label,))


def compose_scene(record: StatsRecord, config: RenderConfig = DEFAULT_CONFIG) -> Scene:
    """Place the heatmap, donut, radar and footer layers on one canvas.

    Layer offsets come from config; nothing is laid out dynamically.
    """

    layers = (
        render_heatmap(record.calendar, config),
        render_donut(record.languages, config),
        render_radar(record.metrics, config),
        render_footer(record.summary, config),
    )
    logger.debug(
        "Composed scene with %s",
        ", ".join(f"{layer.name}={len(layer.shapes)}" for layer in layers),
    )
    return Scene(
        width=config.width,
        height=config.height,
        background=config.background,
        font_family=config.font_family,
        layers=layers,
    )
