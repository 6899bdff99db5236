from typing import Self

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

from statscene.render.models import Point2D


class RenderConfig(BaseModel):
    """Canvas geometry and palette shared by every renderer.

    Defaults reproduce the 1400x1000 profile card layout. Pass a modified
    copy (``config.model_copy(update={...})``) to render other sizes.
    """

    model_config = ConfigDict(frozen=True)

    # Canvas
    width: float = 1400.0
    height: float = 1000.0
    background: str = "#ffffff"
    font_family: str = "sans-serif"
    text_color: str = "#586069"

    # Isometric projection
    center_x: float = 400.0
    center_y: float = 300.0
    scale: float = 20.0
    angle_degrees: float = 30.0

    # Heatmap
    heatmap_offset: Point2D = Point2D(0.0, 0.0)
    height_scale: float = Field(default=5.0, ge=0)
    min_height: float = Field(default=2.0, ge=0)
    left_shade: float = Field(default=0.8, gt=0, le=1)
    right_shade: float = Field(default=0.6, gt=0, le=1)
    empty_color: str = "#ebedf0"
    season_colors: tuple[str, str, str, str] = (
        "#c6e48b",
        "#f4e04d",
        "#a3a3a3",
        "#d1a3d1",
    )
    season_boundaries: tuple[int, int, int] = (13, 26, 39)

    # Donut
    donut_offset: Point2D = Point2D(180.0, 820.0)
    outer_radius: float = Field(default=90.0, gt=0)
    inner_radius: float = Field(default=60.0, ge=0)
    top_languages: int | None = Field(default=None, ge=1)
    legend_rows: int = Field(default=8, ge=1)
    legend_x: float = 120.0
    legend_y: float = -80.0
    legend_column_width: float = 140.0
    legend_row_height: float = 22.0
    swatch_size: float = 12.0
    legend_font_size: float = 14.0

    # Radar
    radar_offset: Point2D = Point2D(1150.0, 250.0)
    max_radius: float = Field(default=110.0, gt=0)
    grid_levels: tuple[float, ...] = (0.25, 0.5, 0.75, 1.0)
    grid_color: str = "#e1e4e8"
    data_fill: str = "rgba(46, 160, 67, 0.2)"
    data_stroke: str = "#2ea043"
    data_stroke_width: float = 2.0
    label_radius: float = 140.0
    label_shift: float = 25.0
    radar_font_size: float = 15.0
    log_divisor: float = Field(default=4.0, gt=0)

    # Footer
    footer_margin: float = 40.0
    footer_font_size: float = 24.0

    @model_validator(mode="after")
    def check_geometry(self) -> Self:
        if self.inner_radius >= self.outer_radius:
            raise ValueError("inner_radius must be smaller than outer_radius")
        if self.right_shade > self.left_shade:
            raise ValueError("right_shade must not exceed left_shade")
        first, second, third = self.season_boundaries
        if not 0 < first < second < third:
            raise ValueError("season_boundaries must be strictly increasing")
        return self


DEFAULT_CONFIG = RenderConfig()
