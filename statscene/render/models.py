from typing import Annotated
from typing import Literal
from typing import NamedTuple

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


METRIC_LABELS = ("Commit", "Issue", "PullReq", "Review", "Repo")


class Point2D(NamedTuple):
    x: float
    y: float


class CalendarCell(BaseModel):
    """One day of the contribution calendar.

    A missing color means the heatmap picks one from its seasonal palette.
    """

    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=0)
    color: str | None = None


CalendarGrid = list[list[CalendarCell]]


class LanguageStat(BaseModel):
    """Aggregated byte size of one language across repositories."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(ge=0)
    color: str


CategoryStat = dict[str, LanguageStat]

MetricVector = Annotated[
    list[Annotated[int, Field(ge=0)]], Field(min_length=5, max_length=5)
]


class Summary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_contributions: int = Field(ge=0)
    total_stars: int = Field(ge=0)
    total_forks: int = Field(ge=0)


class StatsRecord(BaseModel):
    """Already-parsed activity statistics consumed by the scene composer."""

    model_config = ConfigDict(frozen=True)

    calendar: CalendarGrid = Field(default_factory=list)
    languages: CategoryStat = Field(default_factory=dict)
    metrics: MetricVector
    summary: Summary


class TextStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    fill: str
    font_size: float
    font_weight: str | None = None
    anchor: str | None = None


class PolygonShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["polygon"] = "polygon"
    points: tuple[Point2D, ...]
    fill: str
    stroke: str | None = None
    stroke_width: float | None = None


class PathShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["path"] = "path"
    d: str
    fill: str


class TextShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    position: Point2D
    content: str
    style: TextStyle


Shape = Annotated[PolygonShape | PathShape | TextShape, Field(discriminator="kind")]


class Layer(BaseModel):
    """Named group of shapes placed on the canvas under a translation offset."""

    model_config = ConfigDict(frozen=True)

    name: str
    offset: Point2D = Point2D(0.0, 0.0)
    shapes: tuple[Shape, ...] = ()

    def of_kind(self, kind: str) -> list[Shape]:
        return [shape for shape in self.shapes if shape.kind == kind]


class Scene(BaseModel):
    """Static scene handed to a vector serializer."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float
    background: str
    font_family: str
    layers: tuple[Layer, ...] = ()

    def layer(self, name: str) -> Layer:
        for layer in self.layers:
            if layer.name == name:
                return layer
        raise KeyError(name)


def fmt_number(value: float) -> str:
    """Format a coordinate for path data and markup.

    Values are rounded to 3 decimals, trailing zeros are stripped and
    negative zero is printed as ``0``.
    """

    rounded = round(float(value), 3)
    if rounded == 0:
        return "0"
    text = f"{rounded:.3f}".rstrip("0").rstrip(".")
    return text
