import math

from statscene.render.config import RenderConfig
from statscene.render.models import Point2D


def project(x: float, y: float, z: float, config: RenderConfig) -> Point2D:
    """Map a grid coordinate and a height to isometric canvas coordinates.

    Larger ``z`` moves the point up the canvas.
    """

    angle = math.radians(config.angle_degrees)
    screen_x = config.center_x + (x - y) * math.cos(angle) * config.scale
    screen_y = config.center_y + (x + y) * math.sin(angle) * config.scale - z
    return Point2D(screen_x, screen_y)
