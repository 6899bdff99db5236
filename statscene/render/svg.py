import xml.etree.ElementTree as ET

from statscene.render.models import Layer
from statscene.render.models import PathShape
from statscene.render.models import PolygonShape
from statscene.render.models import Scene
from statscene.render.models import Shape
from statscene.render.models import TextShape
from statscene.render.models import fmt_number


SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _points(shape: PolygonShape) -> str:
    return " ".join(f"{fmt_number(p.x)},{fmt_number(p.y)}" for p in shape.points)


def _shape_element(shape: Shape) -> ET.Element:
    if isinstance(shape, PolygonShape):
        element = ET.Element("polygon", points=_points(shape), fill=shape.fill)
        if shape.stroke is not None:
            element.set("stroke", shape.stroke)
        if shape.stroke_width is not None:
            element.set("stroke-width", fmt_number(shape.stroke_width))
        return element

    if isinstance(shape, PathShape):
        return ET.Element("path", d=shape.d, fill=shape.fill)

    if isinstance(shape, TextShape):
        element = ET.Element(
            "text",
            x=fmt_number(shape.position.x),
            y=fmt_number(shape.position.y),
            fill=shape.style.fill,
        )
        element.set("font-size", fmt_number(shape.style.font_size))
        if shape.style.font_weight is not None:
            element.set("font-weight", shape.style.font_weight)
        if shape.style.anchor is not None:
            element.set("text-anchor", shape.style.anchor)
        element.text = shape.content
        return element

    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def _layer_element(layer: Layer) -> ET.Element:
    group = ET.Element("g", id=layer.name)
    if layer.offset.x or layer.offset.y:
        group.set(
            "transform",
            f"translate({fmt_number(layer.offset.x)}, {fmt_number(layer.offset.y)})",
        )
    for shape in layer.shapes:
        group.append(_shape_element(shape))
    return group


def to_svg(scene: Scene) -> str:
    """Serialize a scene to an SVG document string."""

    root = ET.Element(
        "svg",
        xmlns=SVG_NAMESPACE,
        viewBox=f"0 0 {fmt_number(scene.width)} {fmt_number(scene.height)}",
        style=f"background:{scene.background}; font-family: {scene.font_family};",
    )
    for layer in scene.layers:
        root.append(_layer_element(layer))
    return ET.tostring(root, encoding="unicode")
