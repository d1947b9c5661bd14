"""SVG output for scenes, built with :mod:`xml.etree.ElementTree`."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from saga.core.storage import write_text

from .scene import PathShape, Scene, Segment, Style

SVG_NS = "http://www.w3.org/2000/svg"


def _num(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _path_data(shape: PathShape) -> str:
    head, *rest = shape.points
    parts = [f"M{_num(head[0])},{_num(head[1])}"]
    parts.extend(f"L{_num(x)},{_num(y)}" for x, y in rest)
    if shape.closed:
        parts.append("z")
    return " ".join(parts)


def _style_attrs(style: Style) -> dict[str, str]:
    return {
        "fill": style.fill if style.fill is not None else "none",
        "stroke": style.stroke,
        "stroke-width": _num(style.stroke_width),
    }


def scene_to_element(scene: Scene) -> ET.Element:
    svg = ET.Element(
        "svg",
        xmlns=SVG_NS,
        width=f"{_num(scene.width)}px",
        height=f"{_num(scene.height)}px",
        viewBox=f"0 0 {_num(scene.width)} {_num(scene.height)}",
    )
    for shape in scene.shapes:
        if isinstance(shape, PathShape):
            if shape.points:
                ET.SubElement(svg, "path", d=_path_data(shape), **_style_attrs(shape.style))
        elif isinstance(shape, Segment):
            ET.SubElement(
                svg,
                "line",
                x1=_num(shape.start[0]),
                y1=_num(shape.start[1]),
                x2=_num(shape.end[0]),
                y2=_num(shape.end[1]),
                **_style_attrs(shape.style),
            )
    return svg


def scene_to_svg(scene: Scene) -> str:
    """Serialize ``scene`` to an SVG document string."""
    body = ET.tostring(scene_to_element(scene), encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"


def save_svg(scene: Scene, path: Path) -> Path:
    write_text(path, scene_to_svg(scene))
    return path


__all__ = ["SVG_NS", "scene_to_element", "scene_to_svg", "save_svg"]
