"""Rendering: document -> scene primitives -> SVG."""

from __future__ import annotations

from .layout import render_document
from .scene import PathShape, Scene, Segment, Style
from .svg import save_svg, scene_to_svg

__all__ = ["render_document", "PathShape", "Scene", "Segment", "Style", "save_svg", "scene_to_svg"]
