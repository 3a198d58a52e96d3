#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/renderers/__init__.py
"""Renderers that turn document trees into output text."""

from mdplain.renderers.base import BaseRenderer
from mdplain.renderers.plaintext import RENDER_RULES, PlainTextRenderer, RenderRule, render

__all__ = ["BaseRenderer", "PlainTextRenderer", "RENDER_RULES", "RenderRule", "render"]
