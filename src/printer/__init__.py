"""Worksheet printers for generated puzzles."""

from __future__ import annotations

from .pdf import export_pdf
from .text import render_text

__all__ = ["export_pdf", "render_text"]
