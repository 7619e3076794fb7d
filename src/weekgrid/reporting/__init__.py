"""Renderers that turn compiled grids into HTML or console tables."""

from .console import CONTINUATION, grid_table, summary_table
from .html import render_document_html, render_grid_html, render_summary_html

__all__ = [
    "CONTINUATION",
    "grid_table",
    "summary_table",
    "render_grid_html",
    "render_summary_html",
    "render_document_html",
]
