"""Renderers for Tejat line records."""

from tejat.renderers.gemtext import render, render_line

__all__ = ["render", "render_line"]
