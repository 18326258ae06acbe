"""Styling module for the Quetris application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
