"""Color palette for the game supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#000000",      # Black
        dark="#FFFFFF"        # White
    )

    TEXT_DISABLED = ThemeColors(
        light="#9CA3AF",
        dark="#6B7280"
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#000000"        # Black
    )

    # Grid
    GRID_BACKGROUND = ThemeColors(
        light="#FFFFFF",
        dark="#000000"
    )

    GRID_BORDER = ThemeColors(
        light="#1F2937",
        dark="#FFFFFF"
    )

    GRID_SEPARATOR = ThemeColors(
        light="#9CA3AF",      # drawn at 30% opacity
        dark="#FFFFFF"
    )

    COLUMN_HOVER = ThemeColors(
        light="#E5E7EB",
        dark="#1A1A1A"
    )

    # Catcher
    CATCHER_IDLE_BG = ThemeColors(
        light="#1F2937",
        dark="#FFFFFF"
    )

    CATCHER_IDLE_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#000000"
    )

    SUCCESS = ThemeColors(
        light="#16A34A",      # Green
        dark="#22C55E"
    )

    ERROR = ThemeColors(
        light="#DC2626",      # Red
        dark="#EF4444"
    )

    # Buttons
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#111827",
        dark="#FFFFFF"
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#000000"
    )

    BUTTON_DISABLED_BG = ThemeColors(
        light="#D1D5DB",
        dark="#4B5563"
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#374151",
        dark="#E5E7EB"
    )
