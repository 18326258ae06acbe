"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Fira Code', 'Consolas', monospace;
                font-size: 14px;
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 2px solid {ColorPalette.GRID_BORDER.get(theme)};
                border-radius: 4px;
                padding: 6px 16px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
                color: {ColorPalette.TEXT_DISABLED.get(theme)};
            }}
            QSpinBox, QComboBox {{
                border: 1px solid {ColorPalette.GRID_BORDER.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
        """

    @staticmethod
    def get_title_label_style() -> str:
        return "font-size: 24pt; font-weight: bold;"

    @staticmethod
    def get_question_label_style() -> str:
        return "font-size: 20pt; font-weight: bold;"

    @staticmethod
    def get_result_button_style(theme: Theme, correct: bool) -> str:
        color = ColorPalette.SUCCESS if correct else ColorPalette.ERROR
        return (
            f"background-color: {color.get(theme)}; color: #FFFFFF; "
            "font-size: 14pt; padding: 8px 16px;"
        )

    @staticmethod
    def get_hint_label_style() -> str:
        return "font-size: 9pt;"
