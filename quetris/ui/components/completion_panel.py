"""Component shown once every question of a level was answered."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from quetris.constants.ui_constants import (
    BACK_TO_LEVELS_BUTTON,
    COMPLETED_MESSAGE_TEMPLATE,
    COMPLETED_TITLE,
    SCORE_TEMPLATE,
)
from quetris.core.game_engine import QuizGameEngine
from quetris.core.input_arbiter import GameAction
from quetris.styling.color_palette import ColorPalette, Theme
from quetris.styling.styles import Styles


class CompletionPanel(QWidget):
    def __init__(
        self,
        engine: QuizGameEngine,
        on_action: Callable[[GameAction], bool],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.engine = engine
        self.on_action = on_action
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel(COMPLETED_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.back_button = QPushButton(BACK_TO_LEVELS_BUTTON, self)
        self.back_button.setFocusPolicy(Qt.NoFocus)
        self.back_button.clicked.connect(lambda: self.on_action(GameAction.CONFIRM))
        button_row.addWidget(self.back_button)
        button_row.addStretch()
        layout.addLayout(button_row)
        layout.addStretch()

    def set_theme(self, theme: Theme) -> None:
        self.title_label.setStyleSheet(
            f"{Styles.get_title_label_style()} color: {ColorPalette.SUCCESS.get(theme)};"
        )
        self.back_button.setStyleSheet(Styles.get_result_button_style(theme, correct=True))

    def refresh(self) -> None:
        level = self.engine.current_level()
        title = level.title if level else ""
        self.message_label.setText(COMPLETED_MESSAGE_TEMPLATE.format(title=title))
        self.score_label.setText(SCORE_TEMPLATE.format(score=self.engine.session.score))
