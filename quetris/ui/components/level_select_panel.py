"""Component for browsing levels before a session starts."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from quetris.constants.ui_constants import (
    LEVEL_POSITION_TEMPLATE,
    LOADING_BUTTON,
    NEXT_LEVEL_BUTTON,
    PLAY_BUTTON,
    PREV_LEVEL_BUTTON,
)
from quetris.core.game_engine import QuizGameEngine
from quetris.core.input_arbiter import GameAction
from quetris.styling.styles import Styles


class LevelSelectPanel(QWidget):
    """Level title, prev/next navigation and the Play button."""

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

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_label_style())
        layout.addWidget(self.title_label)

        nav_row = QHBoxLayout()
        nav_row.addStretch()
        self.prev_button = QPushButton(PREV_LEVEL_BUTTON, self)
        self.prev_button.setFocusPolicy(Qt.NoFocus)
        self.prev_button.clicked.connect(lambda: self.on_action(GameAction.MOVE_LEFT))
        nav_row.addWidget(self.prev_button)

        self.position_label = QLabel("", self)
        self.position_label.setAlignment(Qt.AlignCenter)
        nav_row.addWidget(self.position_label)

        self.next_button = QPushButton(NEXT_LEVEL_BUTTON, self)
        self.next_button.setFocusPolicy(Qt.NoFocus)
        self.next_button.clicked.connect(lambda: self.on_action(GameAction.MOVE_RIGHT))
        nav_row.addWidget(self.next_button)
        nav_row.addStretch()
        layout.addLayout(nav_row)

        play_row = QHBoxLayout()
        play_row.addStretch()
        self.play_button = QPushButton(PLAY_BUTTON, self)
        self.play_button.setFocusPolicy(Qt.NoFocus)
        self.play_button.setStyleSheet("font-size: 20pt; padding: 10px 32px;")
        self.play_button.clicked.connect(lambda: self.on_action(GameAction.CONFIRM))
        play_row.addWidget(self.play_button)
        play_row.addStretch()
        layout.addLayout(play_row)
        layout.addStretch()

    def refresh(self) -> None:
        level = self.engine.current_level()
        index = self.engine.session.current_level_index
        total = self.engine.level_count()
        self.title_label.setText(level.title if level else "")
        self.position_label.setText(LEVEL_POSITION_TEMPLATE.format(current=index + 1, total=total))
        self.prev_button.setEnabled(index > 0)
        self.next_button.setEnabled(index < total - 1)

        loading = self.engine.is_loading
        self.play_button.setEnabled(not loading)
        self.play_button.setText(LOADING_BUTTON if loading else PLAY_BUTTON)
