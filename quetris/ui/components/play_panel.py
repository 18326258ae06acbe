"""Component for the in-game view: question, grid and catch result."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from quetris.constants.ui_constants import (
    MISSED_MESSAGE,
    NEXT_QUESTION_BUTTON,
    QUESTION_POSITION_TEMPLATE,
    RETRY_BUTTON,
    SCORE_TEMPLATE,
)
from quetris.core.game_engine import QuizGameEngine
from quetris.core.input_arbiter import GameAction, InputArbiter
from quetris.core.markdown_renderer import renderer
from quetris.core.models import GamePhase
from quetris.styling.color_palette import Theme
from quetris.styling.styles import Styles
from quetris.ui.components.grid_view import GridView


class PlayPanel(QWidget):
    """UI component for a running session."""

    def __init__(
        self,
        engine: QuizGameEngine,
        arbiter: InputArbiter,
        on_action: Callable[[GameAction], bool],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.engine = engine
        self.arbiter = arbiter
        self.on_action = on_action
        self._rendered_question_id: int | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        status_row = QHBoxLayout()
        self.position_label = QLabel("", self)
        status_row.addWidget(self.position_label)
        status_row.addStretch()
        self.score_label = QLabel("", self)
        status_row.addWidget(self.score_label)
        layout.addLayout(status_row)

        self.question_label = QLabel("", self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setAlignment(Qt.AlignCenter)
        self.question_label.setWordWrap(True)
        self.question_label.setStyleSheet(Styles.get_question_label_style())
        layout.addWidget(self.question_label)

        self.grid_view = GridView(self.engine, self.arbiter, self)
        layout.addWidget(self.grid_view, stretch=1)

        result_row = QHBoxLayout()
        result_row.addStretch()
        self.retry_button = QPushButton(RETRY_BUTTON, self)
        self.retry_button.setFocusPolicy(Qt.NoFocus)
        self.retry_button.clicked.connect(lambda: self.on_action(GameAction.CONFIRM))
        result_row.addWidget(self.retry_button)

        self.next_button = QPushButton(NEXT_QUESTION_BUTTON, self)
        self.next_button.setFocusPolicy(Qt.NoFocus)
        self.next_button.clicked.connect(lambda: self.on_action(GameAction.CONFIRM))
        result_row.addWidget(self.next_button)
        result_row.addStretch()
        layout.addLayout(result_row)

        self.missed_label = QLabel(MISSED_MESSAGE, self)
        self.missed_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.missed_label)

        self.retry_button.setVisible(False)
        self.next_button.setVisible(False)
        self.missed_label.setVisible(False)

    def set_theme(self, theme: Theme) -> None:
        self.grid_view.set_theme(theme)
        self.retry_button.setStyleSheet(Styles.get_result_button_style(theme, correct=False))
        self.next_button.setStyleSheet(Styles.get_result_button_style(theme, correct=True))

    def refresh(self) -> None:
        session = self.engine.session
        level = self.engine.current_level()
        question = self.engine.current_question()
        total = len(level.questions) if level else 0

        self.position_label.setText(
            QUESTION_POSITION_TEMPLATE.format(current=session.current_question_index + 1, total=total)
        )
        self.score_label.setText(SCORE_TEMPLATE.format(score=session.score))
        if question is not None and question.id != self._rendered_question_id:
            self.question_label.setText(renderer.render_fragment(question.text))
            self._rendered_question_id = question.id

        caught = self.engine.caught
        phase = self.engine.phase
        self.retry_button.setVisible(phase is GamePhase.CAUGHT and caught is not None and not caught.is_correct)
        self.next_button.setVisible(phase is GamePhase.CAUGHT and caught is not None and caught.is_correct)
        self.missed_label.setVisible(phase is GamePhase.EXHAUSTED)
        self.grid_view.refresh()

    def reset(self) -> None:
        self._rendered_question_id = None
        self.arbiter.swipe.cancel()
