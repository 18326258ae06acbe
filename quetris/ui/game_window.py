"""Qt main window hosting level select, play and completion views."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QKeyEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quetris.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from quetris.constants.ui_constants import (
    HINT_COMPLETED,
    HINT_LEVEL_SELECT,
    HINT_PLAYING,
    SETTINGS_LOCKED_MESSAGE,
    START_FAILED_TITLE,
    WINDOW_TITLE,
)
from quetris.core.errors import QuetrisError
from quetris.core.game_config import GameConfig
from quetris.core.game_engine import LevelCompleteCallback, QuestionAnswerCallback, QuizGameEngine
from quetris.core.input_arbiter import GameAction, InputArbiter
from quetris.core.models import GamePhase, QuizData
from quetris.styling.color_palette import Theme
from quetris.styling.styles import Styles
from quetris.ui.components.completion_panel import CompletionPanel
from quetris.ui.components.level_select_panel import LevelSelectPanel
from quetris.ui.components.play_panel import PlayPanel
from quetris.ui.dialog_helpers import show_error, show_info, show_warning
from quetris.ui.qt_scheduler import QtScheduler
from quetris.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)

_QT_KEY_NAMES: dict[int, str] = {
    Qt.Key_Left: "Left",
    Qt.Key_Right: "Right",
    Qt.Key_Down: "Down",
    Qt.Key_Return: "Return",
    Qt.Key_Enter: "Enter",
    Qt.Key_Escape: "Escape",
}


class ScreenMode(Enum):
    """Which stacked view is visible."""

    LEVEL_SELECT = auto()
    PLAYING = auto()
    COMPLETED = auto()


class QuizGameWindow(QMainWindow):
    """Main Qt window wiring the engine, the input arbiter and the views."""

    def __init__(
        self,
        quiz_data: QuizData,
        config: GameConfig | None = None,
        *,
        on_question_answer: QuestionAnswerCallback | None = None,
        on_level_complete: LevelCompleteCallback | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setFocusPolicy(Qt.StrongFocus)

        self.scheduler = QtScheduler(self)
        self.engine = QuizGameEngine(
            quiz_data,
            self.scheduler,
            config,
            on_question_answer=on_question_answer,
            on_level_complete=on_level_complete,
            on_state_changed=self._refresh_state,
        )
        self.arbiter = InputArbiter(self.engine)
        self._theme = Theme.DARK
        self._mode: ScreenMode | None = None

        self._build_ui()
        self._apply_styles()
        self._refresh_state()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        for button in (self.about_button, self.help_button, self.settings_button):
            button.setFocusPolicy(Qt.NoFocus)
            button_row.addWidget(button)
        root_layout.addLayout(button_row)

        self.mode_stack = QStackedWidget(self)
        self.level_select_panel = LevelSelectPanel(self.engine, self.dispatch_action, self)
        self.play_panel = PlayPanel(self.engine, self.arbiter, self.dispatch_action, self)
        self.completion_panel = CompletionPanel(self.engine, self.dispatch_action, self)
        self.mode_stack.addWidget(self.level_select_panel)
        self.mode_stack.addWidget(self.play_panel)
        self.mode_stack.addWidget(self.completion_panel)
        root_layout.addWidget(self.mode_stack, stretch=1)

        self.hint_label = QLabel("", self)
        self.hint_label.setAlignment(Qt.AlignCenter)
        self.hint_label.setWordWrap(True)
        self.hint_label.setStyleSheet(Styles.get_hint_label_style())
        root_layout.addWidget(self.hint_label)

    def dispatch_action(self, action: GameAction) -> bool:
        """Route an action through the arbiter and report start failures."""
        try:
            return self.arbiter.handle_action(action)
        except QuetrisError as exc:
            logger.warning("Action %s rejected: %s", action.name, exc)
            show_error(self, START_FAILED_TITLE, str(exc))
            return False

    def keyPressEvent(self, event: QKeyEvent) -> None:
        key_name = _QT_KEY_NAMES.get(event.key())
        if key_name is None or (event.isAutoRepeat() and key_name in ("Return", "Enter")):
            super().keyPressEvent(event)
            return
        try:
            self.arbiter.handle_key(key_name)
        except QuetrisError as exc:
            logger.warning("Key %s rejected: %s", key_name, exc)
            show_error(self, START_FAILED_TITLE, str(exc))
        event.accept()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.engine.shutdown()
        super().closeEvent(event)

    def _refresh_state(self) -> None:
        phase = self.engine.phase
        if phase is GamePhase.LEVEL_SELECT:
            mode = ScreenMode.LEVEL_SELECT
        elif phase is GamePhase.COMPLETED:
            mode = ScreenMode.COMPLETED
        else:
            mode = ScreenMode.PLAYING
        self._set_mode(mode)

        if mode is ScreenMode.LEVEL_SELECT:
            self.level_select_panel.refresh()
        elif mode is ScreenMode.COMPLETED:
            self.completion_panel.refresh()
        else:
            self.play_panel.refresh()

    def _set_mode(self, mode: ScreenMode) -> None:
        if mode is self._mode:
            return
        if mode is ScreenMode.PLAYING:
            self.play_panel.reset()
        self._mode = mode
        index_map = {
            ScreenMode.LEVEL_SELECT: 0,
            ScreenMode.PLAYING: 1,
            ScreenMode.COMPLETED: 2,
        }
        hint_map = {
            ScreenMode.LEVEL_SELECT: HINT_LEVEL_SELECT,
            ScreenMode.PLAYING: HINT_PLAYING,
            ScreenMode.COMPLETED: HINT_COMPLETED,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])
        self.hint_label.setText(hint_map[mode])
        self.settings_button.setEnabled(mode is ScreenMode.LEVEL_SELECT)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        if self.engine.session.started:
            show_warning(self, "Settings", SETTINGS_LOCKED_MESSAGE)
            return
        dialog = SettingsDialog(self, self.engine.config, self._theme)
        if not dialog.exec():
            return
        try:
            self.engine.apply_config(dialog.get_config())
        except QuetrisError as exc:
            show_error(self, "Settings rejected", str(exc))
            return
        self._theme = dialog.get_theme()
        self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self.play_panel.set_theme(self._theme)
        self.completion_panel.set_theme(self._theme)
