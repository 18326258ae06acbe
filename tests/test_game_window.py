import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import Qt  # noqa: E402
from PySide6.QtTest import QTest  # noqa: E402

from quetris.core.models import GamePhase  # noqa: E402
from quetris.ui.game_window import QuizGameWindow  # noqa: E402
from quetris.ui.qt_scheduler import QtScheduler  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture()
def window(qapp, two_question_quiz):
    win = QuizGameWindow(two_question_quiz)
    win.show()
    yield win
    win.close()


def test_window_starts_on_level_select(window):
    assert window.engine.phase is GamePhase.LEVEL_SELECT
    assert window.mode_stack.currentIndex() == 0
    assert window.settings_button.isEnabled()


def test_keyboard_starts_and_leaves_a_session(window):
    QTest.keyClick(window, Qt.Key_Return)

    assert window.engine.phase is GamePhase.REVEALING
    assert window.mode_stack.currentIndex() == 1
    assert not window.settings_button.isEnabled()
    assert "Question 1" in window.play_panel.question_label.text()

    QTest.keyClick(window, Qt.Key_Escape)

    assert window.engine.phase is GamePhase.LEVEL_SELECT
    assert window.mode_stack.currentIndex() == 0


def test_grid_column_mapping(window):
    grid = window.play_panel.grid_view
    grid.resize(408, 600)

    assert grid.column_at(0) == 0
    assert grid.column_at(407) == 3
    assert grid.column_at(150) == 1


def test_qt_scheduler_handles_can_be_cancelled(qapp):
    scheduler = QtScheduler()
    fired = []

    repeating = scheduler.call_repeating(10_000, lambda: fired.append("tick"))
    single = scheduler.call_later(10_000, lambda: fired.append("reveal"))
    assert repeating.is_active() and single.is_active()

    repeating.cancel()
    single.cancel()
    single.cancel()

    assert not repeating.is_active()
    assert not single.is_active()
    assert fired == []
