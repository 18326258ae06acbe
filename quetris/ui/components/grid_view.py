"""Widget that paints the playing grid and forwards pointer and touch input."""

from __future__ import annotations

from PySide6.QtCore import QEasingCurve, QEvent, QRectF, Qt, QVariantAnimation
from PySide6.QtGui import QColor, QFont, QMouseEvent, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from quetris.constants.ui_constants import CORRECT_LABEL, MIN_GRID_HEIGHT_PX, WRONG_LABEL
from quetris.core.game_engine import QuizGameEngine
from quetris.core.input_arbiter import InputArbiter
from quetris.core.models import GridSnapshot
from quetris.styling.color_palette import ColorPalette, Theme

_PADDING_PX = 4
_CATCHER_HEIGHT_PX = 40
_CATCHER_BOTTOM_MARGIN_PX = 8


class GridView(QWidget):
    """Column-by-row playing field with falling options and the catcher."""

    def __init__(
        self,
        engine: QuizGameEngine,
        arbiter: InputArbiter,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.engine = engine
        self.arbiter = arbiter
        self._theme = Theme.DARK
        self._snapshot: GridSnapshot = engine.snapshot()
        self._hover_column: int | None = None
        self._slide_progress: float = 1.0

        self.setMinimumHeight(MIN_GRID_HEIGHT_PX)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMouseTracking(True)
        self.setAttribute(Qt.WA_AcceptTouchEvents, True)
        self.setFocusPolicy(Qt.NoFocus)

        self._slide_animation = QVariantAnimation(self)
        self._slide_animation.setStartValue(0.0)
        self._slide_animation.setEndValue(1.0)
        self._slide_animation.setEasingCurve(QEasingCurve.OutCubic)
        self._slide_animation.valueChanged.connect(self._on_slide_value)

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.update()

    def refresh(self) -> None:
        """Pull a fresh snapshot from the engine and repaint."""
        previous = self._snapshot
        self._snapshot = self.engine.snapshot()
        if self._snapshot.grid_animating and not previous.grid_animating:
            self._start_slide_in()
        elif not self._snapshot.grid_animating:
            self._slide_progress = 1.0
        self.update()

    def column_at(self, x: float) -> int:
        columns = self.engine.config.grid_columns
        usable = max(1.0, self.width() - 2 * _PADDING_PX)
        column = int((x - _PADDING_PX) * columns / usable)
        return max(0, min(columns - 1, column))

    # --- Input ---

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton:
            self.arbiter.handle_column_click(self.column_at(event.position().x()))
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        column = self.column_at(event.position().x())
        if column != self._hover_column:
            self._hover_column = column
            self.update()
        super().mouseMoveEvent(event)

    def leaveEvent(self, event: QEvent) -> None:
        self._hover_column = None
        self.update()
        super().leaveEvent(event)

    def event(self, event: QEvent) -> bool:
        event_type = event.type()
        if event_type == QEvent.TouchBegin:
            points = event.points()
            if points:
                self.arbiter.handle_touch_start(points[0].position().y())
            event.accept()
            return True
        if event_type == QEvent.TouchEnd:
            points = event.points()
            if points:
                self.arbiter.handle_touch_end(points[0].position().y())
            event.accept()
            return True
        if event_type == QEvent.TouchCancel:
            self.arbiter.swipe.cancel()
            event.accept()
            return True
        return super().event(event)

    # --- Painting ---

    def _start_slide_in(self) -> None:
        self._slide_progress = 0.0
        self._slide_animation.stop()
        self._slide_animation.setDuration(max(1, self.engine.config.reveal_delay_ms))
        self._slide_animation.start()

    def _on_slide_value(self, value: float) -> None:
        self._slide_progress = float(value)
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        snapshot = self._snapshot
        if not snapshot.grid_visible:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        theme = self._theme

        area = QRectF(self.rect()).adjusted(_PADDING_PX, _PADDING_PX, -_PADDING_PX, -_PADDING_PX)
        area.translate(0, -(1.0 - self._slide_progress) * area.height())

        columns = self.engine.config.grid_columns
        rows = self.engine.config.grid_rows
        column_width = area.width() / columns
        row_height = area.height() / rows

        painter.setPen(QPen(QColor(ColorPalette.GRID_BORDER.get(theme)), 1))
        painter.setBrush(QColor(ColorPalette.GRID_BACKGROUND.get(theme)))
        painter.drawRoundedRect(area, 8, 8)

        if self._hover_column is not None and self.engine.catcher_movable():
            hover_rect = QRectF(
                area.left() + self._hover_column * column_width, area.top(), column_width, area.height()
            )
            painter.fillRect(hover_rect, QColor(ColorPalette.COLUMN_HOVER.get(theme)))

        separator = QColor(ColorPalette.GRID_SEPARATOR.get(theme))
        separator.setAlphaF(0.3)
        painter.setPen(QPen(separator, 2))
        for index in range(1, columns):
            x = area.left() + index * column_width
            painter.drawLine(int(x), int(area.top()), int(x), int(area.bottom()))

        option_font = QFont(self.font())
        option_font.setPixelSize(max(10, min(24, int(row_height * 0.7))))
        painter.setFont(option_font)
        painter.setPen(QColor(ColorPalette.TEXT_PRIMARY.get(theme)))
        metrics = painter.fontMetrics()
        for option in snapshot.options:
            cell = QRectF(
                area.left() + option.column * column_width,
                area.top() + option.row * row_height,
                column_width,
                row_height,
            )
            label = metrics.elidedText(option.text, Qt.ElideRight, int(cell.width()) - 4)
            painter.drawText(cell, Qt.AlignCenter, label)

        self._paint_catcher(painter, area, column_width)
        painter.end()

    def _paint_catcher(self, painter: QPainter, area: QRectF, column_width: float) -> None:
        theme = self._theme
        caught = self._snapshot.caught
        if caught is None:
            background = ColorPalette.CATCHER_IDLE_BG.get(theme)
            foreground = ColorPalette.CATCHER_IDLE_TEXT.get(theme)
            text = ""
        elif caught.is_correct:
            background, foreground, text = ColorPalette.SUCCESS.get(theme), "#FFFFFF", CORRECT_LABEL
        else:
            background, foreground, text = ColorPalette.ERROR.get(theme), "#FFFFFF", WRONG_LABEL

        catcher = QRectF(
            area.left() + self._snapshot.catcher_column * column_width,
            area.bottom() - _CATCHER_BOTTOM_MARGIN_PX - _CATCHER_HEIGHT_PX,
            column_width,
            _CATCHER_HEIGHT_PX,
        )
        painter.setPen(QPen(QColor(ColorPalette.GRID_BORDER.get(theme)), 2))
        painter.setBrush(QColor(background))
        painter.drawRoundedRect(catcher, 8, 8)
        if text:
            painter.setPen(QColor(foreground))
            painter.drawText(catcher, Qt.AlignCenter, text)
