"""Settings dialog for configuring grid, timing and display preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from quetris.constants.game_constants import (
    MAX_GRID_COLUMNS,
    MAX_GRID_ROWS,
    MAX_TICK_INTERVAL_MS,
    MIN_GRID_COLUMNS,
    MIN_GRID_ROWS,
    MIN_TICK_INTERVAL_MS,
)
from quetris.core.game_config import GameConfig
from quetris.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent: QWidget | None = None,
        config: GameConfig | None = None,
        theme: Theme = Theme.DARK,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._config = config or GameConfig()
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        grid_group = QGroupBox("Grid")
        grid_layout = QVBoxLayout()
        grid_group.setLayout(grid_layout)

        self.columns_spinbox = self._add_spin_row(
            grid_layout,
            "Columns:",
            "Number of columns; questions with more options than columns cannot be played.",
            MIN_GRID_COLUMNS,
            MAX_GRID_COLUMNS,
            self._config.grid_columns,
        )
        self.rows_spinbox = self._add_spin_row(
            grid_layout,
            "Rows:",
            "Rows an option travels before reaching the catcher.",
            MIN_GRID_ROWS,
            MAX_GRID_ROWS,
            self._config.grid_rows,
        )
        layout.addWidget(grid_group)

        timing_group = QGroupBox("Timing and input")
        timing_layout = QVBoxLayout()
        timing_group.setLayout(timing_layout)

        self.tick_spinbox = self._add_spin_row(
            timing_layout,
            "Fall speed (ms per row):",
            "Lower values make options fall faster.",
            MIN_TICK_INTERVAL_MS,
            MAX_TICK_INTERVAL_MS,
            self._config.tick_interval_ms,
            suffix=" ms",
        )
        self.swipe_spinbox = self._add_spin_row(
            timing_layout,
            "Swipe distance to drop:",
            "Minimum downward swipe on a touch screen that drops all options.",
            10,
            400,
            self._config.swipe_threshold_px,
            suffix=" px",
        )
        layout.addWidget(timing_group)

        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)
        self.light_theme_checkbox = QCheckBox("Use light theme")
        self.light_theme_checkbox.setChecked(self._theme == Theme.LIGHT)
        display_layout.addWidget(self.light_theme_checkbox)
        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def _add_spin_row(
        self,
        layout: QVBoxLayout,
        text: str,
        tooltip: str,
        minimum: int,
        maximum: int,
        value: int,
        suffix: str = "",
    ) -> QSpinBox:
        row = QHBoxLayout()
        label = QLabel(text)
        label.setToolTip(tooltip)
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(value)
        if suffix:
            spinbox.setSuffix(suffix)
        row.addWidget(label)
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_config(self) -> GameConfig:
        """Build a config from the current spin box values."""
        return self._config.with_changes(
            grid_columns=self.columns_spinbox.value(),
            grid_rows=self.rows_spinbox.value(),
            tick_interval_ms=self.tick_spinbox.value(),
            swipe_threshold_px=self.swipe_spinbox.value(),
        )

    def get_theme(self) -> Theme:
        return Theme.LIGHT if self.light_theme_checkbox.isChecked() else Theme.DARK
