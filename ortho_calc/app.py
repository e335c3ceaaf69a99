"""
Desktop front-end: orthogonal trajectory calculator and carbon footprint
calculator, one tab each.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Optional

import pyqtgraph as pg
from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QDialog,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTabWidget,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from .catalog import CATALOG, UNRECOGNIZED_HINT, TrajectoryCatalog, TrajectoryResult
from .emissions import (
    CATEGORIES,
    CATEGORY_LABELS,
    ELECTRICITY_EMISSION_FACTOR,
    FUEL_EMISSION_FACTORS,
    WASTE_EMISSION_FACTOR,
    EmissionResult,
    compute_emissions,
    parse_amount,
    saving_tips,
)
from .log import configure_logging, get_logger
from .symbolic import verify_family

logger = get_logger(__name__)

DEFAULT_EQUATION: str = "x^2 + y^2 = C"


# ===========================================================================
# Data-classes
# ===========================================================================

@dataclass(frozen=True, slots=True)
class PlotSettings:
    x_min: float = -10.0
    x_max: float = 10.0
    y_min: float = -10.0
    y_max: float = 10.0
    grid_alpha: float = 0.3
    line_width: int = 2

    def __post_init__(self) -> None:
        if self.x_min >= self.x_max:
            raise ValueError(f"x_min ({self.x_min}) must be < x_max ({self.x_max})")
        if self.y_min >= self.y_max:
            raise ValueError(f"y_min ({self.y_min}) must be < y_max ({self.y_max})")
        if not (0.0 <= self.grid_alpha <= 1.0):
            raise ValueError(f"grid_alpha must be in [0, 1], got {self.grid_alpha}")
        if self.line_width < 1:
            raise ValueError(f"line_width must be positive, got {self.line_width}")


# ===========================================================================
# Settings dialog
# ===========================================================================

class SettingsDialog(QDialog):

    def __init__(self, settings: PlotSettings, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Plot Settings")
        self._settings = settings
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QGridLayout(self)

        self._x_min_edit = QLineEdit(str(self._settings.x_min))
        self._x_max_edit = QLineEdit(str(self._settings.x_max))
        self._y_min_edit = QLineEdit(str(self._settings.y_min))
        self._y_max_edit = QLineEdit(str(self._settings.y_max))
        self._width_edit = QLineEdit(str(self._settings.line_width))

        fields: list[tuple[str, QWidget]] = [
            ("X Min:", self._x_min_edit),
            ("X Max:", self._x_max_edit),
            ("Y Min:", self._y_min_edit),
            ("Y Max:", self._y_max_edit),
            ("Line Width:", self._width_edit),
        ]
        for row, (label, widget) in enumerate(fields):
            layout.addWidget(QLabel(label), row, 0)
            layout.addWidget(widget, row, 1)

        btn_row = QHBoxLayout()
        ok_btn = QPushButton("OK")
        cancel_btn = QPushButton("Cancel")
        ok_btn.clicked.connect(self.accept)
        cancel_btn.clicked.connect(self.reject)
        btn_row.addWidget(ok_btn)
        btn_row.addWidget(cancel_btn)
        layout.addLayout(btn_row, len(fields), 0, 1, 2)

    def get_settings(self) -> Optional[PlotSettings]:
        try:
            return PlotSettings(
                x_min=float(self._x_min_edit.text()),
                x_max=float(self._x_max_edit.text()),
                y_min=float(self._y_min_edit.text()),
                y_max=float(self._y_max_edit.text()),
                grid_alpha=self._settings.grid_alpha,
                line_width=int(self._width_edit.text()),
            )
        except (ValueError, TypeError):
            return None


# ===========================================================================
# Orthogonal trajectory tab
# ===========================================================================

class OrthogonalCalculatorWidget(QWidget):

    def __init__(
        self,
        catalog: TrajectoryCatalog = CATALOG,
        settings: Optional[PlotSettings] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._catalog = catalog
        self._settings = settings or PlotSettings()
        self._result: Optional[TrajectoryResult] = None
        self._plot_items: list[Any] = []
        self._build_ui()
        self._configure_plot()

    def _build_ui(self) -> None:
        root = QHBoxLayout(self)

        left = QVBoxLayout()

        input_row = QHBoxLayout()
        input_row.addWidget(QLabel("Enter equation with parameter C:"))
        self._equation_edit = QLineEdit(DEFAULT_EQUATION)
        self._equation_edit.setPlaceholderText("e.g., x^2 + y^2 = C")
        self._equation_edit.returnPressed.connect(self.calculate)
        input_row.addWidget(self._equation_edit, 1)
        self._calc_btn = QPushButton("Calculate")
        self._calc_btn.clicked.connect(self.calculate)
        input_row.addWidget(self._calc_btn)
        left.addLayout(input_row)

        examples_row = QHBoxLayout()
        examples_row.addWidget(QLabel("Try:"))
        for example in self._catalog.examples:
            btn = QPushButton(example)
            btn.clicked.connect(lambda _checked=False, eq=example: self._equation_edit.setText(eq))
            examples_row.addWidget(btn)
        examples_row.addStretch(1)
        left.addLayout(examples_row)

        self._error_lbl = QLabel("")
        self._error_lbl.setStyleSheet("color: rgb(220, 60, 60);")
        self._error_lbl.setWordWrap(True)
        left.addWidget(self._error_lbl)

        labels_row = QHBoxLayout()
        self._original_lbl = QLabel("Original Family: —")
        self._orthogonal_lbl = QLabel("Orthogonal Trajectories: —")
        self._original_lbl.setStyleSheet("color: rgb(59, 130, 246); font-weight: bold;")
        self._orthogonal_lbl.setStyleSheet("color: rgb(239, 68, 68); font-weight: bold;")
        labels_row.addWidget(self._original_lbl)
        labels_row.addWidget(self._orthogonal_lbl)
        left.addLayout(labels_row)

        self._plot_widget = pg.PlotWidget()
        self._plot_widget.addLegend(offset=(10, 10))
        left.addWidget(self._plot_widget, 1)

        self._status_lbl = QLabel("Ready")
        self._status_lbl.setStyleSheet("color: gray; font-style: italic;")
        left.addWidget(self._status_lbl)
        root.addLayout(left, 3)

        right = QVBoxLayout()
        right.addWidget(QLabel("Step-by-Step Solution (LaTeX):"))
        self._steps_output = QTextEdit()
        self._steps_output.setReadOnly(True)
        self._steps_output.setFontFamily("Courier New")
        right.addWidget(self._steps_output, 2)

        gallery = QGroupBox("Supported Equation Types")
        gallery_layout = QVBoxLayout()
        for family in self._catalog.families:
            gallery_layout.addWidget(QLabel(f"{family.original}    {family.description}"))
        gallery.setLayout(gallery_layout)
        right.addWidget(gallery, 1)
        root.addLayout(right, 2)

    def _configure_plot(self) -> None:
        self._plot_widget.setLabel("left", "y")
        self._plot_widget.setLabel("bottom", "x")
        self._plot_widget.showGrid(x=True, y=True, alpha=self._settings.grid_alpha)
        self._plot_widget.setAspectLocked(True)
        vb = self._plot_widget.plotItem.vb
        vb.disableAutoRange()
        self._plot_widget.setXRange(self._settings.x_min, self._settings.x_max, padding=0)
        self._plot_widget.setYRange(self._settings.y_min, self._settings.y_max, padding=0)

    def apply_settings(self, settings: PlotSettings) -> None:
        self._settings = settings
        self._configure_plot()
        if self._result is not None:
            self._draw(self._result)

    def calculate(self) -> None:
        equation = self._equation_edit.text()
        result = self._catalog.solve(equation)
        if result is None:
            self._result = None
            self._clear()
            self._error_lbl.setText(UNRECOGNIZED_HINT)
            self._status_lbl.setText("Not recognized")
            return

        self._result = result
        self._error_lbl.setText("")
        family = result.family
        self._original_lbl.setText(f"Original Family: {family.original}")
        self._orthogonal_lbl.setText(f"Orthogonal Trajectories: {family.orthogonal}")
        self._steps_output.setPlainText(
            "\n\n".join(f"{i + 1}. \\({step}\\)" for i, step in enumerate(result.steps))
        )
        self._draw(result)

        report = verify_family(family)
        if report.is_exact:
            self._status_lbl.setText(f"{family.name}: orthogonality verified symbolically")
        else:
            self._status_lbl.setText(
                f"{family.name}: plotted trajectories are an approximation"
            )

    def _clear(self) -> None:
        for item in self._plot_items:
            self._plot_widget.removeItem(item)
        self._plot_items.clear()
        legend = self._plot_widget.plotItem.legend
        if legend is not None:
            legend.clear()
        self._original_lbl.setText("Original Family: —")
        self._orthogonal_lbl.setText("Orthogonal Trajectories: —")
        self._steps_output.clear()

    def _draw(self, result: TrajectoryResult) -> None:
        for item in self._plot_items:
            self._plot_widget.removeItem(item)
        self._plot_items.clear()
        legend = self._plot_widget.plotItem.legend
        if legend is not None:
            legend.clear()
        for trace in result.traces():
            item = self._plot_widget.plot(
                trace.x, trace.y,
                pen=pg.mkPen(trace.color, width=self._settings.line_width),
                name=trace.name if trace.show_legend else None,
            )
            self._plot_items.append(item)


# ===========================================================================
# Carbon footprint tab
# ===========================================================================

class CarbonCalculatorWidget(QWidget):

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._result: Optional[EmissionResult] = None
        self._build_ui()
        self.reset()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        inputs = QGroupBox("Monthly Emissions")
        grid = QGridLayout()
        validator = QDoubleValidator(0.0, 1e12, 3, self)

        self._fuel_combo = QComboBox()
        for key, fuel in FUEL_EMISSION_FACTORS.items():
            self._fuel_combo.addItem(fuel.label, key)
        self._fuel_combo.currentIndexChanged.connect(self._update_fuel_hint)
        self._fuel_hint = QLabel("")
        self._fuel_amount = QLineEdit()
        self._electricity = QLineEdit()
        self._waste = QLineEdit()
        for edit in (self._fuel_amount, self._electricity, self._waste):
            edit.setValidator(validator)
            edit.returnPressed.connect(self.calculate)
        self._electricity.setPlaceholderText("Enter kWh consumed")
        self._waste.setPlaceholderText("Enter kg of waste")

        rows: list[tuple[str, QWidget]] = [
            ("Fuel Type:", self._fuel_combo),
            ("", self._fuel_hint),
            ("Fuel Amount:", self._fuel_amount),
            ("Monthly kWh:", self._electricity),
            ("", QLabel(f"Emission factor: {ELECTRICITY_EMISSION_FACTOR} kg CO₂/kWh")),
            ("Monthly waste (kg):", self._waste),
            ("", QLabel(f"Emission factor: {WASTE_EMISSION_FACTOR} kg CO₂/kg waste")),
        ]
        for row, (label, widget) in enumerate(rows):
            grid.addWidget(QLabel(label), row, 0)
            grid.addWidget(widget, row, 1)
        inputs.setLayout(grid)
        root.addWidget(inputs)

        btn_row = QHBoxLayout()
        calc_btn = QPushButton("Calculate Emissions")
        reset_btn = QPushButton("Reset")
        calc_btn.clicked.connect(self.calculate)
        reset_btn.clicked.connect(self.reset)
        btn_row.addWidget(calc_btn)
        btn_row.addWidget(reset_btn)
        root.addLayout(btn_row)

        self._results_box = QGroupBox("Your Carbon Footprint")
        results_layout = QVBoxLayout()
        self._total_lbl = QLabel("")
        results_layout.addWidget(self._total_lbl)
        self._category_lbls: dict[str, QLabel] = {}
        for category in CATEGORIES:
            lbl = QLabel("")
            self._category_lbls[category] = lbl
            results_layout.addWidget(lbl)
        self._tips_lbl = QLabel("")
        self._tips_lbl.setWordWrap(True)
        results_layout.addWidget(self._tips_lbl)
        self._results_box.setLayout(results_layout)
        root.addWidget(self._results_box)
        root.addStretch(1)

    def _update_fuel_hint(self) -> None:
        fuel = FUEL_EMISSION_FACTORS[self._fuel_combo.currentData()]
        self._fuel_hint.setText(f"Emission factor: {fuel.factor} kg CO₂/{fuel.unit}")
        self._fuel_amount.setPlaceholderText(f"Enter {fuel.unit} used")

    def reset(self) -> None:
        self._fuel_combo.setCurrentIndex(self._fuel_combo.findData("petrol"))
        for edit in (self._fuel_amount, self._electricity, self._waste):
            edit.clear()
        self._result = None
        self._update_fuel_hint()
        self._results_box.setVisible(False)

    def calculate(self) -> None:
        result = compute_emissions(
            self._fuel_combo.currentData(),
            parse_amount(self._fuel_amount.text()),
            parse_amount(self._electricity.text()),
            parse_amount(self._waste.text()),
        )
        self._result = result
        if not result.has_emissions:
            self._results_box.setVisible(False)
            return

        self._total_lbl.setText(
            f"Your total monthly emissions are {result.total:.2f} kg CO₂"
        )
        for category, value in result.by_category().items():
            lbl = self._category_lbls[category]
            is_highest = category == result.highest_category
            marker = "  ▲ Highest" if is_highest else ""
            lbl.setText(f"{CATEGORY_LABELS[category]}: {value:.2f} kg CO₂{marker}")
            lbl.setStyleSheet(f"font-weight: {'bold' if is_highest else 'normal'};")

        tips = saving_tips(result.highest_category)
        label = CATEGORY_LABELS[result.highest_category]
        self._tips_lbl.setText(
            f"Tips to Reduce Your {label} Emissions:\n" + "\n".join(f"• {tip}" for tip in tips)
        )
        self._results_box.setVisible(True)


# ===========================================================================
# Main window
# ===========================================================================

class MainWindow(QMainWindow):

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Orthogonal Trajectory & Carbon Footprint Calculators")
        self.setGeometry(100, 100, 1400, 820)

        self._settings = PlotSettings()

        tabs = QTabWidget()
        self._orthogonal_tab = OrthogonalCalculatorWidget(settings=self._settings)
        self._carbon_tab = CarbonCalculatorWidget()
        tabs.addTab(self._orthogonal_tab, "Orthogonal Trajectories")
        tabs.addTab(self._carbon_tab, "Carbon Footprint")
        self.setCentralWidget(tabs)

        settings_action = self.menuBar().addAction("Settings")
        settings_action.triggered.connect(self.show_settings)

    def show_settings(self) -> None:
        dlg = SettingsDialog(self._settings, self)
        if dlg.exec():
            new_s = dlg.get_settings()
            if new_s is None:
                QMessageBox.critical(self, "Invalid Settings",
                                     "One or more values are invalid.")
                return
            self._settings = new_s
            self._orthogonal_tab.apply_settings(new_s)


# ===========================================================================
# Entry point
# ===========================================================================

def main() -> None:
    configure_logging()
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    logger.info("Calculator window started")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
