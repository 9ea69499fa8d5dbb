# passlens/gui.py
# PassLens desktop visualizer: live analysis, checklist, stats and composition chart

import logging
import sys
from typing import List, Tuple

from PySide6.QtCharts import QChart, QChartView, QPieSeries
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel,
    QLineEdit, QPushButton, QGroupBox, QGridLayout, QProgressBar
)

from passlens.config import load_config
from passlens.controller import AnalyzerController, Stats
from passlens.evaluator import Strength, analyze
from passlens.logging_setup import configure_logging
from passlens.suggestions import (
    COMPOSITION_COLORS, COMPOSITION_LABELS, STRENGTH_COLORS, Hint, Requirement, requirements
)

logger = logging.getLogger(__name__)

CFG = load_config()

# ---------------- UI building helpers ----------------

def make_input_group():
    box = QGroupBox("Password")
    layout = QHBoxLayout()
    box.setLayout(layout)

    input_pw = QLineEdit()
    input_pw.setEchoMode(QLineEdit.Password)
    input_pw.setPlaceholderText("Type a password (live analysis)")

    btn_toggle = QPushButton("Show")
    btn_generate = QPushButton("Generate")

    layout.addWidget(input_pw, 1)
    layout.addWidget(btn_toggle)
    layout.addWidget(btn_generate)

    return {
        "widget": box,
        "input_pw": input_pw,
        "btn_toggle": btn_toggle,
        "btn_generate": btn_generate,
    }


def make_strength_group():
    box = QGroupBox("Strength")
    layout = QVBoxLayout()
    box.setLayout(layout)

    bar = QProgressBar()
    bar.setRange(0, 100)
    bar.setTextVisible(False)
    lbl_label = QLabel("")
    lbl_score = QLabel("Score: 0/100")
    lbl_hint = QLabel("")
    lbl_hint.setWordWrap(True)

    layout.addWidget(bar)
    layout.addWidget(lbl_label)
    layout.addWidget(lbl_score)
    layout.addWidget(lbl_hint)

    return {
        "widget": box,
        "bar": bar,
        "lbl_label": lbl_label,
        "lbl_score": lbl_score,
        "lbl_hint": lbl_hint,
    }


def make_requirements_group(rules: List[Requirement]):
    box = QGroupBox("Requirements")
    layout = QGridLayout()
    box.setLayout(layout)

    rows = {}
    for i, req in enumerate(rules):
        icon = QLabel()
        label = QLabel(req.label)
        value = QLabel()
        value.setAlignment(Qt.AlignRight)
        layout.addWidget(icon, i, 0)
        layout.addWidget(label, i, 1)
        layout.addWidget(value, i, 2)
        rows[req.rule] = (icon, label, value)

    return {"widget": box, "rows": rows}


def make_stats_group():
    box = QGroupBox("Statistics")
    layout = QGridLayout()
    box.setLayout(layout)

    fields = {}
    for i, (key, title) in enumerate((
        ("length", "Length"),
        ("crack_time", "Time to crack"),
        ("combinations", "Combinations"),
        ("entropy", "Entropy"),
    )):
        value = QLabel("")
        layout.addWidget(QLabel(title + ":"), i, 0)
        layout.addWidget(value, i, 1)
        fields[key] = value

    return {"widget": box, "fields": fields}


def make_chart_group():
    box = QGroupBox("Character composition")
    layout = QVBoxLayout()
    box.setLayout(layout)

    series = QPieSeries()
    series.setHoleSize(0.45)
    for label, color in zip(COMPOSITION_LABELS, COMPOSITION_COLORS):
        slice_ = series.append(label, 0)
        slice_.setColor(QColor(color))
        slice_.setBorderWidth(0)

    chart = QChart()
    chart.addSeries(series)
    chart.legend().setVisible(False)
    chart.setAnimationOptions(QChart.SeriesAnimations)

    view = QChartView(chart)
    view.setRenderHint(QPainter.Antialiasing)
    view.setMinimumSize(260, 220)

    counts = QLabel("")
    layout.addWidget(view)
    layout.addWidget(counts)

    return {"widget": box, "series": series, "lbl_counts": counts}


class PassLensGUI(QWidget):
    """Main window; implements the controller's PasswordView."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("PassLens — Password Strength Visualizer")
        self.setMinimumSize(920, 520)

        self.inputg = make_input_group()
        self.strengthg = make_strength_group()
        self.reqg = make_requirements_group(requirements_template())
        self.statsg = make_stats_group()
        self.chartg = make_chart_group()

        left = QVBoxLayout()
        left.addWidget(self.inputg["widget"])
        left.addWidget(self.strengthg["widget"])
        left.addWidget(self.reqg["widget"])

        right = QVBoxLayout()
        right.addWidget(self.statsg["widget"])
        right.addWidget(self.chartg["widget"])

        main = QHBoxLayout()
        main.addLayout(left, 3)
        main.addLayout(right, 2)
        self.setLayout(main)

        self.controller = AnalyzerController(self, reveal_generated=bool(CFG.get("reveal_generated", True)))

        self.inputg["input_pw"].textChanged.connect(self.controller.on_password_changed)
        self.inputg["btn_toggle"].clicked.connect(self.controller.toggle_visibility)
        self.inputg["btn_generate"].clicked.connect(self.controller.on_generate)

        self.controller.on_password_changed("")
        self.inputg["input_pw"].setFocus()

    # ----------------- PasswordView -----------------
    def show_strength(self, score: int, strength: Strength, label: str):
        color = STRENGTH_COLORS[strength]
        bar = self.strengthg["bar"]
        bar.setValue(score)
        bar.setStyleSheet(f"QProgressBar::chunk {{ background-color: {color}; }}")
        self.strengthg["lbl_label"].setText(label)
        self.strengthg["lbl_label"].setStyleSheet(f"color: {color}; font-weight: bold;")
        self.strengthg["lbl_score"].setText(f"Score: {score}/100")

    def show_requirements(self, reqs: List[Requirement]):
        for req in reqs:
            icon, label, value = self.reqg["rows"][req.rule]
            icon.setText("✓" if req.valid else "✗")
            icon.setStyleSheet("color: #2ecc71;" if req.valid else "color: #e74c3c;")
            value.setText(req.value or "")

    def show_stats(self, stats: Stats):
        fields = self.statsg["fields"]
        fields["length"].setText(stats.length)
        fields["crack_time"].setText(stats.crack_time)
        fields["combinations"].setText(stats.combinations)
        fields["entropy"].setText(stats.entropy)

    def show_hint(self, hint: Hint):
        self.strengthg["lbl_hint"].setText(hint.text)
        color = "#2ecc71" if hint.kind == "generated" else ""
        self.strengthg["lbl_hint"].setStyleSheet(f"color: {color};" if color else "")

    def show_composition(self, slices: List[Tuple[str, int]]):
        series = self.chartg["series"]
        for slice_, (_, count) in zip(series.slices(), slices):
            slice_.setValue(count)
        self.chartg["lbl_counts"].setText("   ".join(f"{label}: {count}" for label, count in slices))

    def set_password(self, text: str):
        # block the change signal; the controller analyzes the new text itself
        field = self.inputg["input_pw"]
        field.blockSignals(True)
        field.setText(text)
        field.blockSignals(False)

    def set_revealed(self, revealed: bool):
        field = self.inputg["input_pw"]
        field.setEchoMode(QLineEdit.Normal if revealed else QLineEdit.Password)
        self.inputg["btn_toggle"].setText("Hide" if revealed else "Show")


def requirements_template() -> List[Requirement]:
    """Checklist rows in display order, taken from an empty analysis."""
    return requirements(analyze(""))


def main():
    configure_logging(CFG.get("log_level", "WARNING"))
    app = QApplication(sys.argv)
    gui = PassLensGUI()
    gui.show()
    logger.debug("PassLens window shown")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
