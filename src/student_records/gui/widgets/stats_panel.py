"""
Statistics cards shown under the student table.
"""
from typing import Dict

from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QWidget
from PySide6.QtCore import Qt

from student_records.core.statistics import StatsSummary
from student_records.gui.styles.theme import Fonts, get_colors, get_styles


class StatsPanel(QWidget):
    """Row of label/value cards: Total, Average, Highest, Lowest, Pass Rate."""

    KEYS = ("total", "average", "highest", "lowest", "pass_rate")

    def __init__(self, threshold: float, parent=None):
        super().__init__(parent)
        self._value_labels: Dict[str, QLabel] = {}
        self._title_labels: list[QLabel] = []

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 6, 0, 0)
        layout.setSpacing(10)

        empty = StatsSummary(0, 0.0, 0.0, 0.0, 0.0, threshold)
        for key, (title, value) in zip(self.KEYS, empty.format_rows()):
            card, title_label, value_label = self._make_card(title, value)
            self._value_labels[key] = value_label
            self._title_labels.append(title_label)
            layout.addWidget(card)

        self.update_theme()

    def _make_card(self, title: str, value: str):
        card = QFrame()
        card.setObjectName("statCard")
        row = QHBoxLayout(card)
        row.setContentsMargins(10, 10, 10, 10)

        title_label = QLabel(title)
        value_label = QLabel(value)
        value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

        row.addWidget(title_label)
        row.addStretch()
        row.addWidget(value_label)
        return card, title_label, value_label

    def set_summary(self, summary: StatsSummary) -> None:
        """Show the figures of a summary."""
        rows = summary.format_rows()
        for key, title_label, (title, value) in zip(self.KEYS, self._title_labels, rows):
            title_label.setText(title)
            self._value_labels[key].setText(value)

    def value_text(self, key: str) -> str:
        return self._value_labels[key].text()

    def update_theme(self) -> None:
        C = get_colors()
        self.setStyleSheet(get_styles().STAT_CARD)
        for label in self._title_labels:
            label.setStyleSheet(f"font-size: {Fonts.SMALL}; font-weight: {Fonts.WEIGHT_BOLD}; color: {C.TEXT_SECONDARY};")
        for label in self._value_labels.values():
            label.setStyleSheet(f"font-size: {Fonts.STAT_VALUE}; font-weight: {Fonts.WEIGHT_BOLD}; color: {C.TEXT_PRIMARY};")
