"""Interactive viewer - paste a script, see grouped conditions live

One read-only panel per trigger key, regrouped from scratch on every edit.
"""

import sys
from typing import Optional

from PyQt6.QtWidgets import (
    QApplication, QGridLayout, QGroupBox, QScrollArea, QTextEdit, QVBoxLayout, QWidget
)
from PyQt6.QtGui import QFont

from .config import DEFAULT_CONFIG, FormatterConfig
from .grouper import build_groups


PANEL_COLUMNS = 2


class FormatterWindow(QWidget):
    def __init__(self, config: Optional[FormatterConfig] = None):
        super().__init__()
        self.config = config or DEFAULT_CONFIG
        self.setWindowTitle("APL Formatter")
        self.setGeometry(200, 200, 1200, 800)

        mono = QFont("Monospace")
        mono.setStyleHint(QFont.StyleHint.TypeWriter)
        self.mono = mono

        self.input_box = QTextEdit()
        self.input_box.setFont(mono)
        self.input_box.setPlaceholderText("Paste your APL here...")
        self.input_box.setMinimumHeight(200)
        self.input_box.textChanged.connect(self.refresh)

        self.panels = QWidget()
        self.panel_layout = QGridLayout(self.panels)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.panels)

        layout = QVBoxLayout()
        layout.addWidget(self.input_box)
        layout.addWidget(scroll, stretch=1)
        self.setLayout(layout)

    def refresh(self):
        """Rebuild every panel from the current input text"""
        while self.panel_layout.count():
            widget = self.panel_layout.takeAt(0).widget()
            if widget is not None:
                widget.deleteLater()

        groups = build_groups(self.input_box.toPlainText(), self.config)
        for i, group in enumerate(groups):
            box = QGroupBox(group.key)
            body = QTextEdit()
            body.setReadOnly(True)
            body.setFont(self.mono)
            body.setPlainText(group.body(self.config.entry_separator))
            box_layout = QVBoxLayout(box)
            box_layout.addWidget(body)
            self.panel_layout.addWidget(box, i // PANEL_COLUMNS, i % PANEL_COLUMNS)


def run_viewer(initial_text: str = "", config: Optional[FormatterConfig] = None) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    window = FormatterWindow(config)
    window.input_box.setPlainText(initial_text)
    window.show()
    return app.exec()
