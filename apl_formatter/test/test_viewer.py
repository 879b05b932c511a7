"""
Tests for viewer.py (skipped when PyQt6 is not installed)
"""
import pytest

pytest.importorskip("PyQt6.QtWidgets")


@pytest.fixture
def qapp(monkeypatch):
    """Offscreen QApplication shared by the viewer tests"""
    monkeypatch.setenv("QT_QPA_PLATFORM", "offscreen")
    from PyQt6.QtWidgets import QApplication
    return QApplication.instance() or QApplication([])


class TestFormatterWindow:
    """Panel rebuilding on input changes"""

    def test_one_panel_per_key(self, qapp, sample_script):
        from apl_formatter.viewer import FormatterWindow

        window = FormatterWindow()
        window.input_box.setPlainText(sample_script)
        assert window.panel_layout.count() == 2

        titles = [window.panel_layout.itemAt(i).widget().title()
                  for i in range(window.panel_layout.count())]
        assert titles == ["actions", "precombat"]

    def test_clearing_input_removes_panels(self, qapp, sample_script):
        from apl_formatter.viewer import FormatterWindow

        window = FormatterWindow()
        window.input_box.setPlainText(sample_script)
        window.input_box.setPlainText("")
        assert window.panel_layout.count() == 0
