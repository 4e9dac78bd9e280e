import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def q_app():
    """Provides a QApplication instance for the test session."""
    return QApplication.instance() or QApplication([])


class RecordingCanvas:
    """DialCanvas that records every draw call in order."""

    def __init__(self):
        self.calls = []

    def draw_filled_circle(self, x, y, radius, color):
        self.calls.append(("circle", x, y, radius, color))

    def draw_centered_text(self, x, y, text, color, font):
        self.calls.append(("text", x, y, text, color, font))

    def circles(self):
        return [c for c in self.calls if c[0] == "circle"]

    def texts(self):
        return [c for c in self.calls if c[0] == "text"]


class LabelsStub:
    """Stands in for I18nStrings with the English labels."""
    FAN_OFF = "Off"
    FAN_LOW = "Low"
    FAN_MEDIUM = "Medium"
    FAN_HIGH = "High"
    WINDOW_TITLE = "Fan Controller"
    DIAL_ACCESSIBLE_NAME = "Fan speed dial"


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def labels():
    return LabelsStub()
