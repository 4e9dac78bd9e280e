from __future__ import annotations

# --- Standard Library Imports ---
import logging
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

# --- Third-Party Imports ---
from PyQt6.QtCore import QObject, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PyQt6.QtWidgets import QSizePolicy, QWidget

# --- First-Party (Local) Imports ---
from fandial import constants
from fandial.core.dial_controller import DialController
from fandial.core.fan_speed import FanSpeed
from fandial.utils.dial_renderer import DialRenderConfig
from fandial.views.dial.canvas import QPainterCanvas

# --- Type Checking ---
if TYPE_CHECKING:
    from fandial.constants.i18n import I18nStrings


class FanDialWidget(QWidget):
    """Circular dial that steps through the fan speeds on each click."""

    speed_changed = pyqtSignal(object)

    ACTIVATION_KEYS = (Qt.Key.Key_Space, Qt.Key.Key_Return, Qt.Key.Key_Enter, Qt.Key.Key_Select)

    def __init__(self, config: Optional[Dict[str, Any]] = None, i18n: Optional[I18nStrings] = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.{self.__class__.__name__}")

        if i18n is None:
            raise ValueError("An i18n instance must be provided to FanDialWidget.")
        self.i18n = i18n
        self.config: Dict[str, Any] = dict(config or constants.config.defaults.DEFAULT_CONFIG)

        # Host click listener. Returning True consumes the activation.
        self._activation_override: Optional[Callable[[], bool]] = None

        self.controller = DialController(self, i18n, DialRenderConfig.from_dict(self.config))

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(constants.dial.MINIMUM_SIZE, constants.dial.MINIMUM_SIZE)
        self.setAccessibleName(i18n.DIAL_ACCESSIBLE_NAME)
        self.setAccessibleDescription(self.controller.current_label())
        self.logger.debug("FanDialWidget initialized at speed %s.", self.controller.speed)

    # --- DialHost ---

    def request_redraw(self) -> None:
        self.update()

    def set_accessible_description(self, text: str) -> None:
        self.setAccessibleDescription(text)

    # --- Public API ---

    @property
    def speed(self) -> FanSpeed:
        return self.controller.speed

    def set_activation_override(self, callback: Optional[Callable[[], bool]]) -> None:
        """Installs a click listener that sees activations before the dial does."""
        self._activation_override = callback

    def perform_click(self) -> bool:
        """Activates the dial as a click would."""
        previous = self.controller.speed
        handled = self.controller.on_activate(self._activation_override)
        if self.controller.speed != previous:
            self.speed_changed.emit(self.controller.speed)
        return handled

    def sizeHint(self) -> QSize:
        return QSize(constants.dial.DEFAULT_SIZE, constants.dial.DEFAULT_SIZE)

    def minimumSizeHint(self) -> QSize:
        return QSize(constants.dial.MINIMUM_SIZE, constants.dial.MINIMUM_SIZE)

    # --- Qt event handlers ---

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self.controller.on_resize(size.width(), size.height())
        super().resizeEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Counts a left-button release inside the widget as a click."""
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.perform_click()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() in self.ACTIVATION_KEYS and not event.isAutoRepeat():
            self.perform_click()
            event.accept()
            return
        super().keyPressEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        """
        Handles all painting for the widget by delegating to the dial renderer.
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
            self.controller.render(QPainterCanvas(painter))
        except Exception as e:
            self.logger.error(f"Error in paintEvent: {e}", exc_info=True)
        finally:
            if painter.isActive():
                painter.end()
