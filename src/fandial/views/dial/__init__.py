from .canvas import QPainterCanvas
from .main import FanDialWidget

__all__ = ["FanDialWidget", "QPainterCanvas"]
