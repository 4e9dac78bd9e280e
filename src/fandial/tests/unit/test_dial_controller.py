"""
Unit tests for DialController: activation flow and the render sequence.
"""
from unittest.mock import MagicMock

import pytest

from fandial import constants
from fandial.core.dial_controller import DialController
from fandial.core.fan_colors import configure
from fandial.core.fan_speed import FAN_SPEEDS, OFF, LOW, MEDIUM, HIGH
from fandial.core.interfaces import LabelFont
from fandial.utils.dial_renderer import DialRenderConfig


@pytest.fixture
def host():
    return MagicMock()


@pytest.fixture
def controller(host, labels):
    config = DialRenderConfig(colors=configure(0x00FF00, 0xFFFF00, 0xFF0000))
    return DialController(host, labels, config)


def test_initial_speed_is_off(controller):
    assert controller.speed is OFF
    assert controller.current_label() == "Off"


def test_activate_advances_and_notifies_host(controller, host):
    assert controller.on_activate() is True
    assert controller.speed is LOW
    host.set_accessible_description.assert_called_once_with("Low")
    host.request_redraw.assert_called_once()


@pytest.mark.parametrize("activations", range(9))
def test_n_activations_land_on_n_mod_4(controller, host, activations):
    for _ in range(activations):
        controller.on_activate()
    assert controller.speed is FAN_SPEEDS[activations % 4]
    if activations:
        host.set_accessible_description.assert_called_with(controller.current_label())


def test_base_handler_consuming_event_short_circuits(controller, host):
    base_handler = MagicMock(return_value=True)
    assert controller.on_activate(base_handler) is True
    base_handler.assert_called_once()
    assert controller.speed is OFF
    host.set_accessible_description.assert_not_called()
    host.request_redraw.assert_not_called()


def test_base_handler_not_consuming_event_lets_dial_advance(controller, host):
    assert controller.on_activate(MagicMock(return_value=False)) is True
    assert controller.speed is LOW
    host.request_redraw.assert_called_once()


def test_fill_color_follows_speed(controller):
    assert controller.fill_color() == constants.color.GRAY
    controller.on_activate()
    assert controller.fill_color() == 0x00FF00
    controller.on_activate()
    assert controller.fill_color() == 0xFFFF00
    controller.on_activate()
    assert controller.fill_color() == 0xFF0000


def test_unconfigured_color_is_drawn_as_sentinel(host, labels, canvas):
    controller = DialController(host, labels)
    controller.on_resize(100, 100)
    controller.on_activate()
    controller.render(canvas)
    assert canvas.circles()[0][4] == constants.color.UNSET


def test_render_sequence(controller, canvas):
    controller.on_resize(100, 100)
    controller.render(canvas)

    kinds = [call[0] for call in canvas.calls]
    assert kinds == ["circle", "circle", "text", "text", "text", "text"]

    _, x, y, radius, color = canvas.calls[0]
    assert (x, y) == (50, 50)
    assert radius == pytest.approx(40.0)
    assert color == constants.color.GRAY

    _, x, y, radius, color = canvas.calls[1]
    expected = controller.state.position_for_speed(OFF, 40.0 - 35)
    assert (x, y) == pytest.approx(expected)
    assert radius == pytest.approx(40.0 / 12)
    assert color == constants.color.BLACK


def test_labels_drawn_outside_dial_in_ordinal_order(controller, canvas):
    controller.on_resize(200, 200)
    controller.on_activate()
    controller.render(canvas)

    texts = canvas.texts()
    assert [t[3] for t in texts] == ["Off", "Low", "Medium", "High"]
    for speed, (_, x, y, _text, color, font) in zip(FAN_SPEEDS, texts):
        assert (x, y) == pytest.approx(controller.state.position_for_speed(speed, 80.0 + 30))
        assert color == constants.color.LABEL_COLOR
        assert isinstance(font, LabelFont)


def test_indicator_tracks_current_speed(controller, canvas):
    controller.on_resize(200, 200)
    for _ in range(3):
        controller.on_activate()
    controller.render(canvas)
    _, x, y, _radius, _color = canvas.circles()[1]
    assert (x, y) == pytest.approx(controller.state.position_for_speed(HIGH, 80.0 - 35))


def test_render_does_not_change_state(controller, canvas):
    controller.on_resize(100, 100)
    controller.on_activate()
    controller.render(canvas)
    controller.render(canvas)
    assert controller.speed is LOW
    assert canvas.calls[:6] == canvas.calls[6:]


@pytest.mark.parametrize("size", [(0, 0), (0, 100), (-20, 50)])
def test_degenerate_size_draws_no_circles(controller, canvas, size):
    controller.on_resize(*size)
    controller.render(canvas)
    assert canvas.circles() == []
    assert len(canvas.texts()) == 4


def test_end_to_end(controller, host, canvas):
    controller.on_resize(100, 100)
    assert controller.radius == pytest.approx(40.0)

    controller.on_activate()
    assert controller.speed is LOW
    host.set_accessible_description.assert_called_with("Low")
    controller.render(canvas)
    assert canvas.circles()[0][4] == 0x00FF00

    for _ in range(3):
        controller.on_activate()
    assert controller.speed is OFF
    canvas.calls.clear()
    controller.render(canvas)
    assert canvas.circles()[0][4] == constants.color.GRAY
