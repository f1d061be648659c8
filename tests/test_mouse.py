import pytest

from lutro.mouse import RETRO_DEVICE_MOUSE, Mouse, MouseId
from lutro.runtime import LutroError


def make_input(values):
    calls = []

    def input_state(port, device, index, ident):
        calls.append((port, device, index, ident))
        return values.get(ident, 0)

    input_state.calls = calls
    return input_state


def test_update_polls_every_id_on_mouse_device():
    mouse = Mouse()
    state = make_input({})
    mouse.update(state)
    assert [c[3] for c in state.calls] == list(range(8))
    assert all(c[1] == RETRO_DEVICE_MOUSE for c in state.calls)


def test_position_accumulates_motion():
    mouse = Mouse()
    mouse.update(make_input({MouseId.X: 5, MouseId.Y: 7}))
    mouse.update(make_input({MouseId.X: 3, MouseId.Y: 2}))
    assert mouse.get_x() == 5 + 3
    assert mouse.get_y() == 7 + 2
    assert mouse.get_position() == (mouse.get_x(), mouse.get_y())


def test_negative_position_wraps_unsigned():
    mouse = Mouse()
    mouse.update(make_input({MouseId.X: -1}))
    assert mouse.get_x() == 0xFFFFFFFF


def test_is_down_maps_buttons():
    mouse = Mouse()
    mouse.update(make_input({MouseId.RIGHT: 1}))
    assert mouse.is_down(2) is True
    assert mouse.is_down(1) is False
    assert mouse.is_down(1, 3, 2) is True
    assert mouse.is_down(4) is False


def test_buttons_are_replaced_not_accumulated():
    mouse = Mouse()
    mouse.update(make_input({MouseId.LEFT: 1, MouseId.MIDDLE: 1}))
    assert mouse.is_down(1) and mouse.is_down(3)
    mouse.update(make_input({}))
    assert mouse.is_down(1, 3) is False


def test_is_down_requires_argument():
    with pytest.raises(LutroError):
        Mouse().is_down()


def test_is_down_rejects_non_number():
    with pytest.raises(TypeError):
        Mouse().is_down("left")


@pytest.mark.parametrize("method", ["get_x", "get_y", "get_position"])
def test_getters_take_no_arguments(method):
    with pytest.raises(LutroError):
        getattr(Mouse(), method)(1)