from mygl2d.keys import MouseButton
from mygl2d.mouse import Mouse


def test_new_mouse_is_idle():
    mouse = Mouse()
    assert (mouse.x, mouse.y) == (0, 0)
    assert not mouse.is_left_button_down
    assert not mouse.is_right_button_down


def test_update_position():
    mouse = Mouse()
    mouse.update((12, 34), [])
    assert (mouse.x, mouse.y) == (12, 34)


def test_left_button():
    mouse = Mouse()
    mouse.update((0, 0), [MouseButton.LEFT])
    assert mouse.is_left_button_down
    assert not mouse.is_right_button_down


def test_right_button_and_middle_ignored():
    mouse = Mouse()
    mouse.update((0, 0), {MouseButton.RIGHT, MouseButton.MIDDLE})
    assert mouse.is_right_button_down
    assert not mouse.is_left_button_down


def test_release_clears_state():
    mouse = Mouse()
    mouse.update((1, 1), [MouseButton.LEFT, MouseButton.RIGHT])
    mouse.update((2, 2), [])
    assert not mouse.is_left_button_down
    assert not mouse.is_right_button_down