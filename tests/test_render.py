import struct

import pygame
import pytest

from mygl2d.animation import Frame
from mygl2d.render import Renderer, image_to_surface
from mygl2d.tga import TgaImage

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def renderer():
    r = Renderer(pygame.Surface((64, 64), pygame.SRCALPHA))
    r.clear()
    return r


def test_clear_makes_black(renderer):
    renderer.fill_rect(0, 0, 10, 10)
    renderer.clear()
    assert renderer.surface.get_at((5, 5)) == BLACK


def test_draw_point(renderer):
    renderer.draw_point(3, 4)
    assert renderer.surface.get_at((3, 4)) == WHITE
    assert renderer.surface.get_at((4, 4)) == BLACK


def test_fill_rect_inside_and_outside(renderer):
    renderer.fill_rect(10, 10, 5, 5)
    assert renderer.surface.get_at((12, 12)) == WHITE
    assert renderer.surface.get_at((20, 20)) == BLACK


def test_draw_rect_leaves_interior(renderer):
    renderer.draw_rect(10, 10, 20, 20)
    assert renderer.surface.get_at((10, 10)) == WHITE
    assert renderer.surface.get_at((20, 20)) == BLACK


def test_draw_line(renderer):
    renderer.draw_line(0, 5, 20, 5)
    assert renderer.surface.get_at((10, 5)) == WHITE


def test_fill_and_draw_circle(renderer):
    renderer.draw_circle(32, 32, 10)
    assert renderer.surface.get_at((42, 32)) == WHITE
    assert renderer.surface.get_at((32, 32)) == BLACK
    renderer.fill_circle(32, 32, 10)
    assert renderer.surface.get_at((32, 32)) == WHITE


def test_fill_oval(renderer):
    renderer.fill_oval(32, 32, 20, 5)
    assert renderer.surface.get_at((45, 32)) == WHITE
    assert renderer.surface.get_at((32, 45)) == BLACK


def test_polygon_with_two_points_draws_nothing(renderer):
    renderer.draw_polygon([(1, 1), (30, 30)])
    renderer.fill_polygon([(1, 1), (30, 30)])
    assert renderer.surface.get_at((1, 1)) == BLACK
    assert renderer.surface.get_at((15, 15)) == BLACK


def test_fill_polygon(renderer):
    renderer.color = (255, 0, 0, 255)
    renderer.fill_polygon([(0, 0), (40, 0), (40, 40), (0, 40)])
    assert renderer.surface.get_at((20, 20)) == (255, 0, 0, 255)


def test_image_to_surface_pixels():
    image = TgaImage(2, 1, 3, bytes([10, 20, 30, 40, 50, 60]))
    surface = image_to_surface(image)
    assert surface.get_size() == (2, 1)
    assert surface.get_at((0, 0)) == (10, 20, 30, 255)
    assert surface.get_at((1, 0)) == (40, 50, 60, 255)


def test_image_to_surface_bad_channels():
    with pytest.raises(ValueError):
        image_to_surface(TgaImage(1, 1, 2, bytes(2)))


def test_load_targa(tmp_path, renderer):
    header = struct.pack("<BBBHHBHHHHBB", 0, 0, 2, 0, 0, 0, 0, 0, 1, 2, 32, 0)
    path = tmp_path / "a.tga"
    path.write_bytes(header + bytes([1, 2, 3, 255]) + bytes([4, 5, 6, 255]))
    surface = renderer.load_targa(path)
    assert surface.get_at((0, 0)) == (4, 5, 6, 255)
    assert surface.get_at((0, 1)) == (1, 2, 3, 255)


def test_draw_image_with_clip(renderer):
    sheet = image_to_surface(TgaImage(4, 1, 3, bytes([0, 0, 1, 0, 0, 2, 0, 0, 3, 0, 0, 4])))
    renderer.draw_image_with_clip(sheet, Frame(2, 0, 1, 1), 5, 5)
    assert renderer.surface.get_at((5, 5)) == (0, 0, 3, 255)
    assert renderer.surface.get_at((6, 5)) == BLACK


def test_draw_image(renderer):
    image = image_to_surface(TgaImage(1, 1, 4, bytes([9, 8, 7, 255])))
    renderer.draw_image(image, 7, 8)
    assert renderer.surface.get_at((7, 8)) == (9, 8, 7, 255)