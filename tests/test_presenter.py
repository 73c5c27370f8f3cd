import pytest

from pixelsim.board import Pixel
from pixelsim.presenter import BoardPresenter, pixel_color


@pytest.fixture
def presenter():
    return BoardPresenter(12, 8)


def test_air_color_is_fixed():
    assert pixel_color(Pixel.AIR, 3, 5) == (254, 254, 254)
    assert pixel_color(Pixel.AIR, 0, 0) == (254, 254, 254)


def test_unshaded_origin_colors():
    assert pixel_color(Pixel.WOOD, 0, 0) == (150, 75, 0)
    assert pixel_color(Pixel.SAND, 0, 0) == (194, 178, 128)
    assert pixel_color(Pixel.SMOKE, 0, 0) == (175, 175, 175)


def test_stone_and_smoke_are_grey_everywhere():
    for y in range(4):
        for x in range(12):
            red, green, blue = pixel_color(Pixel.STONE, y, x)
            assert red == green == blue
            red, green, blue = pixel_color(Pixel.SMOKE, y, x)
            assert red == green == blue


def test_wood_blue_channel_never_shaded():
    assert all(pixel_color(Pixel.WOOD, y, x)[2] == 0 for y in range(5) for x in range(15))


def test_colors_stay_in_byte_range():
    for pixel in Pixel:
        for y in range(3):
            for x in range(20):
                assert all(0 <= c <= 255 for c in pixel_color(pixel, y, x))


def test_construction_shapes_board_and_frame(presenter):
    assert presenter.board.width == 12
    assert presenter.board.height == 8
    assert presenter.frame.shape == (8, 12, 3)
    assert presenter.get_at(0, 0) is Pixel.STONE
    assert presenter.get_at(3, 3) is Pixel.AIR


def test_base_material_fills_interior():
    wood = BoardPresenter(6, 5, Pixel.WOOD)
    assert wood.get_at(2, 2) is Pixel.WOOD
    assert wood.get_at(4, 2) is Pixel.STONE


def test_update_visual_matches_pixel_color(presenter):
    presenter.set_at(2, 3, Pixel.WATER)
    presenter.set_at(4, 5, Pixel.FIRE)
    presenter.draw_cube(5, 1, 1, Pixel.SAND)
    presenter.update_visual()
    for y in range(presenter.height):
        for x in range(presenter.width):
            expected = pixel_color(presenter.get_at(y, x), y, x)
            assert tuple(int(c) for c in presenter.frame[y, x]) == expected


def test_set_at_ignores_frame(presenter):
    presenter.set_at(0, 4, Pixel.SAND)
    presenter.set_at(3, 11, Pixel.SAND)
    assert presenter.get_at(0, 4) is Pixel.STONE
    assert presenter.get_at(3, 11) is Pixel.STONE


def test_draw_square_delegates(presenter):
    presenter.draw_square(4, 5, 2, 3, Pixel.WOOD)
    assert all(
        presenter.get_at(y, x) is Pixel.WOOD for y in range(2, 5) for x in range(3, 6)
    )
    assert presenter.get_at(1, 3) is Pixel.AIR


def test_update_math_keeps_empty_board(presenter):
    before = [[presenter.get_at(y, x) for x in range(12)] for y in range(8)]
    presenter.update_math()
    after = [[presenter.get_at(y, x) for x in range(12)] for y in range(8)]
    assert after == before


def test_quit_keys(presenter):
    assert presenter.handle_key("q") is False
    assert presenter.handle_key("Q") is False
    assert presenter.handle_key("x") is True


def test_pause_toggles(presenter):
    presenter.handle_key("p")
    assert presenter.paused is True
    presenter.handle_key("P")
    assert presenter.paused is False


def test_delay_adjustment(presenter):
    presenter.handle_key("-")
    assert presenter.delay == 1
    presenter.handle_key("+")
    presenter.handle_key("+")
    presenter.handle_key("-")
    assert presenter.delay == 6


def test_material_selection(presenter):
    presenter.handle_key("3")
    assert presenter.paint_material is Pixel.SAND
    presenter.handle_key(ord("5"))
    assert presenter.paint_material is Pixel.FIRE
    presenter.handle_key("7")
    assert presenter.paint_material is Pixel.FIRE
    presenter.handle_key("")
    assert presenter.paint_material is Pixel.FIRE


def test_left_drag_paints(presenter):
    presenter.handle_key("1")
    presenter.handle_mouse("left_down", 4, 2)
    assert presenter.get_at(2, 4) is Pixel.WOOD
    presenter.handle_mouse("move", 5, 3)
    assert presenter.get_at(3, 5) is Pixel.WOOD
    presenter.handle_mouse("left_up", 6, 3)
    presenter.handle_mouse("move", 7, 3)
    assert presenter.get_at(3, 6) is Pixel.AIR
    assert presenter.get_at(3, 7) is Pixel.AIR


def test_move_without_press_does_not_paint(presenter):
    presenter.handle_key("2")
    presenter.handle_mouse("move", 3, 3)
    assert presenter.get_at(3, 3) is Pixel.AIR


def test_right_clicks_draw_rectangle(presenter):
    presenter.handle_key("4")
    presenter.handle_mouse("right_down", 2, 2)
    assert presenter.first_corner == (2, 2)
    assert presenter.get_at(2, 2) is Pixel.AIR
    presenter.handle_mouse("right_down", 4, 5)
    assert presenter.first_corner is None
    assert all(
        presenter.get_at(y, x) is Pixel.STONE for y in range(2, 6) for x in range(2, 5)
    )
    assert presenter.get_at(6, 2) is Pixel.AIR


def test_unknown_mouse_event(presenter):
    with pytest.raises(ValueError):
        presenter.handle_mouse("double_click", 1, 1)