import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from gridquest.frame_input import FrameInput
from gridquest.menu_screen import MenuScreen

BX, BY, BW, BH = MenuScreen.START_BUTTON
TEXT_WIDTH = len(MenuScreen.BUTTON_TEXT) * 6


@pytest.fixture
def menu():
    background = pygame.Surface((10, 10))
    background.fill((255, 0, 0))
    return MenuScreen(background)


def test_start_button_rect_from_source(menu):
    layout = menu.button_layout((0, 0), False)
    assert (layout.left, layout.top, layout.width, layout.height) == (220, 200, 200, 50)
    assert menu.button_hovered((220, 200)) is True
    assert menu.button_hovered((420, 250)) is True
    assert menu.button_hovered((219, 200)) is False


def test_hover_edges_inclusive(menu):
    assert menu.button_hovered((BX, BY)) is True
    assert menu.button_hovered((BX + BW, BY + BH)) is True
    assert menu.button_hovered((BX + BW + 1, BY)) is False
    assert menu.button_hovered((BX, BY - 1)) is False


def test_update_without_click(menu):
    assert menu.update(FrameInput(cursor=(BX + 1, BY + 1))) is False


def test_update_click_outside(menu):
    frame = FrameInput(cursor=(BX - 5, BY), mouse_pressed=True)
    assert menu.update(frame) is False


def test_update_click_on_button_sticks(menu):
    assert menu.update(FrameInput(cursor=(BX + 10, BY + 10), mouse_pressed=True)) is True
    assert menu.update(FrameInput()) is True


def test_idle_layout(menu):
    layout = menu.button_layout((0, 0), False)
    assert layout.scale == 1.0
    assert layout.color == (100, 200, 100, 255)
    assert (layout.left, layout.top, layout.width, layout.height) == (BX, BY, BW, BH)
    assert BX <= layout.text_x and layout.text_x + TEXT_WIDTH <= BX + BW
    assert BY <= layout.text_y and layout.text_y + 16 <= BY + BH


@pytest.mark.parametrize("mouse_down, scale", [(False, 1.05), (True, 0.95)])
def test_hover_layout_keeps_center(menu, mouse_down, scale):
    layout = menu.button_layout((BX + 1, BY + 1), mouse_down)
    assert layout.scale == scale
    assert layout.color == (150, 255, 150, 255)
    assert layout.width == pytest.approx(BW * scale)
    assert layout.height == pytest.approx(BH * scale)
    assert layout.left + layout.width / 2 == pytest.approx(BX + BW / 2)
    assert layout.top + layout.height / 2 == pytest.approx(BY + BH / 2)
    assert abs(layout.text_x + TEXT_WIDTH / 2 - (BX + BW / 2)) <= 1


def test_draw_fills_background_and_button(menu):
    surface = pygame.Surface((800, 600))
    menu.draw(surface, FrameInput())
    assert tuple(surface.get_at((0, 0)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((799, 599)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((BX + 1, BY + 1)))[:3] == (100, 200, 100)


def test_draw_pressed_button_shrinks(menu):
    surface = pygame.Surface((800, 600))
    frame = FrameInput(cursor=(BX + 100, BY + 40), mouse_down=True)
    menu.draw(surface, frame)
    assert tuple(surface.get_at((BX + 1, BY + 1)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((BX + 10, BY + 5)))[:3] == (150, 255, 150)