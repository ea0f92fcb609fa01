import pygame
import pytest

from gridquest.frame_input import FrameInput
from gridquest.game import Game, GameState
from gridquest.menu_screen import MenuScreen
from gridquest.play_screen import PlayScreen

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def _surface(color, size=(16, 16)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


@pytest.fixture
def game():
    menu = MenuScreen(_surface(RED))
    play = PlayScreen(_surface((0, 255, 0)), _surface(BLUE), items=[])
    return Game(menu, play)


CLICK_ON_BUTTON = FrameInput(cursor=(300, 220), mouse_down=True, mouse_pressed=True)


def test_starts_in_menu(game):
    assert game.state is GameState.MENU


def test_idle_frame_keeps_menu(game):
    game.update(FrameInput(cursor=(300, 220)))
    assert game.state is GameState.MENU


def test_click_outside_button_keeps_menu(game):
    game.update(FrameInput(cursor=(10, 10), mouse_down=True, mouse_pressed=True))
    assert game.state is GameState.MENU


def test_click_on_button_switches_to_play(game):
    game.update(CLICK_ON_BUTTON)
    assert game.state is GameState.PLAY
    game.update(FrameInput())
    assert game.state is GameState.PLAY


def test_play_not_updated_while_in_menu(game):
    game.update(FrameInput(keys_pressed={pygame.K_f}))
    assert game.play.inventory_loaded is False


def test_play_updated_after_switch(game):
    game.update(CLICK_ON_BUTTON)
    game.update(FrameInput(keys_pressed={pygame.K_f}))
    assert game.play.inventory_loaded is True


@pytest.mark.parametrize("outside", [(800, 600), (1920, 1080), (1, 1)])
def test_layout_is_fixed(game, outside):
    assert game.layout(*outside) == (800, 600)


def test_draw_menu_covers_screen_with_background(game):
    screen = pygame.Surface((800, 600))
    game.draw(screen, FrameInput(), 60.0)
    assert screen.get_at((700, 500))[:3] == RED


def test_draw_play_shows_background_and_grid(game):
    game.update(CLICK_ON_BUTTON)
    screen = pygame.Surface((800, 600))
    game.draw(screen, FrameInput(), 60.0)
    assert screen.get_at((700, 500))[:3] == BLUE
    assert screen.get_at((32, 300))[:3] == (255, 255, 255)


def test_draw_adds_fps_text(game):
    bare = pygame.Surface((800, 600))
    game.menu.draw(bare, FrameInput())
    with_fps = pygame.Surface((800, 600))
    game.draw(with_fps, FrameInput(), 59.5)
    region = [(x, y) for x in range(10, 90) for y in range(10, 26)]
    assert any(bare.get_at(p) != with_fps.get_at(p) for p in region)
    far = (700, 500)
    assert bare.get_at(far) == with_fps.get_at(far)