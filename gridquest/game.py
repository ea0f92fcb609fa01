"""Top-level game object that switches between the menu and play screens."""

from __future__ import annotations

import argparse
import enum
import functools
import sys

import pygame

from gridquest.frame_input import FrameInput
from gridquest.items import load_image
from gridquest.menu_screen import MenuScreen
from gridquest.play_screen import PlayScreen

SCREEN_SIZE = (800, 600)
WINDOW_TITLE = "贾先生的2D游戏 - 开始界面 Demo"
TARGET_FPS = 60

MENU_BACKGROUND = "photos/beijing.png"
PLAYER_IMAGE = "photos/zhu.png"
PLAY_BACKGROUND = "photos/playBeijing.png"


@functools.lru_cache(maxsize=None)
def _debug_font() -> pygame.font.Font:
    pygame.font.init()
    return pygame.font.Font(None, 16)


def _debug_print(surface: pygame.Surface, text: str, x: int, y: int) -> None:
    surface.blit(_debug_font().render(text, True, (255, 255, 255)), (x, y))


class GameState(enum.Enum):
    """Which screen is active."""

    MENU = enum.auto()
    PLAY = enum.auto()


class Game:
    """Holds both screens and forwards update and draw to the active one."""

    def __init__(self, menu: MenuScreen, play: PlayScreen) -> None:
        self.menu = menu
        self.play = play
        self.state = GameState.MENU

    def update(self, frame: FrameInput) -> None:
        """Advance the active screen by one frame."""
        if self.state is GameState.MENU:
            if self.menu.update(frame):
                self.state = GameState.PLAY
        elif self.state is GameState.PLAY:
            self.play.update(frame)

    def draw(self, surface: pygame.Surface, frame: FrameInput, fps: float) -> None:
        """Draw the active screen and the frame-rate counter."""
        if self.state is GameState.MENU:
            self.menu.draw(surface, frame)
        elif self.state is GameState.PLAY:
            self.play.draw(surface, frame)
        _debug_print(surface, f"FPS: {fps:.2f}", 10, 10)

    def layout(self, outside_width: int, outside_height: int) -> tuple[int, int]:
        """Return the logical screen size, whatever the window size is."""
        return SCREEN_SIZE


class _InputTracker:
    """Turns pygame events into one FrameInput per frame."""

    def __init__(self) -> None:
        self.held: set[int] = set()
        self.quit = False

    def poll(self) -> FrameInput:
        pressed: set[int] = set()
        mouse_pressed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit = True
            elif event.type == pygame.KEYDOWN:
                self.held.add(event.key)
                pressed.add(event.key)
            elif event.type == pygame.KEYUP:
                self.held.discard(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mouse_pressed = True
        return FrameInput(
            cursor=pygame.mouse.get_pos(),
            keys_down=frozenset(self.held),
            keys_pressed=frozenset(pressed),
            mouse_down=bool(pygame.mouse.get_pressed()[0]),
            mouse_pressed=mouse_pressed,
        )


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run the main loop until it is closed."""
    parser = argparse.ArgumentParser(prog="gridquest", description="A small 2D grid game.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            menu = MenuScreen(load_image(MENU_BACKGROUND))
            play = PlayScreen(load_image(PLAYER_IMAGE), load_image(PLAY_BACKGROUND))
            for item in play.items:
                item.data.image()
        except (FileNotFoundError, pygame.error) as exc:
            print(exc, file=sys.stderr)
            return 1

        game = Game(menu, play)
        logical = pygame.Surface(game.layout(*screen.get_size()))
        clock = pygame.time.Clock()
        tracker = _InputTracker()

        while True:
            frame = tracker.poll()
            if tracker.quit:
                return 0
            fps = clock.get_fps()
            play.tps = fps if fps > 0 else float(TARGET_FPS)
            play.window_size = screen.get_size()
            game.update(frame)

            logical.fill((0, 0, 0))
            game.draw(logical, frame, fps)
            if logical.get_size() == screen.get_size():
                screen.blit(logical, (0, 0))
            else:
                screen.blit(pygame.transform.scale(logical, screen.get_size()), (0, 0))
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()