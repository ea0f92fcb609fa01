"""Start menu with a single clickable start button."""

from __future__ import annotations

import functools
from dataclasses import dataclass

import pygame

from gridquest.frame_input import FrameInput

_CHAR_WIDTH = 6
_CHAR_HEIGHT = 16


@functools.lru_cache(maxsize=None)
def _debug_font() -> pygame.font.Font:
    pygame.font.init()
    return pygame.font.Font(None, _CHAR_HEIGHT)


def _debug_print(surface: pygame.Surface, text: str, x: int, y: int) -> None:
    surface.blit(_debug_font().render(text, True, (255, 255, 255)), (x, y))


@dataclass(frozen=True)
class ButtonLayout:
    """Where and how the start button is drawn for one frame."""

    color: tuple[int, int, int, int]
    scale: float
    left: float
    top: float
    width: float
    height: float
    text_x: int
    text_y: int

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(
            round(self.left), round(self.top), round(self.width), round(self.height)
        )


class MenuScreen:
    """The opening screen; reports when the start button has been clicked."""

    START_BUTTON = (220, 200, 200, 50)
    BUTTON_TEXT = "START_THE_GAME"
    IDLE_COLOR = (100, 200, 100, 255)
    HOVER_COLOR = (150, 255, 150, 255)

    def __init__(self, background: pygame.Surface) -> None:
        self.background = background
        self.clicked = False

    def button_hovered(self, cursor: tuple[int, int]) -> bool:
        """Return True if the cursor lies on the start button, edges included."""
        x, y, w, h = self.START_BUTTON
        cx, cy = cursor
        return x <= cx <= x + w and y <= cy <= y + h

    def update(self, frame: FrameInput) -> bool:
        """Record a click on the button; return True once it has been clicked."""
        if self.button_hovered(frame.cursor) and frame.mouse_pressed:
            self.clicked = True
        return self.clicked

    def button_layout(self, cursor: tuple[int, int], mouse_down: bool) -> ButtonLayout:
        """Work out colour, scale, rectangle and label position of the button."""
        x, y, w, h = self.START_BUTTON
        color = self.IDLE_COLOR
        scale = 1.0
        if self.button_hovered(cursor):
            color = self.HOVER_COLOR
            scale = 0.95 if mouse_down else 1.05

        text_width = len(self.BUTTON_TEXT) * _CHAR_WIDTH
        text_height = _CHAR_HEIGHT
        if scale != 1.0:
            center_x = x + w / 2
            center_y = y + h / 2
            left = center_x - w * scale / 2
            top = center_y - h * scale / 2
            text_x = int(center_x - text_width / 2)
            text_y = int(center_y - text_height / 2)
        else:
            left, top = float(x), float(y)
            text_x = x + (w - text_width) // 2
            text_y = y + (h - text_height) // 2

        return ButtonLayout(
            color=color,
            scale=scale,
            left=left,
            top=top,
            width=w * scale,
            height=h * scale,
            text_x=text_x,
            text_y=text_y,
        )

    def draw(self, surface: pygame.Surface, frame: FrameInput) -> None:
        self.draw_background(surface)
        self.draw_start_button(surface, frame)

    def draw_background(self, surface: pygame.Surface) -> None:
        """Stretch the background over the whole surface."""
        scaled = pygame.transform.scale(self.background, surface.get_size())
        surface.blit(scaled, (0, 0))

    def draw_start_button(self, surface: pygame.Surface, frame: FrameInput) -> None:
        layout = self.button_layout(frame.cursor, frame.mouse_down)
        surface.fill(layout.color, layout.rect)
        _debug_print(surface, self.BUTTON_TEXT, layout.text_x, layout.text_y)