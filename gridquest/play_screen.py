"""Main play screen: a grid map, a movable player and a paged inventory."""

from __future__ import annotations

import functools

import pygame

from gridquest.frame_input import FrameInput
from gridquest.items import Item, item_catalog

_CHAR_WIDTH = 6
_CHAR_HEIGHT = 16

_WHITE = (255, 255, 255, 255)
_PANEL_BORDER = (100, 100, 150, 255)
_PANEL_OUTLINE = (200, 200, 255, 255)
_SHADOW = (0, 0, 0, 100)
_DARK = (0, 0, 0, 200)
_SLOT_FILL = (50, 50, 70, 200)
_SLOT_BORDER = (150, 150, 200, 255)
_CLOSE_FILL = (200, 50, 50, 200)
_CLOSE_BORDER = (255, 100, 100, 255)

_MOVE_KEYS = (
    (pygame.K_j, -1, 0),
    (pygame.K_l, 1, 0),
    (pygame.K_i, 0, -1),
    (pygame.K_k, 0, 1),
)


@functools.lru_cache(maxsize=None)
def _debug_font() -> pygame.font.Font:
    pygame.font.init()
    return pygame.font.Font(None, _CHAR_HEIGHT)


def _debug_print(surface: pygame.Surface, text: str, x: int, y: int) -> None:
    surface.blit(_debug_font().render(text, True, (255, 255, 255)), (x, y))


def _fill(surface: pygame.Surface, color: tuple[int, ...], rect: pygame.Rect) -> None:
    """Fill ``rect``, blending when the colour is translucent."""
    if len(color) == 4 and color[3] < 255:
        if rect.width <= 0 or rect.height <= 0:
            return
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(color)
        surface.blit(overlay, rect.topleft)
    else:
        surface.fill(color[:3], rect)


def _stroke(
    surface: pygame.Surface, color: tuple[int, ...], rect: pygame.Rect, width: int
) -> None:
    """Outline ``rect``, blending when the colour is translucent."""
    if rect.width <= 0 or rect.height <= 0:
        return
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(overlay, color, overlay.get_rect(), width)
    surface.blit(overlay, rect.topleft)


def default_bag() -> list[Item]:
    """Return the starting bag: gold, a beginner sword and a first-level sword."""
    catalog = item_catalog()
    return [
        Item(catalog[1001], 50000),
        Item(catalog[1002], 1000),
        Item(catalog[1003], 1),
    ]


class PlayScreen:
    """The in-game screen holding the player, the map grid and the bag."""

    GRID_SIZE = 32
    PLAYER_SIZE = 32
    SPEED = 96.0
    SCREEN_SIZE = (800, 600)

    INVENTORY_WIDTH = 300
    INVENTORY_HEIGHT = 400
    ITEM_SIZE = 48
    ITEM_SPACING = 15
    ROWS_PER_PAGE = 5
    PAGE_BUTTON_SIZE = (60, 20)
    CLOSE_BUTTON_SIZE = 20

    def __init__(
        self,
        player_image: pygame.Surface,
        background: pygame.Surface,
        items: list[Item] | None = None,
        inventory_size: int = 5,
    ) -> None:
        self.player_image = player_image
        self.background = background
        self.items = default_bag() if items is None else list(items)
        self.inventory_size = inventory_size
        self.grid_size = self.GRID_SIZE
        self.player_x = 0.0
        self.player_y = 0.0
        self.inventory_loaded = False
        self.current_page = 0
        self.selected_item_index = 0
        self.tps = 60.0
        self.window_size = self.SCREEN_SIZE
        width, height = self.SCREEN_SIZE
        self.grid_data = [
            [0] * (width // self.grid_size) for _ in range(height // self.grid_size)
        ]

    # --- state -----------------------------------------------------------

    def update(self, frame: FrameInput) -> None:
        """Move the player, toggle the bag and move the bag selection."""
        for key, dx, dy in _MOVE_KEYS:
            if frame.key_down(key):
                self.move_player(dx, dy, self.tps, self.window_size)

        if frame.key_just_pressed(pygame.K_f):
            self.inventory_loaded = not self.inventory_loaded

        if not self.inventory_loaded:
            return
        if frame.key_just_pressed(pygame.K_UP) or frame.key_just_pressed(pygame.K_w):
            self.selected_item_index -= 1
            if self.selected_item_index < 0:
                self.selected_item_index = len(self.items) - 1
        if frame.key_just_pressed(pygame.K_DOWN) or frame.key_just_pressed(pygame.K_s):
            self.selected_item_index += 1
            if self.selected_item_index >= len(self.items):
                self.selected_item_index = 0

    def move_player(
        self, dx: float, dy: float, tps: float, window_size: tuple[int, int]
    ) -> None:
        """Move by one tick at the fixed speed, keeping the player in the window."""
        if tps <= 0:
            return
        delta = 1.0 / tps
        self.player_x += dx * self.SPEED * delta
        self.player_y += dy * self.SPEED * delta

        width, height = window_size
        if self.player_x < 0:
            self.player_x = 0.0
        if self.player_y < 0:
            self.player_y = 0.0
        if self.player_x > width - self.PLAYER_SIZE:
            self.player_x = float(width - self.PLAYER_SIZE)
        if self.player_y > height - self.PLAYER_SIZE:
            self.player_y = float(height - self.PLAYER_SIZE)

    # --- inventory geometry ----------------------------------------------

    def items_per_row(self) -> int:
        return (self.INVENTORY_WIDTH - 40) // (self.ITEM_SIZE + self.ITEM_SPACING)

    def items_per_page(self) -> int:
        return self.items_per_row() * self.ROWS_PER_PAGE

    def total_pages(self) -> int:
        """Number of bag pages, never less than one."""
        per_page = self.items_per_page()
        return max(1, -(-len(self.items) // per_page))

    def inventory_origin(self, screen_size: tuple[int, int]) -> tuple[int, int]:
        """Top-left corner of the bag panel centred on a screen of this size."""
        width, height = screen_size
        return (
            int((width - self.INVENTORY_WIDTH) / 2),
            int((height - self.INVENTORY_HEIGHT) / 2),
        )

    def item_slots(
        self, screen_size: tuple[int, int]
    ) -> list[tuple[int, Item, pygame.Rect]]:
        """Return (bag index, item, slot rectangle) for each item on the current page."""
        ox, oy = self.inventory_origin(screen_size)
        per_row = self.items_per_row()
        per_page = self.items_per_page()
        start = self.current_page * per_page
        step = self.ITEM_SIZE + self.ITEM_SPACING
        right_limit = ox + self.INVENTORY_WIDTH - 20

        slots = []
        for local, item in enumerate(self.items[start : start + per_page]):
            row, col = divmod(local, per_row)
            x = ox + 20 + col * step
            y = oy + 60 + row * step
            if x + self.ITEM_SIZE > right_limit:
                continue
            slots.append(
                (start + local, item, pygame.Rect(x, y, self.ITEM_SIZE, self.ITEM_SIZE))
            )
        return slots

    def _page_buttons(self, origin: tuple[int, int]) -> tuple[pygame.Rect, pygame.Rect]:
        ox, oy = origin
        bw, bh = self.PAGE_BUTTON_SIZE
        top = oy + self.INVENTORY_HEIGHT - 30
        prev_rect = pygame.Rect(ox + 20, top, bw, bh)
        next_rect = pygame.Rect(ox + self.INVENTORY_WIDTH - 80, top, bw, bh)
        return prev_rect, next_rect

    def _close_button(self, origin: tuple[int, int]) -> pygame.Rect:
        ox, oy = origin
        size = self.CLOSE_BUTTON_SIZE
        return pygame.Rect(ox + self.INVENTORY_WIDTH - size - 10, oy + 10, size, size)

    @staticmethod
    def _hit(cursor: tuple[int, int], rect: pygame.Rect) -> bool:
        cx, cy = cursor
        return rect.x <= cx <= rect.x + rect.width and rect.y <= cy <= rect.y + rect.height

    def handle_inventory_click(
        self, cursor: tuple[int, int], screen_size: tuple[int, int]
    ) -> None:
        """Apply a left click at ``cursor`` to the page and close buttons."""
        origin = self.inventory_origin(screen_size)
        prev_rect, next_rect = self._page_buttons(origin)
        page = self.current_page
        end_index = (page + 1) * self.items_per_page()

        if self._hit(cursor, prev_rect) and page > 0:
            self.current_page -= 1
        if self._hit(cursor, next_rect) and end_index < len(self.items):
            self.current_page += 1
        if self.inventory_loaded and self._hit(cursor, self._close_button(origin)):
            self.inventory_loaded = False

    # --- drawing ---------------------------------------------------------

    def draw(self, surface: pygame.Surface, frame: FrameInput) -> None:
        self.draw_background(surface)
        self.draw_grid(surface)
        self.draw_player(surface)
        if self.inventory_loaded:
            self.draw_inventory(surface, frame)

    def draw_background(self, surface: pygame.Surface) -> None:
        """Stretch the background over the whole surface."""
        scaled = pygame.transform.scale(self.background, surface.get_size())
        surface.blit(scaled, (0, 0))

    def draw_grid(self, surface: pygame.Surface) -> None:
        """Draw one-pixel white grid lines every ``grid_size`` pixels."""
        width, height = surface.get_size()
        for x in range(0, width + 1, self.grid_size):
            surface.fill(_WHITE[:3], pygame.Rect(x, 0, 1, height))
        for y in range(0, height + 1, self.grid_size):
            surface.fill(_WHITE[:3], pygame.Rect(0, y, width, 1))

    def draw_player(self, surface: pygame.Surface) -> None:
        sprite = pygame.transform.scale(
            self.player_image, (self.PLAYER_SIZE, self.PLAYER_SIZE)
        )
        surface.blit(sprite, (round(self.player_x), round(self.player_y)))

    def draw_inventory(self, surface: pygame.Surface, frame: FrameInput) -> None:
        """Draw the bag panel and apply any click made on it this frame."""
        screen_size = surface.get_size()
        origin = self.inventory_origin(screen_size)
        self._draw_panel(surface, origin)
        self._draw_header(surface, origin)
        self._draw_items(surface, frame.cursor, screen_size)
        if frame.mouse_pressed:
            self.handle_inventory_click(frame.cursor, screen_size)
        self._draw_pagination(surface, origin)
        self._draw_close_button(surface, origin)

    def _draw_panel(self, surface: pygame.Surface, origin: tuple[int, int]) -> None:
        ox, oy = origin
        rect = pygame.Rect(ox, oy, self.INVENTORY_WIDTH, self.INVENTORY_HEIGHT)
        _fill(surface, _DARK, rect)
        _stroke(surface, _PANEL_BORDER, rect, 2)
        _stroke(surface, _PANEL_OUTLINE, rect.inflate(2, 2), 1)

    def _draw_header(self, surface: pygame.Surface, origin: tuple[int, int]) -> None:
        ox, oy = origin
        title = "Inventory"
        title_x = ox + (self.INVENTORY_WIDTH - len(title) * _CHAR_WIDTH) // 2
        title_y = oy + 15
        _debug_print(surface, title, title_x, title_y)
        separator = pygame.Rect(ox + 10, title_y + 20, self.INVENTORY_WIDTH - 20, 1)
        _fill(surface, _PANEL_BORDER, separator)

    def _draw_items(
        self,
        surface: pygame.Surface,
        cursor: tuple[int, int],
        screen_size: tuple[int, int],
    ) -> None:
        size = self.ITEM_SIZE
        for index, item, rect in self.item_slots(screen_size):
            _fill(surface, _SHADOW, rect.move(2, 2))

            if index == self.selected_item_index:
                for j in range(3):
                    glow = (100, 150, 255, 150 - j * 50)
                    _stroke(surface, glow, rect.inflate(2 * j, 2 * j), 1)

            _fill(surface, _SLOT_FILL, rect)
            _stroke(surface, _SLOT_BORDER, rect, 1)

            image = item.data.image()
            iw, ih = image.get_size()
            if iw > 0 and ih > 0:
                scale = min((size - 8) / iw, (size - 8) / ih)
                sw, sh = iw * scale, ih * scale
                scaled = pygame.transform.scale(image, (round(sw), round(sh)))
                surface.blit(
                    scaled,
                    (round(rect.x + (size - sw) / 2), round(rect.y + (size - sh) / 2)),
                )

            if item.count > 1:
                count_text = str(item.count)
                text_width = len(count_text) * _CHAR_WIDTH
                badge = pygame.Rect(
                    rect.x + size - text_width - 4, rect.y + size - 16, text_width + 4, 16
                )
                _fill(surface, _DARK, badge)
                _debug_print(
                    surface, count_text, rect.x + size - text_width - 2, rect.y + size - 14
                )

            if self._hit(cursor, rect):
                name = item.data.name
                name_width = len(name) * _CHAR_WIDTH + 4
                name_x = rect.x + (size - name_width) // 2
                _fill(surface, _DARK, pygame.Rect(name_x, rect.y - 20, name_width, 16))
                _debug_print(surface, name, name_x + 2, rect.y - 18)

    def _draw_pagination(self, surface: pygame.Surface, origin: tuple[int, int]) -> None:
        ox, oy = origin
        prev_rect, next_rect = self._page_buttons(origin)
        for rect, label in ((prev_rect, "Prev"), (next_rect, "Next")):
            _fill(surface, _PANEL_BORDER, rect)
            _debug_print(surface, label, rect.x + 15, rect.y + 5)

        info_y = oy + self.INVENTORY_HEIGHT - 50
        page_text = f"Page {self.current_page + 1}/{self.total_pages()}"
        _debug_print(surface, page_text, ox + 20, info_y)

        capacity_text = f"Items: {len(self.items)}/{self.inventory_size}"
        capacity_x = ox + self.INVENTORY_WIDTH - len(capacity_text) * _CHAR_WIDTH - 20
        _debug_print(surface, capacity_text, capacity_x, info_y)

    def _draw_close_button(self, surface: pygame.Surface, origin: tuple[int, int]) -> None:
        rect = self._close_button(origin)
        _fill(surface, _CLOSE_FILL, rect)
        _stroke(surface, _CLOSE_BORDER, rect, 1)
        _debug_print(surface, "X", rect.x + 7, rect.y + 2)