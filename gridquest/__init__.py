"""A small 2D grid game with a start menu, a movable hero and a paged inventory."""

__version__ = "0.1.0"
__all__ = ["frame_input", "items", "menu_screen", "play_screen", "game"]