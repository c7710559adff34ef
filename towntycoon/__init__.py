"""Building blocks for a turn-based town-building game on a text terminal."""

__version__ = "0.1.0"
__all__ = ["city", "coord", "cursor", "keyboard", "minigame", "shop", "structure", "textbox"]