"""A small side-scrolling tunnel platformer: level, game rules and a pygame window."""

__version__ = "0.1.0"
__all__ = ["geometry", "platform", "enemy", "player", "level", "logic", "game"]