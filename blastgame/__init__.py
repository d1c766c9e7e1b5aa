"""A small pygame shooter: entities, bullets, a controllable player and the game loop."""

__version__ = "0.1.0"
__all__ = ["bullet", "entity", "game", "player"]