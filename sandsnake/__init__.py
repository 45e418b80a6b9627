"""A snake arcade game with a persistent high score."""

__version__ = "1.0.0"
__all__ = ["app", "game", "highscore"]