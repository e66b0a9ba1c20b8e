"""2D drawing on pygame surfaces, TGA reading, sprite animation, mouse and key input, and a demo game."""

__version__ = "0.1.0"