"""Core logic of a side-scrolling jump'n'run game: s-expression data, patterns, physics, sprites, particles, menus and file lookup."""

__version__ = "0.1.0"