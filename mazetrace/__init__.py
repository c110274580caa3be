"""mazetrace - load a text maze, walk it, and trace where you have been."""

__version__ = "1.0.0"
