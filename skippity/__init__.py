"""Skippity: a capture-by-jumping board game for the terminal, with a computer opponent and save files."""

__version__ = "1.0.0"
__all__ = ["board", "savefile", "render", "computer", "game"]