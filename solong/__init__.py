"""A tile-based puzzle game: map loading and checks, game rules, a pygame front end, and text helpers."""

__version__ = "1.0.0"