"""Core runtime pieces of a small game engine: math, names, delegates, serialization and stats."""

__version__ = "0.1.0"