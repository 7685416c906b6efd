"""Build tabletop RPG weapons from parts, by menu or by call, and print their stat block."""

__version__ = "1.0.0"
__all__ = ["__version__"]