"""Turn-based battle simulation between two armies of equipped units."""

__version__ = "0.1.0"
__all__ = ["data", "battle"]