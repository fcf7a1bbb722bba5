"""File chooser logic, menu lookup and progress tracking, independent of any GUI toolkit."""

__version__ = "0.1.0"
__all__ = ["patterns", "paths", "entries", "navigation", "chooser", "menu", "progress"]