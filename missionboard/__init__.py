"""Terminal mission tracker: accept, progress and complete missions for experience."""

__version__ = "1.0.0"
__all__ = ["__version__"]