"""HTML escaping and render-buffer helpers for a template engine."""

__version__ = "1.12.1"
__all__ = ["utils"]