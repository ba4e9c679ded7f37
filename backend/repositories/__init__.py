from .books import BookCollection

__all__ = ["BookCollection"]
