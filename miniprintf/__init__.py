"""A small printf with %c %s %d %i %u %x %X %p and %% conversions."""

__version__ = "1.0.0"
__all__ = ["conversions", "printf"]