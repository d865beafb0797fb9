"""A printf-style formatter that writes to text streams and returns character counts."""

__version__ = "1.0.0"
__all__ = ["output", "formatter", "exam", "demo"]