"""32-bit wrapping TCP sequence numbers and conversion to 64-bit absolute indices."""

__version__ = "0.1.0"
__all__ = ["wrapping"]