"""Time/value samples for fixed-width variables and their binary description files."""

__version__ = "0.1.0"

__all__ = ["common", "var", "varfile"]