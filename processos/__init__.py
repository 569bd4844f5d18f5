"""Load, sort, count and summarise court case records exported as CSV."""

__version__ = "0.1.0"
__all__ = ["__version__"]