"""Flight information region model for flow management data."""

__version__ = "0.1.0"
__all__ = ["__version__"]