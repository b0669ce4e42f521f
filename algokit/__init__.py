"""Classic array, sorting and monotonic-stack algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "sorting", "monotonic"]