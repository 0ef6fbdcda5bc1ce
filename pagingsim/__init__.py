"""Paged memory layout and page-replacement simulator."""

__version__ = "0.1.0"
__all__ = ["memory", "replacement", "simulator"]