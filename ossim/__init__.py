"""Simulations of Banker's algorithm, contiguous allocation, disk scheduling and scatter/reduce."""

__version__ = "0.1.0"
__all__ = ["allocation", "bankers", "cluster", "disk"]