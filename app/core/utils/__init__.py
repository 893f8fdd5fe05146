"""
Core utilities.
"""

__all__ = ["logging"]
