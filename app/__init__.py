"""Maternal Wellness API application package."""
