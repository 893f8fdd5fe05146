"""
Security infrastructure layer for the Maternal Wellness API.
"""
