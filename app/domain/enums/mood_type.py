"""
Mood Type Enum.

Defines the moods a user can log in the daily mood tracker.
"""

from enum import Enum


class MoodType(str, Enum):
    """Moods available in the daily tracker."""

    GREAT = "Great"
    GOOD = "Good"
    OKAY = "Okay"
    SAD = "Sad"
    ANXIOUS = "Anxious"
    EXHAUSTED = "Exhausted"
