"""Domain layer for questionnaires, assessments, care plans, goals and moods."""
