"""Pure domain services for scoring, interpretation and care plan generation."""
