"""Application layer: use cases that coordinate domain services and repositories."""
