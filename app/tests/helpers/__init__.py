"""Shared test data and helpers."""
