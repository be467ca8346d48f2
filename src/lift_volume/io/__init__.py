"""Workout storage and JSON serialization."""
