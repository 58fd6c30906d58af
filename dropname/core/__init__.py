"""Core rename engine."""
