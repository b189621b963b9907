"""Data models for fixtures and check results."""
