"""Mood and exercise analytics: series builders, window resolution and API."""
