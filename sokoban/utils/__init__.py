"""Logging, event feed and text rendering helpers."""
