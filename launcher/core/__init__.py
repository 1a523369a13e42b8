"""Logging, environment and process helpers."""
