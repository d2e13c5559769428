"""Shared models, configuration and error helpers."""
