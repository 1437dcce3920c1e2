"""Ambient helpers: logging setup, configuration, metrics."""
