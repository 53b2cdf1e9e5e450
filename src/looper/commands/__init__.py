"""Looper CLI commands."""
