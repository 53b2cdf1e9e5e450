"""Looper: repeat browser actions with for / while / do-while loops."""

__version__ = "0.1.0"
