"""Chez Ordre: an ordered task list."""

__version__ = '0.1.0'
