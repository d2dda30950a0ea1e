"""Utility functions for humaniser."""

from .formatters import round_half_away, render_number, group_digits

__all__ = [
    'round_half_away',
    'render_number',
    'group_digits',
]
