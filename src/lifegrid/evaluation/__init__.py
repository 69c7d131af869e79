"""Evaluation metrics and analysis tools."""

from .metrics import (
    population,
    density,
    hamming_distance,
    population_history,
    detect_period
)

__all__ = [
    'population',
    'density',
    'hamming_distance',
    'population_history',
    'detect_period'
]
