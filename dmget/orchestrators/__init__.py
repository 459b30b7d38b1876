"""Orchestration layer.

This module contains the high-level workflow that coordinates
the download, staging and extraction operations.
"""

from dmget.orchestrators.exercise_fetch import ExerciseFetch

__all__ = [
    "ExerciseFetch",
]
