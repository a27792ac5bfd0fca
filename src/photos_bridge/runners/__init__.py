"""
Runners layer - Execution engines for import batches.

Runners own authorization and ordering for a batch and call the actions
layer for each photo.
"""

from .base import ImportCallbacks, ImportRunnerProtocol
from .batch import BatchImportRunner

__all__ = [
    "ImportCallbacks",
    "ImportRunnerProtocol",
    "BatchImportRunner",
]
