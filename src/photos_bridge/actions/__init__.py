"""
Actions layer - Plain functions that talk to the asset library.

All functions are CLI-agnostic and return typed results; collaborator
exceptions are converted to result values here.
"""

from .delete import perform_delete
from .import_photo import import_single_photo, wait_until_accessible
from .locate import locate_asset
from .restore import PreviousMetadata, RestoreResult, fetch_previous_metadata, restore_metadata

__all__ = [
    "import_single_photo",
    "wait_until_accessible",
    "fetch_previous_metadata",
    "restore_metadata",
    "PreviousMetadata",
    "RestoreResult",
    "perform_delete",
    "locate_asset",
]
