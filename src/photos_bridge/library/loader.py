"""Load the configured asset library binding from a ``module:attribute`` path."""

import importlib
import logging

from .base import AssetLibrary

logger = logging.getLogger(__name__)


class LibraryLoadError(Exception):
    """The configured backend is missing or cannot be imported."""


def load_library(backend: str | None) -> AssetLibrary:
    """
    Import and instantiate an asset library backend.

    Args:
        backend: Import path such as ``"mypkg.photokit:PhotoKitLibrary"``.
            The attribute is called with no arguments.

    Returns:
        The asset library instance

    Raises:
        LibraryLoadError: If no backend is configured or it cannot be loaded
    """
    if not backend:
        raise LibraryLoadError("No asset library backend configured (set PHB_LIBRARY_BACKEND or library.backend)")

    module_name, sep, attr = backend.partition(":")
    if not sep or not module_name or not attr:
        raise LibraryLoadError(f"Invalid backend '{backend}': expected 'module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise LibraryLoadError(f"Cannot import backend module '{module_name}': {e}") from e

    factory = getattr(module, attr, None)
    if factory is None:
        raise LibraryLoadError(f"Backend module '{module_name}' has no attribute '{attr}'")

    try:
        library = factory()
    except Exception as e:
        raise LibraryLoadError(f"Backend '{backend}' failed to initialize: {e}") from e

    logger.debug(f"Loaded asset library backend: {backend}")
    return library
