"""Delete actions - Remove published photos from the asset library."""

import logging

from ..constants import AUTH_ERROR, DELETE_FAILED
from ..library.base import AssetLibrary
from ..library.errors import LibraryError
from ..results import DeleteOutcome

logger = logging.getLogger(__name__)


def perform_delete(library: AssetLibrary, identifiers: list[str]) -> DeleteOutcome:
    """
    Delete assets as a single request.

    The whole list goes to the library in one call so the user sees one
    confirmation, and the library deletes all of it or none of it.

    Args:
        library: Asset library to delete from
        identifiers: Full identifiers of the assets to delete

    Returns:
        DeleteOutcome with the number of deleted assets, or the failure
    """
    if not identifiers:
        return DeleteOutcome.success(0)

    try:
        library.ensure_write_access()
    except LibraryError as e:
        return DeleteOutcome.error(e.code, e.message)
    except Exception as e:
        return DeleteOutcome.error(AUTH_ERROR, str(e))

    try:
        library.delete_assets(list(identifiers))
    except LibraryError as e:
        return DeleteOutcome.error(e.code, e.message)
    except Exception as e:
        return DeleteOutcome.error(DELETE_FAILED, str(e))

    logger.info(f"Deleted {len(identifiers)} assets")
    return DeleteOutcome.success(len(identifiers))
