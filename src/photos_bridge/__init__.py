"""
Photos Bridge (phb) - Import/delete worker for a personal photo library

Driven once per operation by an external cataloging tool:
- Batch import from an XML manifest, one authorization per batch
- Best-effort restore of album membership and favorite status
- Single-confirmation batch delete
- XML result documents on stdout for the caller to reconcile
"""

__version__ = "0.1.0"
__package_name__ = "photos-bridge"
__short_name__ = "phb"
