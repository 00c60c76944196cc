from __future__ import annotations

from homefs.models.files import (
    DirectoryEntry,
    DirectoryListing,
    ErrorResponse,
    FileReference,
    MutationResult,
)

__all__ = [
    "DirectoryEntry",
    "DirectoryListing",
    "ErrorResponse",
    "FileReference",
    "MutationResult",
]
