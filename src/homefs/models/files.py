from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

EntryType = Literal["file", "directory"]
MutationOperation = Literal["create", "upload", "replace"]


class DirectoryEntry(BaseModel):
    """One immediate child of a listed directory."""

    name: str
    type: EntryType
    path: str
    size: int | None = None
    modified: datetime


class DirectoryListing(BaseModel):
    """Immediate children of one directory, split by kind."""

    directories: list[DirectoryEntry] = Field(default_factory=list)
    files: list[DirectoryEntry] = Field(default_factory=list)


class FileReference(BaseModel):
    name: str
    path: str
    location: str
    size: int
    modified: datetime
    content: str | None = None
    binary: bool = False


class MutationResult(BaseModel):
    """Answer of the folder/upload/replace endpoints, which don't write yet."""

    operation: MutationOperation
    path: str
    status: Literal["not_implemented"] = "not_implemented"


class ErrorResponse(BaseModel):
    detail: str
