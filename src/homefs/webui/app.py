"""homefs HTTP API."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

from anyio import to_thread
from fastapi import APIRouter, Depends, FastAPI, Query, Request
from starlette.responses import JSONResponse

from homefs.const import (
    CREATE,
    HOME_PREFIX,
    MULTIPART_FORM_DATA,
    REPLACE,
    UPLOAD,
)
from homefs.fs import DirectoryLister, PathGuard, Root
from homefs.helper.exceptions import BadRequest, InternalError, NotFound
from homefs.models import (
    DirectoryListing,
    ErrorResponse,
    FileReference,
    MutationResult,
)
from homefs.version import __version__

_LOGGER = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

home_router = APIRouter(prefix=HOME_PREFIX, responses=ERROR_RESPONSES)
api_router = APIRouter(prefix="/api")


def get_path_guard(request: Request) -> PathGuard:
    """Get path guard instance."""
    return request.app.state.path_guard


def get_lister(request: Request) -> DirectoryLister:
    """Get directory lister instance."""
    return request.app.state.lister


def _list_or_describe(
    guard: PathGuard, lister: DirectoryLister, path: str, with_content: bool
) -> DirectoryListing | FileReference:
    resolved = guard.resolve(path)
    if resolved.is_dir():
        return lister.list(resolved)
    return lister.describe(resolved, with_content=with_content)


async def _validate_target(guard: PathGuard, path: str) -> Path:
    return await to_thread.run_sync(guard.resolve_target, path)


@home_router.get("/", response_model=DirectoryListing)
async def get_root(
    guard: PathGuard = Depends(get_path_guard),
    lister: DirectoryLister = Depends(get_lister),
) -> DirectoryListing:
    """List root directory."""
    _LOGGER.info("--- invoke getRoot")
    resolved = await to_thread.run_sync(guard.resolve, "")
    return await to_thread.run_sync(lister.list, resolved)


@home_router.get("/{path:path}", response_model=DirectoryListing | FileReference)
async def get_path(
    path: str,
    content: bool = Query(False, description="Embed file text in the response"),
    guard: PathGuard = Depends(get_path_guard),
    lister: DirectoryLister = Depends(get_lister),
) -> DirectoryListing | FileReference:
    """List directory at path, or describe the file at path."""
    _LOGGER.info("--- invoke getFile with %s", path)
    return await to_thread.run_sync(
        partial(_list_or_describe, guard, lister, path, with_content=content)
    )


@home_router.post("/{path:path}", response_model=MutationResult)
async def create_or_upload(
    path: str,
    request: Request,
    guard: PathGuard = Depends(get_path_guard),
) -> MutationResult:
    """Create folder at path, or upload file into it for multipart requests."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(MULTIPART_FORM_DATA):
        _LOGGER.info("--- invoke upload file with %s", path)
        operation = UPLOAD
    else:
        _LOGGER.info("--- invoke create path with %s", path)
        operation = CREATE
    target = await _validate_target(guard, path)
    return MutationResult(operation=operation, path=guard.root.relative(target))


@home_router.put("/{path:path}", response_model=MutationResult)
async def create_or_replace(
    path: str,
    guard: PathGuard = Depends(get_path_guard),
) -> MutationResult:
    """Create or replace file content at path."""
    _LOGGER.info("--- invoke create or replace with %s", path)
    target = await _validate_target(guard, path)
    return MutationResult(operation=REPLACE, path=guard.root.relative(target))


@api_router.get("/version")
async def get_version():
    """Get application version."""
    return {"version": __version__}


async def bad_request_handler(request: Request, exc: BadRequest) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def internal_error_handler(
    request: Request, exc: InternalError
) -> JSONResponse:
    _LOGGER.error(
        "Internal error on %s %s: %s (%s)",
        request.method,
        request.url.path,
        exc,
        exc.__cause__,
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def init_app(root: Root) -> FastAPI:
    """Initialize the FastAPI application serving root."""
    app = FastAPI(
        title="homefs API",
        description="homefs API for browsing one directory tree",
        version=__version__,
    )
    path_guard = PathGuard(root)
    app.state.root = root
    app.state.path_guard = path_guard
    app.state.lister = DirectoryLister(path_guard)

    app.include_router(home_router)
    app.include_router(api_router)
    app.add_exception_handler(BadRequest, bad_request_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(InternalError, internal_error_handler)
    return app
