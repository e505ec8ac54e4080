"""
Static file endpoint.

``GET /static/<path>`` serves files from the public directory.  The
requested path is resolved (following ``..`` and symlinks) and must
stay inside the public directory; anything else, including
directories, is answered with the 404 page.  Files are streamed in
chunks by ``FileResponse`` rather than read into memory.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from product_server.app.api.deps import get_settings
from product_server.app.core.config import Settings, resolve_public_dir
from product_server.app.core.errors import not_found_response, server_error_response

router = APIRouter()

logger = logging.getLogger(__name__)


CONTENT_TYPES = {
    ".html": "text/html",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".css": "text/css",
    ".js": "application/javascript",
    ".pdf": "application/pdf",
    ".csv": "text/csv",
    ".txt": "text/plain",
}

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type_for(path: Path) -> str:
    """Return the MIME type for ``path`` based on its extension."""
    return CONTENT_TYPES.get(path.suffix.lower(), DEFAULT_CONTENT_TYPE)


def resolve_static_path(public_dir: Path, requested: str) -> Path:
    """Resolve ``requested`` under ``public_dir``.

    Raises ``ValueError`` if the result escapes ``public_dir``.
    """
    target = (public_dir / requested).resolve()
    target.relative_to(public_dir)
    return target


def ensure_readable(path: Path) -> None:
    """Open and close ``path`` so read errors surface before streaming."""
    with path.open("rb"):
        pass


@router.get("/static/{file_path:path}")
async def serve_static(file_path: str, app_settings: Settings = Depends(get_settings)):
    public_dir = resolve_public_dir(app_settings)
    try:
        target = resolve_static_path(public_dir, file_path)
    except ValueError:
        logger.warning("Rejected static path outside public directory: %r", file_path)
        return not_found_response()
    except OSError as exc:
        logger.info("Static path cannot be resolved: %r (%s)", file_path, exc.strerror)
        return not_found_response()

    try:
        found = target.is_file()
    except OSError as exc:
        # e.g. ENAMETOOLONG, which is_file() does not swallow
        logger.info("Static file not found: %s (%s)", file_path, exc.strerror)
        return not_found_response()
    if not found:
        logger.info("Static file not found: %s", file_path)
        return not_found_response()

    try:
        ensure_readable(target)
    except OSError:
        logger.exception("Error while reading file %s", target)
        return server_error_response()

    return FileResponse(target, media_type=content_type_for(target))
