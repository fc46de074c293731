"""Serving the single-page frontend next to the API."""

from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.types import Scope

from photo_gallery.core.utils.constants import API_PREFIX, INDEX_DOCUMENT


class SPAStaticFiles(StaticFiles):
    """Static files with client-side routing support.

    Paths that match no file are answered with ``index.html`` so the
    frontend router can handle them. Paths under the API prefix keep their
    404 so unknown API routes are not masked by the page.
    """

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404 or _is_api_path(path):
                raise
            return await super().get_response(INDEX_DOCUMENT, scope)


def _is_api_path(path: str) -> bool:
    return path.split("/", 1)[0] == API_PREFIX.strip("/")
