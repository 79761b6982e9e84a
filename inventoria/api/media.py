"""
Serves generated images from the current media directory.

The directory follows the configured data file, so it is resolved on every
request instead of being mounted once.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from inventoria.core.database import WorkbookStore
from inventoria.core.dependencies import get_store

router = APIRouter(tags=["Media"])


def _media_file(filename: str, store: WorkbookStore) -> FileResponse:
    media_dir = store.media_dir.resolve()
    target = (media_dir / filename).resolve()

    if target.parent != media_dir or not target.is_file():
        raise HTTPException(status_code=404, detail="File not found")

    return FileResponse(target)


@router.get("/images/{filename}", response_class=FileResponse)
def get_image(filename: str, store: WorkbookStore = Depends(get_store)):
    return _media_file(filename, store)


@router.get("/qr-codes/{filename}", response_class=FileResponse, include_in_schema=False)
def get_legacy_image(filename: str, store: WorkbookStore = Depends(get_store)):
    return _media_file(filename, store)
