"""
Listing faces by tag.

``/tag/<tag>`` takes exactly one path segment.  Starlette decodes
``%2F`` before routing, so a tag containing ``/`` cannot be addressed
and ends up on the malformed-path route with a 400.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from face_api.app.core.dependencies import get_face_store
from face_api.app.schemas.face import Face
from face_api.app.services.face_store import FaceStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _malformed_tag_path() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="expect /tag/<tag> path")


@router.get("/", response_model=List[Face])
async def missing_tag() -> List[Face]:
    """``/tag/`` without a tag segment is a malformed path."""
    raise _malformed_tag_path()


@router.get("/{tag}", response_model=List[Face])
async def faces_by_tag(
    tag: str,
    request: Request,
    store: FaceStore = Depends(get_face_store),
) -> List[Face]:
    """Return every face tagged with ``tag`` (exact, case sensitive match)."""
    logger.info("handling faces by tag at %s", request.url.path)
    return store.get_faces_by_tag(tag)


@router.get("/{tag_path:path}", response_model=List[Face])
async def malformed_tag_path(tag_path: str) -> List[Face]:
    # Registered after the single-segment route; only paths with extra
    # segments get here.
    raise _malformed_tag_path()
