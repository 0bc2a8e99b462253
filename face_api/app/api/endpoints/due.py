"""
Listing faces by due date.

``/due/<year>/<month>/<day>`` returns the faces whose due timestamp
falls on that calendar date in the offset the timestamp was stored
with.  Non-integer components, a month outside 1-12 or a path with the
wrong number of segments are rejected with 400.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status

from face_api.app.core.dependencies import get_face_store
from face_api.app.schemas.face import Face
from face_api.app.services.face_store import FaceStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{year}/{month}/{day}", response_model=List[Face])
async def faces_by_due_date(
    request: Request,
    year: int,
    month: int = Path(..., ge=1, le=12),
    day: int = Path(...),
    store: FaceStore = Depends(get_face_store),
) -> List[Face]:
    """Return every face due on ``year``-``month``-``day``."""
    logger.info("handling faces by due at %s", request.url.path)
    return store.get_faces_by_due_date(year, month, day)


@router.get("/{date_path:path}", response_model=List[Face])
async def malformed_due_path(date_path: str, request: Request) -> List[Face]:
    # Registered after the typed route so it only sees paths with the
    # wrong number of segments.
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"expect /due/<year>/<month>/<day>, got {request.url.path}",
    )
