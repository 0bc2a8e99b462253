"""
Face endpoints.

``/face/`` creates, lists and clears faces; ``/face/{face_id}`` reads
and deletes a single face.  Any other verb on these paths is answered
with 405 by the router.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from face_api.app.core.dependencies import get_face_store, require_json_content_type
from face_api.app.schemas.face import Face, FaceCreate, FaceCreated
from face_api.app.services.face_store import FaceNotFoundError, FaceStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/",
    response_model=FaceCreated,
    dependencies=[Depends(require_json_content_type)],
)
async def create_face(
    face_in: FaceCreate,
    request: Request,
    store: FaceStore = Depends(get_face_store),
) -> FaceCreated:
    """Store a new face and return its id.

    The body must be a JSON object with exactly ``text``, ``tags`` and
    ``due``.  Malformed bodies and unknown fields are rejected with 400,
    a non-JSON Content-Type with 415.
    """
    logger.info("handling face create at %s", request.url.path)
    face_id = store.create_face(face_in.text, face_in.tags, face_in.due)
    return FaceCreated(id=face_id)


@router.get("/", response_model=List[Face])
async def list_faces(
    request: Request,
    store: FaceStore = Depends(get_face_store),
) -> List[Face]:
    """Return every stored face, in no particular order."""
    logger.info("handling get all faces at %s", request.url.path)
    return store.get_all_faces()


@router.delete("/")
async def delete_all_faces(
    request: Request,
    store: FaceStore = Depends(get_face_store),
) -> Response:
    """Delete every stored face.  Ids already issued stay retired."""
    logger.info("handling delete all faces at %s", request.url.path)
    store.delete_all_faces()
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{face_id}", response_model=Face)
async def get_face(
    face_id: int,
    request: Request,
    store: FaceStore = Depends(get_face_store),
) -> Face:
    """Retrieve a single face by id.

    Returns HTTP 404 if the face does not exist and 400 if ``face_id``
    is not an integer.
    """
    logger.info("handling get face at %s", request.url.path)
    try:
        return store.get_face(face_id)
    except FaceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{face_id}")
async def delete_face(
    face_id: int,
    request: Request,
    store: FaceStore = Depends(get_face_store),
) -> Response:
    """Delete a single face by id; 404 if it does not exist."""
    logger.info("handling delete face at %s", request.url.path)
    try:
        store.delete_face(face_id)
    except FaceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_200_OK)
