"""
Top‑level router of the API.

Faces are served from the root of the application: ``/face/`` for the
collection and single records, ``/tag/<tag>`` and
``/due/<year>/<month>/<day>`` for the filtered listings.
"""

from fastapi import APIRouter

from .endpoints import due, faces, tags

router = APIRouter()

router.include_router(faces.router, prefix="/face", tags=["faces"])
router.include_router(tags.router, prefix="/tag", tags=["tags"])
router.include_router(due.router, prefix="/due", tags=["due"])
