"""
In-memory store for faces.

Faces are uniquely identified by numeric ids handed out from a counter
that starts at zero and only ever grows, so an id is never reused, not
even after ``delete_all_faces``.  All state is guarded by a single lock
and every method holds it for its whole duration, which makes the store
safe to share between concurrent request handlers.

Callers never receive references into the store: reads return copies
and the tag list passed to ``create_face`` is copied before it is kept.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Dict, Iterable, List

from face_api.app.schemas.face import Face


logger = logging.getLogger(__name__)


class FaceNotFoundError(LookupError):
    """Raised when no face is stored under the requested id."""

    def __init__(self, face_id: int) -> None:
        super().__init__(f"face with id={face_id} not found")
        self.face_id = face_id


class FaceStore:
    """A simple in-memory database of faces; methods are safe to call concurrently."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._faces: Dict[int, Face] = {}
        self._next_id = 0

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create_face(self, text: str, tags: Iterable[str], due: datetime) -> int:
        """Store a new face and return the id assigned to it."""
        with self._lock:
            face = Face(id=self._next_id, text=text, tags=list(tags), due=due)
            self._faces[face.id] = face
            self._next_id += 1
        logger.debug("Created face %s", face.id)
        return face.id

    def delete_face(self, face_id: int) -> None:
        """Delete the face with the given id.

        Raises
        ------
        FaceNotFoundError
            If no such id exists.  The store is left untouched.
        """
        with self._lock:
            if face_id not in self._faces:
                raise FaceNotFoundError(face_id)
            del self._faces[face_id]
        logger.debug("Deleted face %s", face_id)

    def delete_all_faces(self) -> None:
        """Delete every face.  The id counter keeps its value."""
        with self._lock:
            self._faces = {}
        logger.debug("Deleted all faces")

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_face(self, face_id: int) -> Face:
        """Return a copy of the face stored under ``face_id``.

        Raises
        ------
        FaceNotFoundError
            If no such id exists.
        """
        with self._lock:
            face = self._faces.get(face_id)
            if face is None:
                raise FaceNotFoundError(face_id)
            return face.model_copy(deep=True)

    def get_all_faces(self) -> List[Face]:
        """Return all faces, in arbitrary order."""
        with self._lock:
            return [face.model_copy(deep=True) for face in self._faces.values()]

    def get_faces_by_tag(self, tag: str) -> List[Face]:
        """Return all faces carrying ``tag``, in arbitrary order.

        Matching is exact and case sensitive.  A face listing the tag
        more than once is still returned only once.
        """
        with self._lock:
            return [
                face.model_copy(deep=True)
                for face in self._faces.values()
                if tag in face.tags
            ]

    def get_faces_by_due_date(self, year: int, month: int, day: int) -> List[Face]:
        """Return all faces due on the given date, in arbitrary order.

        The date of each face is read in the offset it was stored with;
        no conversion to UTC or local time takes place.
        """
        with self._lock:
            return [
                face.model_copy(deep=True)
                for face in self._faces.values()
                if (face.due.year, face.due.month, face.due.day) == (year, month, day)
            ]
