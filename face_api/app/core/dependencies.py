"""
FastAPI dependencies shared by the endpoint modules.

``get_face_store`` hands each request the store instance owned by the
application, and ``require_json_content_type`` enforces a JSON request
body before the body is validated.
"""

import logging
from email.message import EmailMessage
from typing import Optional

from fastapi import Header, HTTPException, Request, status

from face_api.app.services.face_store import FaceStore


logger = logging.getLogger(__name__)


def get_face_store(request: Request) -> FaceStore:
    """Return the store attached to the running application."""
    return request.app.state.face_store


def parse_media_type(content_type: str) -> Optional[str]:
    """Return the lower-cased ``type/subtype`` of a Content-Type value.

    The header is parsed with the standard library's MIME header parser.
    ``None`` is returned when the parser reports any defect, e.g. a
    missing subtype or a parameter without a value.
    """
    message = EmailMessage()
    try:
        message["content-type"] = content_type
    except ValueError:
        return None
    header = message["content-type"]
    if header.defects:
        return None
    return header.content_type


def require_json_content_type(content_type: Optional[str] = Header(None)) -> None:
    """Reject requests whose Content-Type is not ``application/json``.

    Media type parameters such as ``charset`` are accepted.  A missing or
    malformed header is a bad request; a well formed header naming any
    other media type is answered with 415.
    """
    if not content_type:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="missing Content-Type header",
        )
    media_type = parse_media_type(content_type)
    if media_type is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"malformed Content-Type header: {content_type!r}",
        )
    if media_type != "application/json":
        logger.info("Rejected request with Content-Type %s", media_type)
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="expect application/json Content-Type",
        )
