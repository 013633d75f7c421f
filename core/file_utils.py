import os
import logging
from fastapi import UploadFile

from core.config import settings
from schemas.registration import ImageFile

logger = logging.getLogger(__name__)

# Allowed image extensions per document slot
ALLOWED_EXTENSIONS = {
    "idCard": {".jpg", ".jpeg", ".png"},
    "employmentLetter": {".jpg", ".jpeg", ".png"},
}

DOCUMENT_LABELS = {
    "idCard": "ID card copy",
    "employmentLetter": "Employment letter",
}


class UploadRejected(Exception):
    """Uploaded document cannot be forwarded."""

    def __init__(self, kind: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


def read_image_upload(file: UploadFile | None, kind: str) -> ImageFile | None:
    """
    Read an uploaded document image into memory for forwarding.

    Args:
        file: The uploaded file, or None when the part was not sent
        kind: Document slot ('idCard' or 'employmentLetter')

    Returns:
        ImageFile named after the slot (e.g. 'idCard.jpg'), or None if
        nothing was uploaded

    Raises:
        UploadRejected: If the file type, size or content is not acceptable
    """
    if not file or not file.filename:
        return None

    label = DOCUMENT_LABELS[kind]

    # Validate file extension
    file_ext = os.path.splitext(file.filename)[1].lower()
    if file_ext not in ALLOWED_EXTENSIONS[kind]:
        raise UploadRejected(kind, f"{label} must be a JPG or PNG image")

    content = file.file.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(content) == 0:
        raise UploadRejected(kind, f"{label} is empty")
    if len(content) > settings.MAX_UPLOAD_BYTES:
        raise UploadRejected(kind, f"{label} is too large")

    content_type = file.content_type or "image/jpeg"
    if not content_type.startswith("image/"):
        content_type = "image/png" if file_ext == ".png" else "image/jpeg"

    logger.info(f"Accepted {kind} upload: {file.filename} ({len(content)} bytes)")
    return ImageFile(filename=f"{kind}{file_ext}", content_type=content_type, content=content)
