"""On-disk storage for trade screenshots.

Files live at <upload_dir>/trades/<trade_id>/<SECTION>/<uuid>.<ext>; the
relative part is what gets stored on the TradeAttachment row.
"""

import logging
import uuid
from pathlib import Path, PurePosixPath

from journal.config import settings
from journal.utils.constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    ALLOWED_IMAGE_TYPES,
    ATTACHMENT_SECTIONS,
)

logger = logging.getLogger(__name__)


class AttachmentRejected(ValueError):
    """Upload failed validation (bad section, type, extension or size)."""


def upload_root() -> Path:
    return Path(settings.upload_dir).resolve()


def parse_section(section: str | None) -> str:
    if section is None or not section.strip():
        raise AttachmentRejected("Section is required")
    text = section.strip().upper()
    if text not in ATTACHMENT_SECTIONS:
        raise AttachmentRejected("Invalid section value")
    return text


def _extension(filename: str | None) -> str | None:
    if not filename or "." not in filename:
        return None
    return filename.rsplit(".", 1)[1].lower()


def validate_upload(filename: str | None, content_type: str | None, size: int) -> None:
    if size <= 0:
        raise AttachmentRejected("File is required")
    if size > settings.max_upload_bytes:
        raise AttachmentRejected("File size exceeds limit")
    if content_type is None or content_type.lower() not in ALLOWED_IMAGE_TYPES:
        raise AttachmentRejected("Unsupported file type")
    ext = _extension(filename)
    if ext is not None and ext not in ALLOWED_IMAGE_EXTENSIONS:
        raise AttachmentRejected("Unsupported file extension")


def resolve_extension(filename: str | None, content_type: str | None) -> str:
    """Prefer the filename's extension, else guess from the content type."""
    ext = _extension(filename)
    if ext in ALLOWED_IMAGE_EXTENSIONS:
        return ext
    normalized = (content_type or "").lower()
    if "jpeg" in normalized or "jpg" in normalized:
        return "jpg"
    if "webp" in normalized:
        return "webp"
    return "png"


def store(
    trade_id: int,
    section: str,
    filename: str | None,
    content_type: str | None,
    content: bytes,
) -> str:
    """Validate and write an upload. Returns the path relative to the upload root."""
    validate_upload(filename, content_type, len(content))

    stored_name = f"{uuid.uuid4()}.{resolve_extension(filename, content_type)}"
    relative = PurePosixPath("trades", str(trade_id), section, stored_name)

    root = upload_root()
    destination = (root / relative).resolve()
    if not destination.is_relative_to(root):
        raise AttachmentRejected("Invalid file path")

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(content)
    logger.info(f"Stored attachment for trade {trade_id}: {relative} ({len(content)} bytes)")
    return str(relative)


def remove(relative_path: str) -> None:
    """Delete a stored file if it still exists."""
    root = upload_root()
    path = (root / relative_path).resolve()
    if not path.is_relative_to(root):
        raise AttachmentRejected("Invalid file path")
    path.unlink(missing_ok=True)
    logger.info(f"Removed attachment file {relative_path}")
