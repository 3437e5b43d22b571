"""
Validation and storage of uploaded product images.

An image is optional: a form submitted without a file is valid.  A
submitted file must have one of the configured image content types and
must not exceed the configured size.  Accepted files are written to the
upload directory under a generated name and removed again when the
product drops or replaces them.
"""

import logging
import uuid
from pathlib import Path
from typing import Optional

from starlette.datastructures import UploadFile

from slshopping_admin.app.core.config import settings

logger = logging.getLogger(__name__)


class ProductImageService:
    """Checks and stores product images."""

    def __init__(
        self,
        upload_dir: Optional[str] = None,
        max_size: Optional[int] = None,
        allowed_types: Optional[list] = None,
    ):
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.max_size = max_size if max_size is not None else settings.max_image_size
        self.allowed_types = set(allowed_types if allowed_types is not None else settings.allowed_image_types)

    @staticmethod
    def is_submitted(upload: Optional[UploadFile]) -> bool:
        return upload is not None and bool(upload.filename)

    async def is_valid(self, upload: Optional[UploadFile]) -> bool:
        """Return ``True`` for no upload or an acceptable image file."""
        if not self.is_submitted(upload):
            return True
        if upload.content_type not in self.allowed_types:
            logger.info("Rejected image %s: content type %s", upload.filename, upload.content_type)
            return False
        size = upload.size
        if size is None:
            size = len(await upload.read())
            await upload.seek(0)
        if size == 0 or size > self.max_size:
            logger.info("Rejected image %s: size %s", upload.filename, size)
            return False
        return True

    async def save(self, upload: UploadFile) -> str:
        """Store ``upload`` and return its path relative to the upload directory."""
        suffix = Path(upload.filename or "").suffix.lower()
        name = f"{uuid.uuid4().hex}{suffix}"
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        content = await upload.read()
        (self.upload_dir / name).write_bytes(content)
        logger.info("Stored product image %s (%d bytes)", name, len(content))
        return name

    async def delete(self, image_path: Optional[str]) -> None:
        """Remove a stored image; unknown or empty paths are ignored.

        Only the file name is used, so nothing outside the upload
        directory can be removed.
        """
        if not image_path:
            return
        path = self.upload_dir / Path(image_path).name
        if path.is_file():
            path.unlink()
            logger.info("Removed product image %s", path.name)
