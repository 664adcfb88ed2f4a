"""Upload store — receipt and article images kept as opaque files on disk.

Files are referenced by a relative path such as ``uploads/receipt-<ms>-<rand>.png``
which is also the URL path they are served under.
"""

from __future__ import annotations

import logging
import secrets
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from lottodesk.core.constants import UPLOAD_URL_PREFIX

logger = logging.getLogger(__name__)


@dataclass
class IncomingFile:
    """An uploaded file as handed over by the route layer."""

    file: BinaryIO
    filename: str | None = None


class UploadStore:
    """Write-once blob store rooted at a directory."""

    def __init__(self, root: Path | str, url_prefix: str = UPLOAD_URL_PREFIX) -> None:
        self.root = Path(root)
        self.url_prefix = url_prefix

    @staticmethod
    def _unique_name(field_name: str, original_name: str | None) -> str:
        suffix = Path(original_name or "").suffix.lower()
        return f"{field_name}-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{suffix}"

    def save(self, fileobj: BinaryIO, original_name: str | None, field_name: str) -> str:
        """Copy *fileobj* into the store and return its reference."""
        self.root.mkdir(parents=True, exist_ok=True)
        name = self._unique_name(field_name, original_name)
        with (self.root / name).open("wb") as out:
            shutil.copyfileobj(fileobj, out)
        logger.info("Stored upload %s (%s)", name, field_name)
        return f"{self.url_prefix}/{name}"

    def resolve(self, reference: str) -> Path:
        """Map a reference back to its file path inside the store."""
        name = Path(reference).name
        return self.root / name

    def discard(self, reference: str | None) -> None:
        """Delete a stored file; missing files are ignored."""
        if not reference:
            return
        self.resolve(reference).unlink(missing_ok=True)
        logger.info("Discarded upload %s", reference)
