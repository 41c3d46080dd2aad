import os
import secrets
import time
from pathlib import Path
from typing import Optional, Tuple

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from ..core.exceptions import UploadRejected
from ..core.logger import logger
from ..dto.upload import UploadResult

MAX_UPLOAD_BYTES = 5 * 1024 * 1024
# room for multipart boundaries and part headers around the single file
MULTIPART_OVERHEAD_BYTES = 64 * 1024
CHUNK_SIZE = 64 * 1024

ALLOWED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})
ALLOWED_CONTENT_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"})

CATEGORY_DIRS = {
    "profile": "profiles",
    "project": "projects",
}


def too_large() -> UploadRejected:
    return UploadRejected("File too large. Maximum size is 5MB", "FILE_TOO_LARGE")


def check_declared_length(content_length: Optional[str]) -> None:
    """Reject a request whose declared body cannot fit one maximum-size file."""
    if not content_length:
        return
    try:
        declared = int(content_length)
    except ValueError:
        return
    if declared > MAX_UPLOAD_BYTES + MULTIPART_OVERHEAD_BYTES:
        logger.warning(f"Upload rejected from Content-Length: {declared} bytes")
        raise too_large()


def generate_filename(original_name: str) -> str:
    extension = os.path.splitext(original_name)[1]
    millis = int(time.time() * 1000)
    suffix = secrets.randbelow(10 ** 9)
    return f"{millis}-{suffix:09d}{extension}"


class UploadStorage:
    def __init__(self, root: str, url_prefix: str = "/uploads"):
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")

    def prepare(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        for directory in CATEGORY_DIRS.values():
            (self.root / directory).mkdir(parents=True, exist_ok=True)
        logger.info(f"Upload directories ready under {self.root}")

    def destination(self, category: str) -> Tuple[Path, str]:
        directory = CATEGORY_DIRS.get(category)
        if directory is None:
            return self.root, self.url_prefix
        return self.root / directory, f"{self.url_prefix}/{directory}"

    @staticmethod
    def validate_type(upload: UploadFile) -> None:
        extension = os.path.splitext(upload.filename or "")[1].lower()
        content_type = (upload.content_type or "").split(";")[0].strip().lower()
        if extension not in ALLOWED_EXTENSIONS or content_type not in ALLOWED_CONTENT_TYPES:
            logger.warning(f"Upload rejected: {upload.filename!r} ({content_type or 'no content type'})")
            raise UploadRejected("Only image files are allowed", "INVALID_FILE_TYPE")

    @staticmethod
    async def read_limited(upload: UploadFile) -> bytes:
        chunks = []
        size = 0
        while True:
            chunk = await upload.read(CHUNK_SIZE)
            if not chunk:
                break
            size += len(chunk)
            if size > MAX_UPLOAD_BYTES:
                logger.warning(f"Upload rejected while reading: {upload.filename!r} exceeds limit")
                raise too_large()
            chunks.append(chunk)
        return b"".join(chunks)

    async def save(self, category: str, upload: UploadFile) -> UploadResult:
        self.validate_type(upload)
        content = await self.read_limited(upload)

        directory, url_base = self.destination(category)
        filename = generate_filename(upload.filename or "")
        await run_in_threadpool(self._write, directory / filename, content)

        logger.info(f"Stored upload {filename} ({len(content)} bytes) in {directory}")
        return UploadResult(
            url=f"{url_base}/{filename}",
            filename=filename,
            original_name=upload.filename or "",
            size=len(content),
        )

    @staticmethod
    def _write(path: Path, content: bytes) -> None:
        with open(path, "xb") as f:
            f.write(content)
