import hashlib, mimetypes
from pathlib import Path
from streamlit.runtime.uploaded_file_manager import UploadedFile
from slugify import slugify

from utils.constants import PHOTO_PREFIX


def make_photo_prefix(marker_id: str) -> str:
    if not marker_id or not marker_id.strip():
        raise ValueError("Marker id cannot be empty.")
    return f"{PHOTO_PREFIX}/{marker_id.strip()}/"


def _hash_bytes(b: bytes, n: int = 16) -> str:
    return hashlib.sha256(b).hexdigest()[:n]


def safe_filename(file: UploadedFile) -> str:
    p = Path(file.name)
    stem = slugify(p.stem) or "file"
    file.seek(0)
    data = file.getvalue()
    sig = _hash_bytes(data)
    ext = (p.suffix or "").lower()
    return f"{stem}-{sig}{ext}"


def make_photo_key(marker_id: str, index: int, file: UploadedFile, timestamp_ms: int) -> str:
    return f"{make_photo_prefix(marker_id)}{timestamp_ms}-{index}-{safe_filename(file)}"


def detect_content_type(
    filename: str, fallback: str = "application/octet-stream"
) -> str:
    ctype, _ = mimetypes.guess_type(filename)
    return ctype or fallback
