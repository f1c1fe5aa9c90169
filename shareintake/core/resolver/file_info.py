from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class FileInfo:
    """Metadata-only view of a local file backing a shared item.

    Security notes:
    - File contents are untrusted. Sniffing reads only a small prefix (bounded).

    """

    path: str
    display_name: str
    mime_type: Optional[str]


def sniff_file_info(path: str, *, prefix_bytes: int = 64) -> FileInfo:
    """Compute FileInfo for a local path.

    Magic bytes win over the extension guess. A file with neither yields
    mime_type None rather than a generic octet-stream, so callers can tell
    "unknown" apart from a real type.

    """

    abs_path = os.path.abspath(path)

    guessed_mime, _enc = mimetypes.guess_type(abs_path)
    mime = guessed_mime

    try:
        with open(abs_path, "rb") as f:
            head = f.read(prefix_bytes)
    except OSError:
        head = b""

    magic_mime = _magic_mime(head)
    if magic_mime is not None:
        mime = magic_mime

    return FileInfo(
        path=abs_path,
        display_name=os.path.basename(abs_path),
        mime_type=mime,
    )


def _magic_mime(prefix: bytes) -> Optional[str]:
    """Detect mime from common magic headers of shareable media."""

    if prefix.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if prefix.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if prefix.startswith(b"GIF87a") or prefix.startswith(b"GIF89a"):
        return "image/gif"
    if prefix[:4] == b"RIFF" and prefix[8:12] == b"WEBP":
        return "image/webp"
    if prefix[4:8] == b"ftyp":
        return "video/mp4"
    if prefix.startswith(b"%PDF-"):
        return "application/pdf"
    if prefix.startswith(b"PK\x03\x04"):
        return "application/zip"
    return None
