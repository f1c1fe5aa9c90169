from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Optional
from urllib.parse import unquote, urlparse

from .contracts import DATA_COLUMN, DISPLAY_NAME_COLUMN, ContentReference
from .cursor import RowCursor
from .file_info import sniff_file_info


def local_path_for(ref: ContentReference) -> Optional[str]:
    """Map a reference to a local path.

    Accepts plain paths, pathlib paths and file:// URIs. Any other URI scheme
    (content://, https://, ...) has no local path, and neither does a file://
    URI naming a remote host.
    """

    if ref is None:
        return None
    if isinstance(ref, Path):
        return str(ref)
    if not isinstance(ref, str) or not ref:
        return None

    parsed = urlparse(ref)
    if parsed.scheme == "file":
        if parsed.netloc not in ("", "localhost"):
            return None
        return unquote(parsed.path)
    # Single-letter schemes are Windows drive letters, not URIs.
    if parsed.scheme and len(parsed.scheme) > 1:
        return None
    return ref


class LocalContentResolver:
    """ContentResolver backed by the local filesystem.

    Used by the CLI to normalize share events captured as JSON, where
    references point at files on disk.
    """

    def type_of(self, ref: ContentReference) -> Optional[str]:
        path = local_path_for(ref)
        if path is None or not os.path.isfile(path):
            return None
        return sniff_file_info(path).mime_type

    def open_metadata_query(self, ref: ContentReference) -> Optional[RowCursor]:
        path = local_path_for(ref)
        if path is None or not os.path.isfile(path):
            return None
        info = sniff_file_info(path)
        return RowCursor([{DATA_COLUMN: info.path, DISPLAY_NAME_COLUMN: info.display_name}])

    def open_stream(self, ref: ContentReference) -> BinaryIO:
        path = local_path_for(ref)
        if path is None:
            raise FileNotFoundError(f"not a local reference: {ref!r}")
        return open(path, "rb")
