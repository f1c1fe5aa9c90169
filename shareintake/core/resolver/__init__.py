from .content_reader import ContentReader
from .contracts import (
    DATA_COLUMN,
    DISPLAY_NAME_COLUMN,
    ContentReference,
    ContentResolver,
    MetadataCursor,
)
from .cursor import RowCursor
from .file_info import FileInfo, sniff_file_info
from .local import LocalContentResolver, local_path_for
from .uri_resolver import UriResolver

__all__ = [
    "ContentReference",
    "ContentResolver",
    "MetadataCursor",
    "DATA_COLUMN",
    "DISPLAY_NAME_COLUMN",
    "RowCursor",
    "UriResolver",
    "ContentReader",
    "FileInfo",
    "sniff_file_info",
    "LocalContentResolver",
    "local_path_for",
]
