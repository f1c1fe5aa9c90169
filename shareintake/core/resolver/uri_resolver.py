from __future__ import annotations

import logging
from contextlib import closing
from typing import Optional

from .contracts import DATA_COLUMN, DISPLAY_NAME_COLUMN, ContentReference, ContentResolver

log = logging.getLogger("shareintake.resolver")


class UriResolver:
    """Read-only queries about a content reference.

    Both operations delegate to an injected ContentResolver and never mutate
    anything. Thread-safety is whatever the wrapped resolver provides.
    I/O failures from the resolver are reported as None.
    """

    def __init__(self, content_resolver: ContentResolver) -> None:
        self._content_resolver = content_resolver

    @property
    def content_resolver(self) -> ContentResolver:
        return self._content_resolver

    def type_of(self, ref: ContentReference) -> Optional[str]:
        """Return the MIME type reported for ref (may be None)."""
        try:
            return self._content_resolver.type_of(ref)
        except OSError as e:
            log.debug("type lookup failed for shared item: %s", type(e).__name__)
            return None

    def resolve_path(self, ref: ContentReference) -> Optional[str]:
        """Best-effort filesystem path for ref.

        Tries the data column first, then the display name column, on the
        first row of the metadata query. The cursor is closed on every path.
        """

        try:
            cursor = self._content_resolver.open_metadata_query(ref)
        except OSError as e:
            log.debug("metadata query failed for shared item: %s", type(e).__name__)
            return None
        if cursor is None:
            return None

        with closing(cursor):
            try:
                return self._first_path_column(cursor)
            except OSError as e:
                log.debug("metadata read failed for shared item: %s", type(e).__name__)
                return None

    @staticmethod
    def _first_path_column(cursor) -> Optional[str]:
        if not cursor.move_to_first():
            return None
        for column in (DATA_COLUMN, DISPLAY_NAME_COLUMN):
            index = cursor.column_index(column)
            if index < 0:
                continue
            value = cursor.get_string(index)
            if value is not None:
                return value
        return None
