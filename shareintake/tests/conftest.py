from __future__ import annotations

import io
from typing import Any, Dict, List, Mapping, Optional, Sequence

import pytest

from shareintake.core.resolver import RowCursor


class FakeContentResolver:
    """In-memory ContentResolver. Records every cursor it hands out."""

    def __init__(self) -> None:
        self.types: Dict[Any, Optional[str]] = {}
        self.rows: Dict[Any, Sequence[Mapping[str, Any]]] = {}
        self.blobs: Dict[Any, bytes] = {}
        self.cursors: List[RowCursor] = []
        self.streams_opened: List[Any] = []

    def add(self, ref, *, mime=None, rows=None, blob=None) -> None:
        self.types[ref] = mime
        if rows is not None:
            self.rows[ref] = rows
        if blob is not None:
            self.blobs[ref] = blob

    def type_of(self, ref):
        return self.types.get(ref)

    def open_metadata_query(self, ref):
        rows = self.rows.get(ref)
        if rows is None:
            return None
        cursor = RowCursor(rows)
        self.cursors.append(cursor)
        return cursor

    def open_stream(self, ref):
        self.streams_opened.append(ref)
        if ref not in self.blobs:
            raise FileNotFoundError(f"no such content: {ref}")
        return io.BytesIO(self.blobs[ref])


@pytest.fixture
def resolver() -> FakeContentResolver:
    return FakeContentResolver()
