from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence


@dataclass
class RowCursor:
    """In-memory MetadataCursor over a list of rows.

    Rows are mappings of column name to value. The column set is taken from
    the union of keys across all rows, in first-seen order.
    """

    rows: Sequence[Mapping[str, Any]]
    _columns: List[str] = field(default_factory=list, init=False, repr=False)
    _position: int = field(default=-1, init=False, repr=False)
    closed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        for row in self.rows:
            for name in row:
                if name not in self._columns:
                    self._columns.append(name)

    def _check_open(self) -> None:
        if self.closed:
            raise RuntimeError("cursor is closed")

    def move_to_first(self) -> bool:
        self._check_open()
        if not self.rows:
            return False
        self._position = 0
        return True

    def column_index(self, name: str) -> int:
        self._check_open()
        try:
            return self._columns.index(name)
        except ValueError:
            return -1

    def get_string(self, index: int) -> Optional[str]:
        self._check_open()
        if not 0 <= self._position < len(self.rows):
            raise IndexError("cursor is not positioned on a row")
        value = self.rows[self._position].get(self._columns[index])
        return None if value is None else str(value)

    def close(self) -> None:
        self.closed = True
