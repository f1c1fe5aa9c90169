from typing import Any, BinaryIO, Optional, Protocol

# Opaque handle for a unit of shared content. Never inspected beyond None checks.
ContentReference = Any

# Column names queried when resolving a reference to a local path.
DATA_COLUMN = "_data"
DISPLAY_NAME_COLUMN = "_display_name"

# ------------------------------
# Capability Protocols
# ------------------------------

class MetadataCursor(Protocol):
    """
    Row source returned by a metadata query. Callers must close it.
    """

    def move_to_first(self) -> bool:
        """
        Position at the first row. Returns False when there are no rows.
        """
        ...

    def column_index(self, name: str) -> int:
        """
        Return the index of a named column, or -1 if it does not exist.
        """
        ...

    def get_string(self, index: int) -> Optional[str]:
        """
        Read the current row's value at index as a string.
        """
        ...

    def close(self) -> None:
        ...


class ContentResolver(Protocol):
    """
    Platform I/O capabilities for content references.
    """

    def type_of(self, ref: ContentReference) -> Optional[str]:
        """
        Return the MIME type of the referenced content, if known.
        """
        ...

    def open_metadata_query(self, ref: ContentReference) -> Optional[MetadataCursor]:
        """
        Open a metadata query against the reference, or None if it cannot be opened.
        """
        ...

    def open_stream(self, ref: ContentReference) -> Optional[BinaryIO]:
        """
        Open a byte stream for the reference. Raises OSError on I/O failure.
        """
        ...
