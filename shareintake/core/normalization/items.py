from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from shareintake.core.resolver.content_reader import ContentReader
from shareintake.core.resolver.contracts import ContentReference
from shareintake.core.resolver.uri_resolver import UriResolver

TEXT_MIME_TYPE = "text/plain"


@dataclass(frozen=True)
class ItemDescriptor:
    """Normalized, consumer-facing view of one shared item.

    source_ref is kept opaque so consumers can resolve it again later.
    data is only set by an explicit read (see load_item_data).
    """

    mime_type: Optional[str]
    path: Optional[str]
    text: Optional[str]
    source_ref: Optional[ContentReference]
    data: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Render the item in the output contract shape."""
        payload: Dict[str, Any] = {
            "type": self.mime_type,
            "path": self.path,
            "text": self.text,
            "uri": None if self.source_ref is None else str(self.source_ref),
        }
        if self.data is not None:
            payload["data"] = self.data
        return payload


def build_item(
    resolver: UriResolver,
    reference: Optional[ContentReference],
    text: Optional[str],
) -> Optional[ItemDescriptor]:
    """Build one ItemDescriptor from a content reference or inline text.

    Returns None when both are None.
    """

    if reference is None and text is None:
        return None
    if reference is not None:
        return ItemDescriptor(
            mime_type=resolver.type_of(reference),
            path=resolver.resolve_path(reference),
            text=text,
            source_ref=reference,
        )
    return ItemDescriptor(
        mime_type=TEXT_MIME_TYPE,
        path=None,
        text=text,
        source_ref=None,
    )


def load_item_data(item: ItemDescriptor, reader: ContentReader) -> ItemDescriptor:
    """Return item with its base64 payload populated.

    Items that already carry data, or that have no source reference (inline
    text), are returned unchanged.
    """

    if item.data is not None or item.source_ref is None:
        return item
    return replace(item, data=reader.read_encoded(item.source_ref))
