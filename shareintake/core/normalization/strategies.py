from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, List, Mapping, Optional

from shareintake.core.events import EXTRA_STREAM, ClipboardPayload, ShareEvent
from shareintake.core.resolver.contracts import ContentReference
from shareintake.core.resolver.uri_resolver import UriResolver

from .items import ItemDescriptor, build_item

ItemList = Optional[List[ItemDescriptor]]


def items_from_clipboard(resolver: UriResolver, clipboard: Optional[ClipboardPayload]) -> ItemList:
    """Extract one item per clipboard entry, in order.

    Entry precedence: reference, then text, then rich text, then the entry's
    own string form. Entries are never dropped.
    """

    if clipboard is None:
        return None

    items: List[ItemDescriptor] = []
    for entry in clipboard.entries:
        if entry.reference is not None:
            item = build_item(resolver, entry.reference, None)
        elif entry.text is not None:
            item = build_item(resolver, None, entry.text)
        elif entry.rich_text is not None:
            item = build_item(resolver, None, entry.rich_text)
        else:
            item = build_item(resolver, None, str(entry))
        items.append(item)
    return items


def items_from_stream(resolver: UriResolver, flags: Optional[Mapping[str, Any]]) -> ItemList:
    """Extract the single streamed attachment from the flag bag."""

    if flags is None:
        return None
    item = build_item(resolver, flags.get(EXTRA_STREAM), None)
    if item is None:
        return None
    return [item]


def items_from_data(resolver: UriResolver, reference: Optional[ContentReference]) -> ItemList:
    """Extract the bare content reference, if any."""

    if reference is None:
        return None
    item = build_item(resolver, reference, None)
    if item is None:
        return None
    return [item]


@dataclass(frozen=True)
class ExtractionStrategy:
    """One share channel: how to pick it out of an event, and how to extract it."""

    channel: str
    select: Callable[[ShareEvent], Any]
    extract: Callable[[UriResolver, Any], ItemList]

    def __call__(self, event: ShareEvent, resolver: UriResolver) -> ItemList:
        return self.extract(resolver, self.select(event))


# Priority order: first non-empty result wins.
EXTRACTION_STRATEGIES = (
    ExtractionStrategy("clipboard", attrgetter("clipboard"), items_from_clipboard),
    ExtractionStrategy("stream", attrgetter("flags"), items_from_stream),
    ExtractionStrategy("data", attrgetter("bare_reference"), items_from_data),
)
