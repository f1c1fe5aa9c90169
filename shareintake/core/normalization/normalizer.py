from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from shareintake.core.events import EXTRA_EXIT_ON_SENT, ShareEvent
from shareintake.core.resolver.content_reader import ContentReader
from shareintake.core.resolver.contracts import ContentResolver
from shareintake.core.resolver.uri_resolver import UriResolver

from .items import ItemDescriptor, load_item_data
from .schema import build_share_payload
from .strategies import EXTRACTION_STRATEGIES

log = logging.getLogger("shareintake.normalization")

ACTION_SEND = "SEND"
ACTION_VIEW = "VIEW"

_ACTION_CLASSES = {
    "android.intent.action.SEND": ACTION_SEND,
    "android.intent.action.SEND_MULTIPLE": ACTION_SEND,
    "android.intent.action.VIEW": ACTION_VIEW,
    "SEND": ACTION_SEND,
    "SEND_MULTIPLE": ACTION_SEND,
    "VIEW": ACTION_VIEW,
}


@dataclass(frozen=True)
class ShareResult:
    """Normalized share event. items is never empty.

    action is None only when the event had no action; to_payload rejects it.
    """

    action: Optional[str]
    exit_on_sent: bool
    items: Tuple[ItemDescriptor, ...]

    def to_payload(self) -> Dict[str, Any]:
        """Render the output contract. Raises ShareSerializationError."""
        return build_share_payload(
            action=self.action,
            exit_on_sent=self.exit_on_sent,
            items=[item.to_payload() for item in self.items],
        )


def classify_action(action: Optional[str]) -> Optional[str]:
    """Map platform action identifiers to SEND / VIEW; pass others through."""
    return _ACTION_CLASSES.get(action, action)


def read_exit_on_sent(flags: Optional[Mapping[str, Any]]) -> bool:
    """Read the exit_on_sent flag. Defaults to False."""
    if flags is None:
        return False
    # Typed lookup: a non-boolean value counts as unset.
    return flags.get(EXTRA_EXIT_ON_SENT) is True


def normalize_share_event(
    event: ShareEvent,
    resolver: ContentResolver,
    *,
    include_data: bool = False,
) -> Optional[ShareResult]:
    """Normalize a share event into a ShareResult.

    Channels are tried in priority order (clipboard, stream, data); the first
    one yielding a non-empty item list supplies every item. Returns None when
    no channel carries content.

    include_data eagerly loads each item's base64 payload. Unreadable items
    get data "" instead of failing the event.
    """

    uri_resolver = UriResolver(resolver)

    items = None
    for strategy in EXTRACTION_STRATEGIES:
        items = strategy(event, uri_resolver)
        if items:
            log.debug("share event %s: %d item(s) from %s", event.action, len(items), strategy.channel)
            break
    else:
        log.debug("share event %s: no channel carried content", event.action)
        return None

    if include_data:
        reader = ContentReader(resolver)
        items = [load_item_data(item, reader) for item in items]

    return ShareResult(
        action=classify_action(event.action),
        exit_on_sent=read_exit_on_sent(event.flags),
        items=tuple(items),
    )


def share_event_to_payload(
    event: ShareEvent,
    resolver: ContentResolver,
    *,
    include_data: bool = False,
) -> Optional[Dict[str, Any]]:
    """Normalize and serialize in one step.

    Returns None when the event carries no content. Raises
    ShareSerializationError if the result cannot be rendered.
    """

    result = normalize_share_event(event, resolver, include_data=include_data)
    if result is None:
        return None
    return result.to_payload()
