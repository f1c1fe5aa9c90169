"""Share event normalization.

Turns a platform share event into an ordered list of item descriptors plus
action/exit metadata, trying the clipboard, stream and bare-reference
channels in that order.
"""

from .items import TEXT_MIME_TYPE, ItemDescriptor, build_item, load_item_data
from .normalizer import (
    ACTION_SEND,
    ACTION_VIEW,
    ShareResult,
    classify_action,
    normalize_share_event,
    read_exit_on_sent,
    share_event_to_payload,
)
from .schema import ItemOut, ShareResultOut, build_share_payload
from .strategies import (
    EXTRACTION_STRATEGIES,
    ExtractionStrategy,
    items_from_clipboard,
    items_from_data,
    items_from_stream,
)

__all__ = [
    "ItemDescriptor",
    "TEXT_MIME_TYPE",
    "build_item",
    "load_item_data",
    "ShareResult",
    "ACTION_SEND",
    "ACTION_VIEW",
    "classify_action",
    "read_exit_on_sent",
    "normalize_share_event",
    "share_event_to_payload",
    "ItemOut",
    "ShareResultOut",
    "build_share_payload",
    "ExtractionStrategy",
    "EXTRACTION_STRATEGIES",
    "items_from_clipboard",
    "items_from_stream",
    "items_from_data",
]
