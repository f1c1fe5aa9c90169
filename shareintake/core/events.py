from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from shareintake.core.errors import ShareEventFormatError
from shareintake.core.resolver.contracts import ContentReference

# Flag bag keys.
EXTRA_EXIT_ON_SENT = "exit_on_sent"
EXTRA_STREAM = "stream"


@dataclass(frozen=True)
class ClipEntry:
    """One entry of a clipboard-like share payload.

    At most one field is expected to be populated; extraction reads them in
    the order reference, text, rich_text.
    """

    reference: Optional[ContentReference] = None
    text: Optional[str] = None
    rich_text: Optional[str] = None


@dataclass(frozen=True)
class ClipboardPayload:
    """Ordered multi-item share payload."""

    entries: Tuple[ClipEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.entries, tuple):
            object.__setattr__(self, "entries", tuple(self.entries))


@dataclass(frozen=True)
class ShareEvent:
    """A single inbound "share with this app" event.

    Read-only input. More than one channel may be populated; extraction
    tries them in fixed priority.
    """

    action: Optional[str]
    flags: Optional[Mapping[str, Any]] = None
    clipboard: Optional[ClipboardPayload] = None
    bare_reference: Optional[ContentReference] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ShareEvent":
        """Build a ShareEvent from a JSON-shaped mapping.

        Expected shape::

            {
              "action": "android.intent.action.SEND",
              "flags": {"exit_on_sent": true, "stream": "file:///tmp/a.png"} | null,
              "clipboard": {"entries": [{"reference": ..., "text": ..., "rich_text": ...}]} | null,
              "bare_reference": "..." | null
            }

        Raises ShareEventFormatError on unexpected shapes.
        """

        if not isinstance(data, Mapping):
            raise ShareEventFormatError("share event must be a mapping")

        action = data.get("action")
        if action is not None and not isinstance(action, str):
            raise ShareEventFormatError("action must be a string")

        flags = data.get("flags")
        if flags is not None and not isinstance(flags, Mapping):
            raise ShareEventFormatError("flags must be a mapping")

        return cls(
            action=action,
            flags=dict(flags) if flags is not None else None,
            clipboard=_clipboard_from_mapping(data.get("clipboard")),
            bare_reference=data.get("bare_reference"),
        )


def _clipboard_from_mapping(raw: Any) -> Optional[ClipboardPayload]:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ShareEventFormatError("clipboard must be a mapping")

    entries = raw.get("entries", [])
    if not isinstance(entries, (list, tuple)):
        raise ShareEventFormatError("clipboard.entries must be a list")

    out = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ShareEventFormatError(f"clipboard.entries[{i}] must be a mapping")
        for k in ("text", "rich_text"):
            if entry.get(k) is not None and not isinstance(entry.get(k), str):
                raise ShareEventFormatError(f"clipboard.entries[{i}].{k} must be a string")
        out.append(
            ClipEntry(
                reference=entry.get("reference"),
                text=entry.get("text"),
                rich_text=entry.get("rich_text"),
            )
        )
    return ClipboardPayload(entries=tuple(out))
