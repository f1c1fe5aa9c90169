from __future__ import annotations

import base64
import logging

from .contracts import ContentReference, ContentResolver

log = logging.getLogger("shareintake.resolver")


class ContentReader:
    """Materialize the bytes behind a content reference as base64 text.

    Security notes:
    - Bytes are never logged; only the failure class is.
    """

    def __init__(self, content_resolver: ContentResolver) -> None:
        self._content_resolver = content_resolver

    def read_encoded(self, ref: ContentReference) -> str:
        """Read ref fully and return it base64 encoded (no line wrapping).

        Any I/O failure yields "" so one unreadable item does not abort the
        surrounding extraction.
        """

        try:
            stream = self._content_resolver.open_stream(ref)
            if stream is None:
                log.warning("no stream available for shared item")
                return ""
            with stream:
                raw = stream.read()
        except OSError as e:
            log.warning("failed to read shared item: %s", type(e).__name__)
            return ""

        return base64.b64encode(raw).decode("ascii")
