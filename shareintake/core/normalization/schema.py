from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shareintake.core.errors import ShareSerializationError


class ItemOut(BaseModel):
    """One shared item, as exposed to the application layer."""

    model_config = ConfigDict(extra="forbid", strict=True)

    type: Optional[str] = None
    path: Optional[str] = None
    text: Optional[str] = None
    uri: Optional[str] = None
    data: Optional[str] = None


class ShareResultOut(BaseModel):
    """Top-level normalized share result."""

    model_config = ConfigDict(extra="forbid", strict=True)

    action: str
    exit: bool
    items: List[ItemOut] = Field(min_length=1)


def build_share_payload(
    *,
    action: Any,
    exit_on_sent: Any,
    items: List[Mapping[str, Any]],
) -> Dict[str, Any]:
    """Assemble and validate the output contract.

    Keys consumers depend on: action, exit, items[*].type/path/text/uri.
    "data" appears on an item only when it was loaded.

    Raises ShareSerializationError if the pieces do not fit the contract.
    """

    try:
        out = ShareResultOut(
            action=action,
            exit=exit_on_sent,
            items=[ItemOut(**item) for item in items],
        )
    except ValidationError as e:
        raise ShareSerializationError(f"share result does not match output contract: {e}") from e

    payload = out.model_dump()
    for item in payload["items"]:
        if item.get("data") is None:
            item.pop("data", None)
    return payload
