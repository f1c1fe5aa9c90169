import base64

from shareintake.core.normalization import TEXT_MIME_TYPE, ItemDescriptor, build_item, load_item_data
from shareintake.core.resolver import DATA_COLUMN, ContentReader, UriResolver


def test_build_item_returns_none_without_reference_or_text(resolver) -> None:
    assert build_item(UriResolver(resolver), None, None) is None


def test_build_item_from_reference(resolver) -> None:
    resolver.add("content://a", mime="image/png", rows=[{DATA_COLUMN: "/tmp/a.png"}], blob=b"png")

    item = build_item(UriResolver(resolver), "content://a", None)

    assert item == ItemDescriptor(
        mime_type="image/png",
        path="/tmp/a.png",
        text=None,
        source_ref="content://a",
    )
    # No eager read.
    assert item.data is None
    assert resolver.streams_opened == []


def test_build_item_from_reference_keeps_unknown_type_and_path(resolver) -> None:
    item = build_item(UriResolver(resolver), "content://unknown", None)

    assert item.mime_type is None
    assert item.path is None
    assert item.source_ref == "content://unknown"


def test_build_item_from_reference_preserves_text_argument(resolver) -> None:
    item = build_item(UriResolver(resolver), "content://a", "caption")
    assert item.text == "caption"
    assert item.source_ref == "content://a"


def test_build_item_from_text(resolver) -> None:
    item = build_item(UriResolver(resolver), None, "hello")

    assert item.mime_type == TEXT_MIME_TYPE == "text/plain"
    assert item.path is None
    assert item.text == "hello"
    assert item.source_ref is None


def test_item_payload_shape() -> None:
    item = ItemDescriptor(mime_type="image/png", path="/a", text=None, source_ref="content://a")
    assert item.to_payload() == {"type": "image/png", "path": "/a", "text": None, "uri": "content://a"}

    loaded = ItemDescriptor(mime_type=None, path=None, text=None, source_ref="content://a", data="eA==")
    assert loaded.to_payload()["data"] == "eA=="


def test_load_item_data_reads_once(resolver) -> None:
    resolver.add("content://a", blob=b"xyz")
    reader = ContentReader(resolver)
    item = ItemDescriptor(mime_type=None, path=None, text=None, source_ref="content://a")

    loaded = load_item_data(item, reader)
    again = load_item_data(loaded, reader)

    assert loaded.data == base64.b64encode(b"xyz").decode("ascii")
    assert again is loaded
    assert resolver.streams_opened == ["content://a"]
    # Original descriptor is untouched.
    assert item.data is None


def test_load_item_data_skips_text_items(resolver) -> None:
    item = build_item(UriResolver(resolver), None, "hello")
    assert load_item_data(item, ContentReader(resolver)) is item


def test_load_item_data_degrades_for_unreadable_item(resolver) -> None:
    item = ItemDescriptor(mime_type=None, path=None, text=None, source_ref="content://gone")
    assert load_item_data(item, ContentReader(resolver)).data == ""
