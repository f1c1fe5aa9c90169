import base64
import logging

from shareintake.core.resolver import ContentReader


def test_read_encoded_returns_base64_without_wrapping(resolver) -> None:
    blob = bytes(range(256)) * 4
    resolver.add("content://a", blob=blob)

    encoded = ContentReader(resolver).read_encoded("content://a")

    assert "\n" not in encoded
    assert base64.b64decode(encoded) == blob


def test_read_encoded_empty_content(resolver) -> None:
    resolver.add("content://a", blob=b"")
    assert ContentReader(resolver).read_encoded("content://a") == ""


def test_read_encoded_degrades_to_empty_string_on_io_error(resolver, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="shareintake.resolver"):
        assert ContentReader(resolver).read_encoded("content://missing") == ""
    assert any("FileNotFoundError" in r.getMessage() for r in caplog.records)


def test_read_encoded_degrades_when_read_fails() -> None:
    class FailingStream:
        closed = False

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            self.closed = True
            return False

        def read(self):
            raise OSError("device gone")

    stream = FailingStream()

    class Resolver:
        def open_stream(self, ref):
            return stream

    assert ContentReader(Resolver()).read_encoded("content://a") == ""
    assert stream.closed


def test_read_encoded_handles_missing_stream() -> None:
    class Resolver:
        def open_stream(self, ref):
            return None

    assert ContentReader(Resolver()).read_encoded("content://a") == ""
