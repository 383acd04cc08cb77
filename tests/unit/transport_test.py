"""Tests for the HTTP and file document sources."""

from pathlib import Path

import httpx
import pytest

from simplestream.core.errors import FetchError
from simplestream.core.ports.source import DocumentSource
from simplestream.transport import FileDocumentSource, HttpDocumentSource

_URL = "https://cloud-images.example/streams/v1/download.json"


class TestHttpDocumentSource:
    def test_implements_protocol(self) -> None:
        source: DocumentSource = HttpDocumentSource(_URL)
        assert hasattr(source, "fetch")

    def test_fetch_returns_body(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text='{"products": {}}')

        source = HttpDocumentSource(_URL, transport=httpx.MockTransport(handler))
        assert source.fetch() == '{"products": {}}'
        assert str(seen[0].url) == _URL
        assert seen[0].method == "GET"

    def test_http_error_status(self) -> None:
        source = HttpDocumentSource(_URL, transport=httpx.MockTransport(lambda request: httpx.Response(503)))
        with pytest.raises(FetchError, match="HTTP 503") as excinfo:
            source.fetch()
        assert excinfo.value.source == _URL

    def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("certificate verify failed", request=request)

        source = HttpDocumentSource(_URL, transport=httpx.MockTransport(handler))
        with pytest.raises(FetchError, match="certificate verify failed"):
            source.fetch()


class TestFileDocumentSource:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "download.json"
        path.write_text('{"products": {}}', encoding="utf-8")
        assert FileDocumentSource(path).fetch() == '{"products": {}}'

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FetchError) as excinfo:
            FileDocumentSource(tmp_path / "missing.json").fetch()
        assert excinfo.value.source.endswith("missing.json")
