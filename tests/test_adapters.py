"""Tests for the MIME detector and requests transport adapters."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from bpaste.domain.errors import ProtocolError
from bpaste.domain.models.content import FileContent, FileReference, InMemoryBytes
from bpaste.infrastructure.http.requests_transport import RequestsTransport
from bpaste.infrastructure.mime.mimetypes_detector import (
    OCTET_STREAM,
    TEXT_PLAIN,
    MimetypesDetector,
    sniff_bytes,
)


# ===========================================================================
# MIME detection
# ===========================================================================


class TestSniffBytes:
    def test_text(self):
        assert sniff_bytes(b"plain ascii\n") == TEXT_PLAIN

    def test_utf8_text(self):
        assert sniff_bytes("héllo wörld".encode("utf-8")) == TEXT_PLAIN

    def test_nul_bytes(self):
        assert sniff_bytes(b"\x89PNG\r\n\x1a\n\x00\x00") == OCTET_STREAM

    def test_invalid_utf8(self):
        assert sniff_bytes(b"\xff\xfe\xfd") == OCTET_STREAM

    def test_multibyte_cut_at_sample_boundary(self):
        data = b"a" * 8191 + "é".encode("utf-8")
        assert sniff_bytes(data) == TEXT_PLAIN


class TestMimetypesDetector:
    def test_in_memory(self):
        content = FileContent(content=InMemoryBytes(b"hello"), filename="stdin-x")
        assert MimetypesDetector().detect(content) == TEXT_PLAIN

    def test_known_extension(self, tmp_path: Path):
        path = tmp_path / "page.html"
        path.write_text("<p>hi</p>")
        content = FileContent(content=FileReference(path), filename=path.name)
        assert MimetypesDetector().detect(content) == "text/html"

    def test_unknown_extension_sniffed(self, tmp_path: Path):
        path = tmp_path / "blob.zzzunknown"
        path.write_bytes(b"\x00\x01\x02")
        content = FileContent(content=FileReference(path), filename=path.name)
        assert MimetypesDetector().detect(content) == OCTET_STREAM

    def test_no_extension_text(self, tmp_path: Path):
        path = tmp_path / "README"
        path.write_text("just words")
        content = FileContent(content=FileReference(path), filename=path.name)
        assert MimetypesDetector().detect(content) == TEXT_PLAIN


# ===========================================================================
# requests transport (mocked)
# ===========================================================================


class TestRequestsTransport:
    @patch("bpaste.infrastructure.http.requests_transport.requests.post")
    def test_post(self, mock_post: MagicMock):
        mock_post.return_value = MagicMock(
            status_code=201,
            headers={"Content-Location": "/apis/rest/items/abc"},
        )
        response = RequestsTransport(timeout=5).post(
            "https://p.org/apis/rest/items", {"Content-Type": "text/plain"}, b"aGk="
        )
        assert response.status_code == 201
        assert response.header("content-location") == "/apis/rest/items/abc"
        mock_post.assert_called_once_with(
            "https://p.org/apis/rest/items",
            headers={"Content-Type": "text/plain"},
            data=b"aGk=",
            timeout=5,
        )

    @patch(
        "bpaste.infrastructure.http.requests_transport.requests.post",
        side_effect=requests.ConnectionError("refused"),
    )
    def test_connection_error(self, mock_post: MagicMock):
        with pytest.raises(ProtocolError, match="refused"):
            RequestsTransport().post("http://localhost:8000/apis/rest/items", {}, b"")

    def test_session_used(self):
        session = MagicMock(spec=requests.Session)
        session.post.return_value = MagicMock(status_code=500, headers={})
        response = RequestsTransport(session=session).post("http://x/apis/rest/items", {}, b"x")
        assert response.ok is False
        session.post.assert_called_once()
