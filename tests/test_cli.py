"""End-to-end tests for the Typer CLI with injected adapters."""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Mapping, Optional
from unittest.mock import MagicMock

import pytest
from rich.console import Console
from typer.testing import CliRunner

from bpaste.bootstrap import Container
from bpaste.domain.errors import ClipboardError
from bpaste.domain.ports.clipboard_port import ClipboardPort
from bpaste.domain.ports.http_transport import HttpResponse, HttpTransportPort
from bpaste.infrastructure.config.environment_source import EnvironmentConfigSource
from bpaste.presentation.cli import app as cli_module
from bpaste.presentation.cli import formatters

runner = CliRunner()

_ENV = {
    "BPASTE_API_KEY": "secret",
    "BPASTE_API_BASE_URL": "https://paste.example.org",
}


class RecordingTransport(HttpTransportPort):
    def __init__(self, response: Optional[HttpResponse] = None) -> None:
        self.response = response or HttpResponse(
            status_code=201, headers={"Content-Location": "/apis/rest/items/abc123"}
        )
        self.calls: list[tuple[str, dict[str, str], bytes]] = []

    def post(self, url: str, headers: Mapping[str, str], body: bytes) -> HttpResponse:
        self.calls.append((url, dict(headers), body))
        return self.response


@pytest.fixture()
def wiring(monkeypatch, tmp_path: Path):
    """Replace the container's adapters; returns them for inspection."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg_home"))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(tmp_path / "xdg_dirs"))
    # Plain output regardless of the terminal the tests run in.
    monkeypatch.setattr(formatters, "console", Console(color_system=None, highlight=False))
    monkeypatch.setattr(
        formatters, "err_console", Console(stderr=True, color_system=None, highlight=False)
    )

    state = {
        "environ": dict(_ENV),
        "transport": RecordingTransport(),
        "clipboard": MagicMock(spec=ClipboardPort),
    }
    state["clipboard"].paste.return_value = "from the clipboard"

    def factory() -> Container:
        return Container(
            config_source=EnvironmentConfigSource(environ=state["environ"]),
            clipboard=state["clipboard"],
            transport=state["transport"],
        )

    monkeypatch.setattr(cli_module, "Container", factory)
    return state


def _invoke(args, **kwargs):
    return runner.invoke(cli_module.app, args, **kwargs)


class TestSuccess:
    def test_file_upload(self, wiring, tmp_path: Path):
        path = tmp_path / "notes.txt"
        path.write_text("some notes")

        result = _invoke([str(path)])

        assert result.exit_code == 0, result.output
        assert "Uploading notes.txt..." in result.output
        assert "URL copied to clipboard: https://paste.example.org/abc123" in result.output
        wiring["clipboard"].copy.assert_called_once_with("https://paste.example.org/abc123")
        url, headers, body = wiring["transport"].calls[0]
        assert url == "https://paste.example.org/apis/rest/items"
        assert headers["Content-Filename"] == "notes.txt"
        assert base64.b64decode(body) == b"some notes"

    def test_stdin_upload(self, wiring):
        result = _invoke(["-"], input="piped text")
        assert result.exit_code == 0, result.output
        _, headers, body = wiring["transport"].calls[0]
        assert headers["Content-Filename"].startswith("stdin-")
        assert base64.b64decode(body) == b"piped text"

    def test_clipboard_upload(self, wiring):
        result = _invoke([])
        assert result.exit_code == 0, result.output
        _, headers, body = wiring["transport"].calls[0]
        assert headers["Content-Filename"].startswith("clipboard-")
        assert base64.b64decode(body) == b"from the clipboard"

    def test_cli_flags_override_environment(self, wiring):
        result = _invoke(["--base-url", "http://cli.example.org", "--api-key", "cli-key", "-"], input="x")
        assert result.exit_code == 0, result.output
        url, headers, _ = wiring["transport"].calls[0]
        assert url == "http://cli.example.org/apis/rest/items"
        expected = base64.b64encode(b"username:cli-key").decode("ascii")
        assert headers["Authorization"] == f"Basic {expected}"

    def test_config_path_option(self, wiring, tmp_path: Path):
        wiring["environ"] = {}
        conf = tmp_path / "custom.conf"
        conf.write_text("# test\nbase_url = https://file.example.org\napi_key = file-key\n")
        result = _invoke(["--config-path", str(conf), "-"], input="x")
        assert result.exit_code == 0, result.output
        assert "https://file.example.org/abc123" in result.output

    def test_clipboard_writeback_failure_is_warning(self, wiring):
        wiring["clipboard"].copy.side_effect = ClipboardError("No clipboard tool found")
        result = _invoke(["-"], input="data")
        assert result.exit_code == 0, result.output
        assert "Warning: Failed to copy to clipboard: No clipboard tool found" in result.output
        assert "Upload successful! URL: https://paste.example.org/abc123" in result.output


class TestFailures:
    def test_missing_api_key(self, wiring):
        wiring["environ"] = {}
        result = _invoke(["-"], input="data")
        assert result.exit_code == 1
        assert "API key not provided" in result.output
        assert wiring["transport"].calls == []

    def test_missing_file(self, wiring, tmp_path: Path):
        result = _invoke([str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_too_large(self, wiring):
        result = _invoke(["--max-file-size", "1K", "-"], input="x" * 2048)
        assert result.exit_code == 1
        assert "Upload failed:" in result.output
        assert "exceeds maximum limit of 1024 bytes" in result.output
        assert wiring["transport"].calls == []

    def test_server_error(self, wiring):
        wiring["transport"].response = HttpResponse(status_code=500)
        result = _invoke(["-"], input="data")
        assert result.exit_code == 1
        assert "Upload failed with status: 500" in result.output

    def test_empty_stdin(self, wiring):
        result = _invoke(["-"], input="")
        assert result.exit_code == 1
        assert "No input provided" in result.output

    def test_clipboard_read_failure(self, wiring):
        wiring["clipboard"].paste.side_effect = ClipboardError("Failed to read clipboard")
        result = _invoke([])
        assert result.exit_code == 1
        assert "Failed to read clipboard" in result.output

    def test_bad_size_option(self, wiring):
        result = _invoke(["--max-file-size", "huge", "-"], input="data")
        assert result.exit_code == 2
        assert wiring["transport"].calls == []
