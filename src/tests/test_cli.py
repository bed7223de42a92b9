"""Tests for CLI commands."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from flatwiki.cli import cli


@pytest.fixture
def uvicorn_calls(monkeypatch):
    calls = []

    def fake_run(app, **kwargs):
        calls.append((app, kwargs))

    monkeypatch.setattr("flatwiki.cli.uvicorn.run", fake_run)
    return calls


class TestServeCommand:
    def test_starts_server_with_options(self, tmp_path: Path, uvicorn_calls) -> None:
        data_dir = tmp_path / "pages"
        runner = CliRunner()
        result = runner.invoke(
            cli, ["serve", "--port", "9123", "--data-dir", str(data_dir)]
        )

        assert result.exit_code == 0, result.output
        assert "Starting server on 127.0.0.1:9123" in result.output
        assert data_dir.is_dir()
        app, kwargs = uvicorn_calls[0]
        assert kwargs["port"] == 9123
        assert app.state.storage.base_path == data_dir

    def test_fails_on_bad_templates(self, tmp_path: Path, monkeypatch, uvicorn_calls) -> None:
        monkeypatch.setenv("FLATWIKI_TEMPLATES_DIR", str(tmp_path / "missing"))
        runner = CliRunner()
        result = runner.invoke(cli, ["serve", "--data-dir", str(tmp_path)])

        assert result.exit_code == 1
        assert "Templates directory not found" in result.output
        assert uvicorn_calls == []
