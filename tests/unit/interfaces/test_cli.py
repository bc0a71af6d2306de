"""Tests for the reelscout CLI entrypoint."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from reelscout.interfaces import cli


@pytest.fixture()
def uvicorn_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    calls: list[dict[str, Any]] = []

    def fake_run(app: Any, **kwargs: Any) -> None:
        calls.append({"app": app, **kwargs})

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    for key in ("REELSCOUT_TMDB_API_KEY", "REELSCOUT_DEBOUNCE_MS", "HOST", "PORT"):
        monkeypatch.delenv(key, raising=False)
    return calls


class TestParser:
    def test_defaults(self) -> None:
        args = cli._build_parser().parse_args([])
        assert args.host is None
        assert args.port is None
        assert args.config is None
        assert cli._cli_overrides(args) == {}

    def test_overrides(self) -> None:
        args = cli._build_parser().parse_args(
            [
                "--port",
                "9000",
                "--log-level",
                "DEBUG",
                "--debounce-ms",
                "250",
                "--config",
                "conf.yaml",
            ]
        )
        assert args.port == 9000
        assert args.config == Path("conf.yaml")
        assert cli._cli_overrides(args) == {"log_level": "DEBUG", "debounce_ms": 250}

    def test_invalid_log_format(self) -> None:
        with pytest.raises(SystemExit):
            cli._build_parser().parse_args(["--log-format", "xml"])


class TestBindAddress:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HOST", raising=False)
        monkeypatch.delenv("PORT", raising=False)

        args = cli._build_parser().parse_args([])

        assert cli._bind_address(args) == ("0.0.0.0", 8000)

    def test_flags_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOST", "10.0.0.1")
        monkeypatch.setenv("PORT", "7000")

        args = cli._build_parser().parse_args(["--host", "127.0.0.1", "--port", "9001"])

        assert cli._bind_address(args) == ("127.0.0.1", 9001)


class TestStart:
    def test_missing_token_exits_nonzero(
        self, uvicorn_calls: list[dict[str, Any]]
    ) -> None:
        assert cli.start([]) == cli.EXIT_CONFIG_ERROR
        assert uvicorn_calls == []

    def test_runs_server(
        self, uvicorn_calls: list[dict[str, Any]], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("REELSCOUT_TMDB_API_KEY", "token")

        assert cli.start(["--host", "127.0.0.1", "--port", "9001"]) == 0

        (call,) = uvicorn_calls
        assert call["host"] == "127.0.0.1"
        assert call["port"] == 9001
        assert "structlog" in call["log_config"]["formatters"]

    def test_port_from_env(
        self, uvicorn_calls: list[dict[str, Any]], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("REELSCOUT_TMDB_API_KEY", "token")
        monkeypatch.setenv("PORT", "8123")

        cli.start([])

        assert uvicorn_calls[0]["port"] == 8123
        assert uvicorn_calls[0]["host"] == "0.0.0.0"

    def test_debounce_flag_reaches_app_config(
        self, uvicorn_calls: list[dict[str, Any]], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("REELSCOUT_TMDB_API_KEY", "token")

        cli.start(["--debounce-ms", "120"])

        app = uvicorn_calls[0]["app"]
        assert app.state.config.search.debounce_ms == 120

    def test_logs_masked_config(
        self, uvicorn_calls: list[dict[str, Any]], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("REELSCOUT_TMDB_API_KEY", "secret-token")
        fake_log = MagicMock()
        monkeypatch.setattr(cli, "log", fake_log)

        cli.start([])

        fake_log.info.assert_called_once()
        event = fake_log.info.call_args
        assert event.args == ("config_loaded",)
        assert event.kwargs["app_name"] == "reelscout"
        assert event.kwargs["config"]["tmdb"]["api_key"] == "***"
        assert "secret-token" not in repr(event.kwargs)
