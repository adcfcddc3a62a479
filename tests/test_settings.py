from __future__ import annotations

from typing import Iterator

import pytest

from markpost.runtime import telemetry
from markpost.runtime.settings import env_flag, env_int, site_url


@pytest.fixture
def restore_telemetry(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    monkeypatch.delenv("MARKPOST_LOG_PRESET", raising=False)
    yield monkeypatch
    monkeypatch.delenv("MARKPOST_LOG_PRESET", raising=False)
    telemetry.configure()


def test_env_flag_parses_truthy_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARKPOST_LOG_JSON", "Yes")
    assert env_flag("LOG_JSON", False) is True

    monkeypatch.setenv("MARKPOST_LOG_JSON", "off")
    assert env_flag("LOG_JSON", True) is False

    monkeypatch.delenv("MARKPOST_LOG_JSON")
    assert env_flag("LOG_JSON", True) is True


def test_env_int_falls_back_on_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARKPOST_LOG_BUFFER_SIZE", "lots")
    assert env_int("LOG_BUFFER_SIZE", 2048) == 2048

    monkeypatch.setenv("MARKPOST_LOG_BUFFER_SIZE", "512")
    assert env_int("LOG_BUFFER_SIZE", 2048) == 512


def test_site_url_strips_trailing_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARKPOST_SITE_URL", "https://blog.example/")
    assert site_url() == "https://blog.example"


def test_configure_applies_named_preset(restore_telemetry: pytest.MonkeyPatch) -> None:
    telemetry.configure(preset="Development")

    assert telemetry.active_preset() == "development"
    telemetry.record_event("settings.preset", level="debug")


def test_configure_reads_preset_from_environment(
    restore_telemetry: pytest.MonkeyPatch,
) -> None:
    restore_telemetry.setenv("MARKPOST_LOG_PRESET", "development")
    telemetry.configure()
    assert telemetry.active_preset() == "development"

    restore_telemetry.delenv("MARKPOST_LOG_PRESET")
    telemetry.configure()
    assert telemetry.active_preset() is None


def test_configure_rejects_unknown_preset(restore_telemetry: pytest.MonkeyPatch) -> None:
    telemetry.configure()
    with pytest.raises(ValueError, match="Unknown preset"):
        telemetry.configure(preset="verbose")

    assert telemetry.active_preset() is None


def test_configure_rejects_config_with_preset(
    restore_telemetry: pytest.MonkeyPatch,
) -> None:
    with pytest.raises(ValueError, match="either"):
        telemetry.configure(config=object(), preset="development")


def test_editor_cli_accepts_log_preset() -> None:
    pytest.importorskip("textual")
    from markpost.adapters.textual.app import _parse_args

    assert _parse_args(["--log-preset", "performance"]).log_preset == "performance"
    assert _parse_args([]).log_preset is None
    with pytest.raises(SystemExit):
        _parse_args(["--log-preset", "verbose"])
