"""Tests for configuration adapter."""

import os
from pathlib import Path
from tempfile import NamedTemporaryFile
from unittest.mock import patch

import pytest

from zbiorkom_departures.adapters.config import AppConfig, StopConfigurationLoader
from zbiorkom_departures.domain.errors import ConfigurationError
from zbiorkom_departures.domain.models import DEFAULT_API_URL


def _write_toml(content: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
        f.write(content)
        return f.name


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig(_env_file=None)

    assert config.api_url == DEFAULT_API_URL
    assert config.stop_id == ""
    assert config.city == "kielce"
    assert config.max_departures == 5
    assert config.update_interval == 60
    assert config.timezone == "Europe/Warsaw"
    assert config.show_line_colors is True


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("STOP_ID", "dworzec-kolejowy102")
    monkeypatch.setenv("CITY", "radom")
    monkeypatch.setenv("MAX_DEPARTURES", "8")
    monkeypatch.setenv("SHOW_REALTIME_INDICATOR", "false")

    config = AppConfig(_env_file=None)

    assert config.stop_id == "dworzec-kolejowy102"
    assert config.city == "radom"
    assert config.max_departures == 8
    assert config.show_realtime_indicator is False


@pytest.mark.parametrize(
    ("env", "message"),
    [
        ({"MAX_DEPARTURES": "0"}, "max_departures must be at least 1"),
        ({"UPDATE_INTERVAL": "0"}, "update_interval must be at least 1 second"),
        ({"API_TIMEOUT_SECONDS": "0"}, "api_timeout_seconds must be positive"),
        ({"TIMEZONE": "Mars/Olympus"}, "Unknown timezone"),
    ],
)
def test_config_validates_values(env: dict[str, str], message: str) -> None:
    """Given an invalid value, when loading config, then validation error is raised."""
    with patch.dict(os.environ, env, clear=True):
        with pytest.raises(ValueError, match=message):
            AppConfig(_env_file=None)


def test_toml_overrides_stop_and_display_settings() -> None:
    """Given a TOML file, when loading it, then [stop], [display] and [api] values apply."""
    path = _write_toml(
        """
[stop]
stop_id = "plac-wolnosci01"
city = "kielce"
max_departures = 3
update_interval = 20

[display]
title = "Plac Wolności"
show_stop_name = false

[api]
api_timeout_seconds = 2.5
"""
    )
    try:
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig(config_file=path, _env_file=None)
        data = config.load_toml()

        assert data["stop"]["stop_id"] == "plac-wolnosci01"
        assert config.stop_id == "plac-wolnosci01"
        assert config.max_departures == 3
        assert config.update_interval == 20
        assert config.title == "Plac Wolności"
        assert config.show_stop_name is False
        assert config.api_timeout_seconds == 2.5
    finally:
        Path(path).unlink()


def test_toml_values_are_validated() -> None:
    """Given an invalid TOML value, when loading it, then validation error is raised."""
    path = _write_toml("[stop]\nmax_departures = 0\n")
    try:
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig(config_file=path, _env_file=None)
        with pytest.raises(ValueError, match="max_departures"):
            config.load_toml()
    finally:
        Path(path).unlink()


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when loading TOML, then FileNotFoundError is raised."""
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig(config_file="nonexistent.toml", _env_file=None)

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_toml()


def test_config_raises_error_when_config_file_not_set() -> None:
    """Given config_file is None, when loading TOML, then ValueError is raised."""
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig(_env_file=None)

    with pytest.raises(ValueError, match="config_file must be set"):
        config.load_toml()


def test_stop_configuration_loader_maps_fields() -> None:
    """Given app config, when loading the stop configuration, then fields are mapped."""
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig(
            stop_id=" dworzec-kolejowy102 ",
            city="kielce",
            max_departures=7,
            update_interval=30,
            _env_file=None,
        )

    stop_config = StopConfigurationLoader.load(config)

    assert stop_config.stop_id == "dworzec-kolejowy102"
    assert stop_config.api_base_url == DEFAULT_API_URL
    assert stop_config.max_departures == 7
    assert stop_config.poll_interval_seconds == 30
    assert stop_config.request_limit == 12


def test_stop_configuration_loader_reads_toml() -> None:
    """Given a config file, when loading the stop configuration, then TOML values are used."""
    path = _write_toml('[stop]\nstop_id = "from-toml"\n')
    try:
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig(config_file=path, _env_file=None)

        assert StopConfigurationLoader.load(config).stop_id == "from-toml"
    finally:
        Path(path).unlink()


def test_missing_stop_id_is_rejected_on_validation() -> None:
    """Given no stop id anywhere, when validating the loaded configuration, then it is rejected."""
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig(_env_file=None)

    with pytest.raises(ConfigurationError, match="stop_id"):
        StopConfigurationLoader.load(config).validate()
