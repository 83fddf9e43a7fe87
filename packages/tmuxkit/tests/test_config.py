"""Tests for tmuxkit.toml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from tmuxkit import config as config_module
from tmuxkit.config import ConfigManager, get_config_manager

pytestmark = pytest.mark.unit


def test_defaults_without_file(reset_config) -> None:
    config = get_config_manager()

    assert config.config_file is None
    assert config.binary == "tmux"
    assert config.socket_name is None
    assert config.socket_path is None
    assert config.session is None
    assert config.log_level == "INFO"


def test_found_in_parent_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "tmuxkit.toml").write_text(
        '[default]\nsocket_path = "/tmp/tmux-ci"\nsession = "main"\nlog_level = "debug"\n'
    )
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    config = ConfigManager()

    assert config.config_file == tmp_path / "tmuxkit.toml"
    assert config.socket_path == "/tmp/tmux-ci"
    assert config.session == "main"
    assert config.log_level == "DEBUG"


def test_explicit_path(tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    path.write_text('[default]\nbinary = "/opt/tmux/bin/tmux"\n')

    assert ConfigManager(path).binary == "/opt/tmux/bin/tmux"


def test_global_instance_is_cached(reset_config) -> None:
    assert get_config_manager() is get_config_manager()
    assert config_module._config_manager is not None
