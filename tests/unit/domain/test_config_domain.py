from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against corrupted config files.
3. Persistence (Save/Load) without touching real user data.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from qmlbundle.domain.config import (
    get_default_config,
    load_app_state,
    load_config,
    save_config,
)
from qmlbundle.domain.constants import CURRENT_CONFIG_VERSION


@pytest.fixture
def config_file(tmp_path: Path):
    """Redirect the persisted configuration into a temporary directory."""
    path = tmp_path / "QmlBundle" / "config.json"
    with patch("qmlbundle.domain.config.CONFIG_FILE", str(path)):
        yield path


def test_default_config_shape() -> None:
    cfg = get_default_config()

    assert cfg["resource_dir_name"] == "res"
    assert cfg["qml_dir"] == ""
    assert cfg["dry_run"] is False
    assert cfg["target_os"]


def test_load_fresh_state_returns_defaults(config_file: Path) -> None:
    assert not config_file.exists()

    state = load_app_state()

    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["last_session"]["qmake_path"] == "qmake"


def test_load_corrupted_file_returns_defaults(config_file: Path) -> None:
    config_file.parent.mkdir(parents=True)
    config_file.write_text("{ incomplete json ", encoding="utf-8")

    state = load_app_state()

    assert state["version"] == CURRENT_CONFIG_VERSION
    assert isinstance(state["last_session"], dict)


def test_non_dict_file_returns_defaults(config_file: Path) -> None:
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_app_state()["last_session"]["resource_dir_name"] == "res"


def test_save_and_load_roundtrip(config_file: Path) -> None:
    cfg = get_default_config()
    cfg["qml_dir"] = "/opt/Qt/5.15.2/gcc_64/qml"
    cfg["target_os"] = "windows"

    save_config(cfg)
    loaded = load_config()

    assert json.loads(config_file.read_text(encoding="utf-8"))["version"] == CURRENT_CONFIG_VERSION
    assert loaded["qml_dir"] == "/opt/Qt/5.15.2/gcc_64/qml"
    assert loaded["target_os"] == "windows"


def test_partial_session_is_merged_with_defaults(config_file: Path) -> None:
    config_file.parent.mkdir(parents=True)
    config_file.write_text(json.dumps({"last_session": {"qmake_path": "/usr/bin/qmake-qt5"}}), encoding="utf-8")

    cfg = load_config()

    assert cfg["qmake_path"] == "/usr/bin/qmake-qt5"
    assert cfg["copy_workers"] == 1
