from __future__ import annotations

"""
Unit tests for CLI Argument Parsing and the CLI controller.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Configuration layering in the controller.
3. Exit codes and rendering.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from qmlbundle.interface.cli import app
from qmlbundle.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_cli_path_arguments() -> None:
    args = parse_args([
        "-p", "/work/app",
        "-o", "/work/dist",
        "-q", "/opt/Qt/qml",
        "--qmake", "/opt/Qt/bin/qmake",
        "--res-dir", "qml",
    ])

    overrides = args_to_overrides(args)

    assert overrides["project_dir"] == "/work/app"
    assert overrides["output_dir"] == "/work/dist"
    assert overrides["qml_dir"] == "/opt/Qt/qml"
    assert overrides["qmake_path"] == "/opt/Qt/bin/qmake"
    assert overrides["resource_dir_name"] == "qml"


def test_cli_target_and_runtime_flags() -> None:
    overrides = args_to_overrides(parse_args(["--os", "windows", "-j", "4", "--dry-run"]))

    assert overrides["target_os"] == "windows"
    assert overrides["copy_workers"] == 4
    assert overrides["dry_run"] is True


def test_cli_defaults_are_explicit_in_overrides() -> None:
    overrides = args_to_overrides(parse_args([]))

    assert overrides["project_dir"] is None
    assert overrides["qml_dir"] is None
    assert "dry_run" not in overrides


def test_merge_ignores_none_and_unknown_keys() -> None:
    base = {"project_dir": "/base", "qml_dir": "/qt", "dry_run": False}
    merged = app._merge_config(base, {"project_dir": None, "qml_dir": "/other", "bogus": 1})

    assert merged["project_dir"] == "/base"
    assert merged["qml_dir"] == "/other"
    assert "bogus" not in merged


@pytest.fixture
def quiet_logging():
    with patch("qmlbundle.interface.cli.app.configure_logging"):
        yield


def test_dump_config(quiet_logging, capsys, tmp_path: Path) -> None:
    code = app.main(["--use-defaults", "--dump-config", "--os", "macos", "-q", str(tmp_path)])

    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out["target_os"] == "darwin"
    assert out["qml_dir"] == str(tmp_path)


def test_missing_project_exit_code(quiet_logging, capsys, tmp_path: Path) -> None:
    code = app.main(["--use-defaults", "-p", str(tmp_path / "ghost")])

    assert code == 2
    assert "does not exist" in capsys.readouterr().err


def test_json_output(quiet_logging, capsys, qml_root: Path, project_dir: Path, tmp_path: Path) -> None:
    code = app.main([
        "--use-defaults", "--json", "--dry-run",
        "-p", str(project_dir), "-q", str(qml_root), "-o", str(tmp_path / "dist"), "--os", "linux",
    ])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["ok"] is True
    assert payload["dry_run"] is True
    assert len(payload["reduced"]) == 3


def test_failed_deployment_exit_code(quiet_logging, capsys, project_dir: Path, tmp_path: Path) -> None:
    code = app.main(["--use-defaults", "-p", str(project_dir), "-q", str(tmp_path / "no-qt")])

    assert code == 1
    assert "ERROR:" in capsys.readouterr().err


def test_save_config(quiet_logging, tmp_path: Path, project_dir: Path, qml_root: Path) -> None:
    with patch("qmlbundle.interface.cli.app.save_config") as save:
        app.main([
            "--use-defaults", "--save-config", "--dry-run",
            "-p", str(project_dir), "-q", str(qml_root),
        ])

    saved = save.call_args[0][0]
    assert saved["qml_dir"] == str(qml_root)
