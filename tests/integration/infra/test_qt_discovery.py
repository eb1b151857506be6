from __future__ import annotations

"""
Integration tests for Qt Installation Discovery.

qmake is never executed: subprocess.run is patched.
"""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from qmlbundle.domain.errors import QtEnvironmentError
from qmlbundle.infra.qt import query_qml_dir, resolve_qml_dir


def _completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_query_qml_dir_reads_qmake_answer(tmp_path: Path) -> None:
    with patch("qmlbundle.infra.qt.subprocess.run", return_value=_completed(f"{tmp_path}\n")) as run:
        assert query_qml_dir("/opt/Qt/bin/qmake") == str(tmp_path)

    assert run.call_args[0][0] == ["/opt/Qt/bin/qmake", "-query", "QT_INSTALL_QML"]


def test_query_qml_dir_missing_executable() -> None:
    with patch("qmlbundle.infra.qt.subprocess.run", side_effect=FileNotFoundError("qmake")):
        with pytest.raises(QtEnvironmentError, match="failed to run"):
            query_qml_dir("qmake")


def test_query_qml_dir_nonzero_exit() -> None:
    with patch("qmlbundle.infra.qt.subprocess.run", return_value=_completed(returncode=3, stderr="bad")):
        with pytest.raises(QtEnvironmentError, match="bad"):
            query_qml_dir("qmake")


def test_query_qml_dir_reports_missing_directory(tmp_path: Path) -> None:
    with patch("qmlbundle.infra.qt.subprocess.run", return_value=_completed(str(tmp_path / "nope"))):
        with pytest.raises(QtEnvironmentError, match="invalid QML directory"):
            query_qml_dir("qmake")


def test_resolve_prefers_explicit_directory(tmp_path: Path) -> None:
    with patch("qmlbundle.infra.qt.subprocess.run") as run:
        assert resolve_qml_dir({"qml_dir": str(tmp_path), "qmake_path": "qmake"}) == str(tmp_path)

    run.assert_not_called()


def test_resolve_rejects_missing_explicit_directory(tmp_path: Path) -> None:
    with pytest.raises(QtEnvironmentError, match="does not exist"):
        resolve_qml_dir({"qml_dir": str(tmp_path / "missing")})


def test_resolve_falls_back_to_qmake(tmp_path: Path) -> None:
    with patch("qmlbundle.infra.qt.subprocess.run", return_value=_completed(str(tmp_path))):
        assert resolve_qml_dir({"qml_dir": "", "qmake_path": "qmake6"}) == str(tmp_path)
