from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A fake Qt QML module tree shared by discovery and staging tests.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
ModuleFactory = Callable[..., Path]


@pytest.fixture
def make_module() -> ModuleFactory:
    """
    Return a factory creating a directory with a QML file declaring imports.

    Usage: make_module(base, "QtQuick/Controls.2", ["QtQuick 2.0"], files=["x.dll"])
    """
    def _make(
            base: Path,
            rel: str,
            imports: Iterable[str] = (),
            files: Iterable[str] = (),
            qml_name: str = "Main.qml",
    ) -> Path:
        target = base / rel
        target.mkdir(parents=True, exist_ok=True)
        body = "".join(f"import {i}\n" for i in imports) + "\nItem {}\n"
        (target / qml_name).write_text(body, encoding="utf-8")
        for name in files:
            (target / name).write_text("binary", encoding="utf-8")
        return target

    return _make


@pytest.fixture
def qml_root(tmp_path: Path, make_module: ModuleFactory) -> Path:
    """
    Create a small Qt QML module tree.

    Structure:
    /qml
      /QtQuick.2                 (imports nothing)
      /QtQuick
        /Controls.2              (imports QtQuick 2, QtQuick.Templates 2)
          /Material              (imports QtQuick.Controls 2)
        /Templates.2             (imports QtQuick 2)
        /Layouts                 (unversioned, imports QtQuick 2)
      /QtGraphicalEffects        (imports QtQuick 2)
    """
    root = tmp_path / "qml"
    make_module(root, "QtQuick.2", files=["qtquick2plugin.dll", "qtquick2plugind.dll", "qmldir"])
    make_module(
        root, "QtQuick/Controls.2",
        ["QtQuick 2.0", "QtQuick.Templates 2.5"],
        files=["qtquickcontrols2plugin.dll", "qmldir", "Button.qmlc"],
    )
    make_module(root, "QtQuick/Controls.2/Material", ["QtQuick.Controls 2.0"], qml_name="Style.qml")
    make_module(root, "QtQuick/Templates.2", ["QtQuick 2.0"])
    make_module(root, "QtQuick/Layouts", ["QtQuick 2.0"])
    make_module(root, "QtGraphicalEffects", ["QtQuick 2.0"])
    return root


@pytest.fixture
def project_dir(tmp_path: Path, make_module: ModuleFactory) -> Path:
    """Create a project whose res/main.qml imports QtQuick and QtQuick.Controls."""
    project = tmp_path / "project"
    make_module(project, "res", ["QtQuick 2.0", "QtQuick.Controls 2.0"], qml_name="main.qml")
    return project


@pytest.fixture
def linked_qml_root(tmp_path: Path, make_module: ModuleFactory) -> Path:
    """
    Create a QML root whose modules are symbolic links into another tree.

    Structure:
    /keg/qml/QtQuick.2           (real module, imports nothing)
    /keg/qml/QtQuick/Window.2    (real module, imports QtQuick 2)
    /share/qml/QtQuick.2         -> /keg/qml/QtQuick.2
    /share/qml/QtQuick/Window.2  -> /keg/qml/QtQuick/Window.2
    """
    keg = tmp_path / "keg" / "qml"
    make_module(keg, "QtQuick.2", files=["qmldir", "qtquick2plugin.so"])
    make_module(keg, "QtQuick/Window.2", ["QtQuick 2.0"], files=["qmldir"])

    root = tmp_path / "share" / "qml"
    (root / "QtQuick").mkdir(parents=True)
    try:
        (root / "QtQuick.2").symlink_to(keg / "QtQuick.2", target_is_directory=True)
        (root / "QtQuick" / "Window.2").symlink_to(keg / "QtQuick" / "Window.2", target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symbolic links are not available")
    return root
