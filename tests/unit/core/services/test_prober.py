from __future__ import annotations

"""
Unit tests for the QML Module Directory Prober.

Verifies the ordered layout hypotheses, their precedence and the
not-found outcome.
"""

import os
from pathlib import Path
from typing import Iterator, Tuple

from qmlbundle.core.services.prober import (
    candidate_layouts,
    probe_module_dir,
    unversioned_layout,
    versioned_segment_layouts,
)
from qmlbundle.domain.module_models import ModuleReference

CONTROLS_2 = ModuleReference("QtQuick.Controls", 2)


def test_candidate_layouts_order() -> None:
    assert list(candidate_layouts(CONTROLS_2)) == [
        ("QtQuick", "Controls.2"),
        ("QtQuick.2", "Controls"),
        ("QtQuick", "Controls"),
    ]


def test_versioned_layouts_cover_every_segment_from_the_end() -> None:
    ref = ModuleReference("QtQuick.Controls.Material", 2)
    assert list(versioned_segment_layouts(ref)) == [
        ("QtQuick", "Controls", "Material.2"),
        ("QtQuick", "Controls.2", "Material"),
        ("QtQuick.2", "Controls", "Material"),
    ]
    assert list(unversioned_layout(ref)) == [("QtQuick", "Controls", "Material")]


def test_last_segment_versioned_wins(tmp_path: Path) -> None:
    (tmp_path / "QtQuick" / "Controls.2").mkdir(parents=True)
    (tmp_path / "QtQuick.2" / "Controls").mkdir(parents=True)

    found = probe_module_dir(str(tmp_path), CONTROLS_2)

    assert found == os.path.abspath(tmp_path / "QtQuick" / "Controls.2")


def test_earlier_segment_versioned(tmp_path: Path) -> None:
    (tmp_path / "QtQuick.2" / "Controls").mkdir(parents=True)

    found = probe_module_dir(str(tmp_path), CONTROLS_2)

    assert found == os.path.abspath(tmp_path / "QtQuick.2" / "Controls")


def test_versioned_layout_beats_unversioned(tmp_path: Path) -> None:
    (tmp_path / "QtQuick" / "Controls").mkdir(parents=True)
    (tmp_path / "QtQuick.2" / "Controls").mkdir(parents=True)

    found = probe_module_dir(str(tmp_path), CONTROLS_2)

    assert found == os.path.abspath(tmp_path / "QtQuick.2" / "Controls")


def test_unversioned_fallback(tmp_path: Path) -> None:
    (tmp_path / "QtQuick" / "Controls").mkdir(parents=True)

    found = probe_module_dir(str(tmp_path), CONTROLS_2)

    assert found == os.path.abspath(tmp_path / "QtQuick" / "Controls")


def test_single_segment_module(tmp_path: Path) -> None:
    (tmp_path / "QtQuick.2").mkdir()
    assert probe_module_dir(str(tmp_path), ModuleReference("QtQuick", 2)) == os.path.abspath(
        tmp_path / "QtQuick.2"
    )


def test_unresolvable_reference_returns_none(tmp_path: Path) -> None:
    (tmp_path / "QtQuick.2").mkdir()
    assert probe_module_dir(str(tmp_path), ModuleReference("QtWebEngine", 1)) is None


def test_file_is_not_a_module_directory(tmp_path: Path) -> None:
    (tmp_path / "QtQuick.2").write_text("not a dir", encoding="utf-8")
    assert probe_module_dir(str(tmp_path), ModuleReference("QtQuick", 2)) is None


def test_malformed_name_is_not_found(tmp_path: Path) -> None:
    assert probe_module_dir(str(tmp_path), ModuleReference("QtQuick.", 2)) is None


def test_custom_hypotheses_extend_probe_order(tmp_path: Path) -> None:
    def major_dir_layout(ref: ModuleReference) -> Iterator[Tuple[str, ...]]:
        yield (f"v{ref.major_version}",) + ref.segments

    (tmp_path / "v6" / "QtQuick").mkdir(parents=True)
    found = probe_module_dir(
        str(tmp_path),
        ModuleReference("QtQuick", 6),
        hypotheses=(versioned_segment_layouts, major_dir_layout),
    )

    assert found == os.path.abspath(tmp_path / "v6" / "QtQuick")


def test_symlinked_module_keeps_probed_path(linked_qml_root: Path) -> None:
    found = probe_module_dir(str(linked_qml_root), ModuleReference("QtQuick", 2))
    assert found == os.path.join(str(linked_qml_root), "QtQuick.2")
