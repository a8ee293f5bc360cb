from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
import tomli

from poaclock.core.writer import generate, overwrite, serialize_lock
from poaclock.exceptions import FileOperationError
from poaclock.models import DependencyGraph, LockDocument, Package, PackageRecord

SECOND_NS = 1_000_000_000

HEADER = (
    "# This file is automatically generated by Poac.\n"
    "# It is not intended for manual editing.\n"
)


def _set_mtime(path: Path, mtime_s: int) -> None:
    os.utime(path, ns=(mtime_s * SECOND_NS, mtime_s * SECOND_NS))


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project directory with a manifest last modified at t=1000."""
    manifest = tmp_path / "poac.toml"
    manifest.write_text('[package]\nname = "app"\n', encoding="utf-8")
    _set_mtime(manifest, 1000)
    return tmp_path


@pytest.fixture
def graph() -> DependencyGraph:
    return {
        Package("A", "1.0"): [("B", "2.0")],
        Package("B", "2.0"): None,
    }


@pytest.mark.unit
class TestSerializeLock:
    """Tests for serialize_lock."""

    def test_starts_with_header_and_blank_line(self) -> None:
        """Test the disclaimer header is followed by a blank line."""
        text = serialize_lock(LockDocument())

        assert text.startswith(HEADER + "\n")

    def test_body_layout(self) -> None:
        """Test version precedes the [[package]] tables."""
        doc = LockDocument(
            package=[
                PackageRecord("A", "1.0", ["B"]),
                PackageRecord("B", "2.0", []),
            ]
        )

        text = serialize_lock(doc)
        body = text[len(HEADER) + 1 :]

        assert body.startswith("version = 1\n")
        assert text.count("[[package]]") == 2
        assert text.index('name = "A"') < text.index('name = "B"')
        assert "dependencies = []" in text

    def test_output_parses_back(self) -> None:
        """Test the output is valid TOML matching the document."""
        doc = LockDocument(package=[PackageRecord("A", "1.0", ["B", "C"])])

        assert tomli.loads(serialize_lock(doc)) == doc.to_dict()

    def test_quotes_are_escaped(self) -> None:
        """Test names needing escapes survive serialization."""
        doc = LockDocument(package=[PackageRecord('we"ird', "1.0", ["a\\b"])])

        parsed = tomli.loads(serialize_lock(doc))

        assert parsed["package"][0]["name"] == 'we"ird'
        assert parsed["package"][0]["dependencies"] == ["a\\b"]


@pytest.mark.unit
class TestOverwrite:
    """Tests for overwrite."""

    def test_writes_lockfile(self, project: Path, graph: DependencyGraph) -> None:
        """Test the lockfile is created at the project root."""
        path = overwrite(graph, project)

        assert path == project / "poac.lock"
        parsed = tomli.loads(path.read_text(encoding="utf-8"))
        assert parsed == {
            "version": 1,
            "package": [
                {"name": "A", "version": "1.0", "dependencies": ["B"]},
                {"name": "B", "version": "2.0", "dependencies": []},
            ],
        }

    def test_replaces_previous_content(self, project: Path, graph: DependencyGraph) -> None:
        """Test prior content is fully replaced, even when longer."""
        lock = project / "poac.lock"
        lock.write_text("# stale\n" * 500, encoding="utf-8")

        overwrite(graph, project)

        assert "# stale" not in lock.read_text(encoding="utf-8")

    def test_writes_even_when_fresh(self, project: Path, graph: DependencyGraph) -> None:
        """Test overwrite ignores freshness."""
        lock = project / "poac.lock"
        lock.write_text("old", encoding="utf-8")
        _set_mtime(lock, 5000)

        overwrite(graph, project)

        assert lock.read_text(encoding="utf-8").startswith(HEADER)

    def test_deterministic_output(self, project: Path, graph: DependencyGraph) -> None:
        """Test insertion order of the graph does not change the bytes."""
        first = overwrite(graph, project).read_bytes()
        second = overwrite(dict(reversed(list(graph.items()))), project).read_bytes()

        assert first == second

    def test_no_temporary_files_left(self, project: Path, graph: DependencyGraph) -> None:
        """Test the temporary file is renamed into place."""
        overwrite(graph, project)

        assert sorted(p.name for p in project.iterdir()) == ["poac.lock", "poac.toml"]

    def test_create_backup(self, project: Path, graph: DependencyGraph) -> None:
        """Test the previous lockfile is copied aside when requested."""
        lock = project / "poac.lock"
        lock.write_text("previous", encoding="utf-8")

        overwrite(graph, project, create_backup=True)

        backups = list(project.glob("poac.lock.*.backup"))
        assert len(backups) == 1
        assert backups[0].read_text(encoding="utf-8") == "previous"

    def test_create_backup_without_previous(self, project: Path, graph: DependencyGraph) -> None:
        """Test no backup is made when there is nothing to back up."""
        overwrite(graph, project, create_backup=True)

        assert list(project.glob("*.backup")) == []

    def test_failed_write_keeps_previous(self, project: Path, graph: DependencyGraph) -> None:
        """Test a failed replace leaves the old lockfile intact."""
        lock = project / "poac.lock"
        lock.write_text("previous", encoding="utf-8")

        with patch(
            "poaclock.utils.filesystem.Path.replace",
            side_effect=OSError("disk full"),
        ):
            with pytest.raises(FileOperationError) as exc_info:
                overwrite(graph, project)

        assert exc_info.value.operation == "write"
        assert lock.read_text(encoding="utf-8") == "previous"
        assert list(project.glob(".poac.lock.*.tmp")) == []

    def test_missing_project_dir_is_created(self, tmp_path: Path, graph: DependencyGraph) -> None:
        """Test the parent directory is created if needed."""
        path = overwrite(graph, tmp_path / "nested" / "project")

        assert path.is_file()


@pytest.mark.unit
class TestGenerate:
    """Tests for generate."""

    def test_writes_when_missing(self, project: Path, graph: DependencyGraph) -> None:
        """Test a missing lockfile is generated."""
        assert generate(graph, project) is True
        assert (project / "poac.lock").is_file()

    def test_writes_when_outdated(self, project: Path, graph: DependencyGraph) -> None:
        """Test an older lockfile is regenerated."""
        lock = project / "poac.lock"
        lock.write_text("old", encoding="utf-8")
        _set_mtime(lock, 999)

        assert generate(graph, project) is True
        assert lock.read_text(encoding="utf-8").startswith(HEADER)

    def test_fresh_lockfile_is_untouched(self, project: Path, graph: DependencyGraph) -> None:
        """Test a fresh lockfile keeps its exact bytes even if the graph differs."""
        lock = project / "poac.lock"
        original = b"# hand edited\nversion = 1\npackage = []\n"
        lock.write_bytes(original)
        _set_mtime(lock, 1000)

        assert generate(graph, project) is False
        assert lock.read_bytes() == original
        assert lock.stat().st_mtime_ns == 1000 * SECOND_NS

    def test_forwards_create_backup(self, project: Path, graph: DependencyGraph) -> None:
        """Test create_backup reaches overwrite."""
        with patch("poaclock.core.writer.overwrite") as mock_overwrite:
            generate(graph, project, create_backup=True)

        mock_overwrite.assert_called_once_with(graph, project, create_backup=True)

    def test_missing_manifest_raises(self, tmp_path: Path, graph: DependencyGraph) -> None:
        """Test an existing lockfile without a manifest is an I/O error."""
        (tmp_path / "poac.lock").write_text("", encoding="utf-8")

        with pytest.raises(FileOperationError):
            generate(graph, tmp_path)
