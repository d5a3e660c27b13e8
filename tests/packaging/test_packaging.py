"""Packaging correctness verification for json-node-editor.

Tests validate that:
- Base install imports cleanly and the public API works
- py.typed marker is present in the wheel
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import sys
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the base install exposes a working API."""

    def test_import_json_node_editor(self):  # type: ignore[no-untyped-def]
        import json_node_editor

        assert hasattr(json_node_editor, "NodeEditSession")
        assert hasattr(json_node_editor, "get_at_path")
        assert hasattr(json_node_editor, "set_at_path")
        assert hasattr(json_node_editor, "normalize_rows")
        assert hasattr(json_node_editor, "format_path")

    def test_library_installs_null_handler(self):  # type: ignore[no-untyped-def]
        import logging

        import json_node_editor  # noqa: F401

        handlers = logging.getLogger("json_node_editor").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            assert any(n.endswith("py.typed") for n in names), names

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        expected_modules = [
            "json_node_editor/__init__.py",
            "json_node_editor/config.py",
            "json_node_editor/coordinator.py",
            "json_node_editor/errors.py",
            "json_node_editor/protocols.py",
            "json_node_editor/result.py",
            "json_node_editor/session.py",
            "json_node_editor/stores.py",
            "json_node_editor/validator.py",
            "json_node_editor/tree/__init__.py",
            "json_node_editor/tree/formatter.py",
            "json_node_editor/tree/nodes.py",
            "json_node_editor/tree/normalizer.py",
            "json_node_editor/tree/resolver.py",
            "json_node_editor/integrations/__init__.py",
            "json_node_editor/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")
        ne_eps = [ep for ep in pytest11_eps if "json_node_editor" in str(ep.value)]
        assert ne_eps, (
            f"No pytest11 entry point found for json-node-editor. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixtures_available(self):  # type: ignore[no-untyped-def]
        import importlib

        mod = importlib.import_module("json_node_editor.integrations._pytest_plugin")
        assert hasattr(mod, "document_store")
        assert hasattr(mod, "make_edit_session")


class TestPackageMetadata:
    """Verify package metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        import json_node_editor

        assert json_node_editor.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        import json_node_editor

        expected = {
            "MISSING",
            "DocumentStore",
            "DraftParseError",
            "DraftStatus",
            "DraftValidator",
            "EditorConfig",
            "InMemoryDocumentStore",
            "NodeData",
            "NodeEditSession",
            "NodeEditorError",
            "NodeRow",
            "RowType",
            "SaveCoordinator",
            "SaveOutcome",
            "SaveStrategy",
            "SelectionSource",
            "StaticSelection",
            "format_path",
            "get_at_path",
            "merge_or_replace",
            "node_from_document",
            "normalize_rows",
            "parse_json",
            "set_at_path",
        }
        actual = set(json_node_editor.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
