"""Tests for the zone table emitter."""

from datetime import UTC, datetime
from unittest.mock import MagicMock, patch

import pytest

from system_tz.cldr.emitter import TableEmitter
from system_tz.models import DatasetVersion
from system_tz.system.path_resolver import PathResolver
from system_tz.table import table_from_rows


@pytest.fixture
def version():
    """Create a dataset version."""
    return DatasetVersion(
        other_version="7e11800",
        type_version="2021a",
        sha256="ab" * 32,
        build_date=datetime(2026, 10, 18, 9, 12, 44, tzinfo=UTC),
        source_url="https://example.com/windowsZones.xml",
    )


def _load(source: str) -> dict:
    namespace: dict = {}
    exec(compile(source, "zones_data.py", "exec"), namespace)
    return namespace


class TestRender:
    """Test TableEmitter.render."""

    def test_renders_loadable_module(self, small_table, version):
        """Should render a module that rebuilds the same table."""
        namespace = _load(TableEmitter().render(small_table, version))

        rebuilt = table_from_rows(namespace["WINDOWS_ZONES"], namespace["WINDOWS_ZONES_VERSION"])

        assert list(rebuilt) == list(small_table)
        assert rebuilt.version == version

    def test_records_source(self, small_table, version):
        """Should name the source in the module docstring."""
        source = TableEmitter().render(small_table, version)

        assert "Generated by `system-tz-zones generate` from https://example.com/" in source
        assert source.endswith(")\n")

    def test_escapes_literals(self, version):
        """Should quote names that contain quotes and backslashes."""
        table = table_from_rows([('Odd "Quoted" \\ Zone', "001", ("Etc/UTC",))])

        namespace = _load(TableEmitter().render(table, version))

        assert namespace["WINDOWS_ZONES"] == (('Odd "Quoted" \\ Zone', "001", ("Etc/UTC",)),)

    def test_windows_source_path(self, small_table, version):
        """Should render a loadable module when the source is a Windows path."""
        version = version.model_copy(update={"source_url": "C:\\Users\\me\\windowsZones.xml"})

        namespace = _load(TableEmitter().render(small_table, version))

        assert namespace["WINDOWS_ZONES_VERSION"]["source_url"] == "C:\\Users\\me\\windowsZones.xml"

    def test_missing_template(self, small_table, version, tmp_path):
        """Should raise FileNotFoundError when the template is missing."""
        path_resolver = MagicMock(spec=PathResolver)
        path_resolver.get_templates_dir.return_value = tmp_path

        with pytest.raises(FileNotFoundError, match="Template not found"):
            TableEmitter(path_resolver).render(small_table, version)


class TestWrite:
    """Test TableEmitter.write."""

    def test_writes_output(self, small_table, version, tmp_path):
        """Should write the module to the requested path."""
        output = tmp_path / "pkg" / "zones_data.py"

        written = TableEmitter().write(small_table, version, output)

        assert written == output
        namespace = _load(output.read_text())
        assert len(namespace["WINDOWS_ZONES"]) == len(small_table)
        assert list(output.parent.iterdir()) == [output]

    def test_defaults_to_package_module(self, small_table, version, tmp_path):
        """Should write to the path resolver's zones module by default."""
        path_resolver = MagicMock(spec=PathResolver)
        path_resolver.get_templates_dir.return_value = PathResolver().get_templates_dir()
        path_resolver.get_zones_module_path.return_value = tmp_path / "windows" / "zones_data.py"

        written = TableEmitter(path_resolver).write(small_table, version)

        assert written == tmp_path / "windows" / "zones_data.py"
        assert written.exists()

    def test_failed_replace_keeps_previous_module(self, small_table, version, tmp_path):
        """Should leave the previous module and no temporary file when writing fails."""
        output = tmp_path / "zones_data.py"
        output.write_text("PREVIOUS = True\n")

        with patch("system_tz.cldr.emitter.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                TableEmitter().write(small_table, version, output)

        assert output.read_text() == "PREVIOUS = True\n"
        assert list(tmp_path.iterdir()) == [output]
