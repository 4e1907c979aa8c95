"""Rendering of a MappingTable into the importable zones_data module."""

import json
import logging
import os
import tempfile
from pathlib import Path

from jinja2 import Template

from system_tz.models import DatasetVersion
from system_tz.system.path_resolver import PathResolver
from system_tz.table import MappingTable

logger = logging.getLogger(__name__)


def _literal(value: str) -> str:
    """Render a string as a double-quoted Python literal."""
    return json.dumps(value)


class TableEmitter:
    """Writes a MappingTable as Python source embedded in the package."""

    TEMPLATE_NAME = "zones_data.py.j2"

    def __init__(self, path_resolver: PathResolver | None = None):
        self.path_resolver = path_resolver or PathResolver()

    def render(self, table: MappingTable, version: DatasetVersion) -> str:
        """Render the module source for a table."""
        template_path = self.path_resolver.get_templates_dir() / self.TEMPLATE_NAME
        if not template_path.exists():
            raise FileNotFoundError(f"Template not found: {template_path}")

        rows = [
            (
                _literal(entry.vendor_key),
                _literal(entry.territory),
                "".join(f"{_literal(i)}, " for i in entry.canonical_ids).rstrip(" "),
            )
            for entry in table
        ]
        template = Template(template_path.read_text(), keep_trailing_newline=True)
        return template.render(
            source_url=version.source_url,
            source_url_literal=_literal(version.source_url),
            other_version=_literal(version.other_version),
            type_version=_literal(version.type_version),
            sha256=_literal(version.sha256),
            build_date=_literal(version.build_date.isoformat()),
            rows=rows,
        )

    def write(
        self, table: MappingTable, version: DatasetVersion, output: Path | None = None
    ) -> Path:
        """Render and atomically replace the output module.

        The previous module stays in place if rendering or writing fails.

        Args:
            table: Table to serialize
            version: Provenance recorded alongside the table
            output: Destination; defaults to the package's zones_data.py

        Returns:
            The path written
        """
        output = output or self.path_resolver.get_zones_module_path()
        source = self.render(table, version)

        output.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=output.parent, prefix=f".{output.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(source)
            os.replace(tmp_name, output)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info("Wrote %d mappings to %s", len(table), output)
        return output
