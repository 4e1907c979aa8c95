r"""Windows zone table builder CLI.

This script downloads the Unicode CLDR windowsZones dataset and regenerates
the zone table module bundled with system-tz.

Usage:
    system-tz-zones generate
    system-tz-zones generate --source-file data/cldr/windowsZones.xml
    system-tz-zones info
    system-tz-zones lookup --zone "Romance Standard Time" --territory FR
"""

import sys
from pathlib import Path

import click

from system_tz.cldr.emitter import TableEmitter
from system_tz.cldr.extractor import MappingExtractor
from system_tz.cldr.fetcher import DatasetFetcher
from system_tz.config.manager import ConfigManager
from system_tz.errors import BuildError, SystemTzError
from system_tz.resolver import ZoneResolver
from system_tz.system.structlog_configurator import configure_structlog, get_logger
from system_tz.table import get_mapping_table

logger = get_logger(__name__)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Unicode CLDR windowsZones table builder.

    Examples:
      # Rebuild the bundled table from the pinned CLDR release
      system-tz-zones generate

      # Rebuild from a local copy of windowsZones.xml
      system-tz-zones generate --source-file windowsZones.xml

      # Show information about the bundled table
      system-tz-zones info

      # Test a lookup
      system-tz-zones lookup --zone "US Mountain Standard Time" --territory CA
    """
    ctx.ensure_object(dict)
    try:
        config = ConfigManager().load()
    except ValueError as e:
        click.echo(click.style(f"✗ Error loading configuration: {e}", fg="red"), err=True)
        sys.exit(1)
    configure_structlog(config)
    ctx.obj["config"] = config


@cli.command()
@click.option("--source-url", help="URL of windowsZones.xml (defaults to the configured URL)")
@click.option(
    "--source-file",
    type=click.Path(path_type=Path),
    help="Read windowsZones.xml from a local file instead of downloading it",
)
@click.option(
    "--output",
    type=click.Path(path_type=Path),
    help="Path of the generated module (defaults to the bundled zones_data.py)",
)
@click.option("--timeout", type=float, help="Download timeout in seconds")
@click.option(
    "--skip-validation",
    is_flag=True,
    help="Do not check identifiers against the installed timezone database",
)
@click.pass_context
def generate(
    ctx: click.Context,
    source_url: str | None,
    source_file: Path | None,
    output: Path | None,
    timeout: float | None,
    skip_validation: bool,
) -> None:
    """Download, validate and emit the Windows zone table."""
    dataset = ctx.obj["config"].dataset
    source_url = source_url or dataset.source_url

    click.echo("Generating Windows zone table...")
    click.echo(f"Source: {source_file or source_url}")
    click.echo()

    try:
        if source_file:
            document = DatasetFetcher.fetch_file(source_file)
            recorded_source = str(source_file)
        else:
            fetcher = DatasetFetcher(source_url, timeout=timeout or dataset.timeout)
            document = fetcher.fetch()
            recorded_source = source_url

        extractor = MappingExtractor(
            validate_ids=not skip_validation,
            expected_type_version=dataset.expected_type_version,
        )
        result = extractor.extract(document, source_url=recorded_source)
        written = TableEmitter().write(result.table, result.version, output)

    except BuildError as e:
        click.echo(click.style(f"✗ Build failed: {e}", fg="red"), err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(click.style(f"✗ Error writing zone table: {e}", fg="red"), err=True)
        sys.exit(1)

    logger.info(
        "Zone table generated",
        output=str(written),
        mappings=len(result.table),
        skipped=result.skipped,
        sha256=result.version.sha256,
    )

    click.echo(click.style("✓ Zone table generated successfully", fg="green"))
    click.echo(f"  Output: {written}")
    click.echo(f"  Mappings: {len(result.table)}")
    click.echo(f"  Windows zones: {len(result.table.vendor_keys)}")
    click.echo(f"  Skipped elements: {result.skipped}")
    click.echo(f"  CLDR version: {result.version.other_version} (tz {result.version.type_version})")


@cli.command()
def info() -> None:
    """Show information about the bundled zone table."""
    table = get_mapping_table()
    version = table.version

    click.echo("Windows Zone Table Information:")
    if version is not None:
        click.echo(f"Source: {version.source_url}")
        click.echo(f"CLDR version: {version.other_version}")
        click.echo(f"tz data version: {version.type_version}")
        click.echo(f"SHA-256: {version.sha256}")
        click.echo(f"Built: {version.build_date.isoformat()}")
    click.echo(f"Mappings: {len(table)}")
    click.echo(f"Windows zones: {len(table.vendor_keys)}")


@cli.command()
@click.option("--zone", required=True, help='Windows zone key, e.g. "Romance Standard Time"')
@click.option("--territory", help="Two-letter territory code (default: 001)")
def lookup(zone: str, territory: str | None) -> None:
    """Test a Windows zone lookup."""
    click.echo(f"Testing lookup for: {zone}")
    click.echo(f"Territory: {territory or '001'}")
    click.echo()

    try:
        resolver = ZoneResolver()
        entry = resolver.lookup(zone, territory)
        canonical = resolver.resolve_canonical(zone, territory)
    except SystemTzError as e:
        click.echo(click.style(f"✗ {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(click.style(f"Resolved: {canonical}", fg="green"))
    click.echo(f"  Matched territory: {entry.territory}")
    if len(entry.canonical_ids) > 1:
        click.echo(f"  Aliases: {', '.join(entry.canonical_ids[1:])}")
    others = [t for t in resolver.table.territories(zone) if t != entry.territory]
    if others:
        click.echo(f"  Other territories: {', '.join(others)}")


def main() -> None:
    """Entry point for the zone table CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
