"""Print the system timezone.

Usage:
    tz
"""

import sys

import click

from system_tz.api import resolve_system_timezone
from system_tz.errors import SystemTzError


@click.command()
def cli() -> None:
    """Print the IANA name of the system timezone."""
    try:
        name = resolve_system_timezone()
    except SystemTzError as e:
        click.echo(f"Error: Failed to get timezone: {e}", err=True)
        click.echo(
            "You might want to report this error along with the output of `system-tz-zones info`",
            err=True,
        )
        sys.exit(1)
    click.echo(name)


def main() -> None:
    """Entry point for the tz command."""
    cli()


if __name__ == "__main__":
    main()
