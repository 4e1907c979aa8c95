"""Tests for the tz command."""

from unittest.mock import patch

from click.testing import CliRunner

from system_tz.cli.tz import cli
from system_tz.errors import OsQueryError


class TestTzCommand:
    """Test the tz command."""

    @patch("system_tz.cli.tz.resolve_system_timezone", autospec=True)
    def test_prints_zone(self, mock_resolve):
        """Should print the resolved zone name."""
        mock_resolve.return_value = "Europe/Paris"

        result = CliRunner().invoke(cli)

        assert result.exit_code == 0
        assert result.output == "Europe/Paris\n"

    @patch("system_tz.cli.tz.resolve_system_timezone", autospec=True)
    def test_reports_failure(self, mock_resolve):
        """Should report resolution failures and exit with status 1."""
        mock_resolve.side_effect = OsQueryError("No timezone configuration found on this host")

        result = CliRunner().invoke(cli)

        assert result.exit_code == 1
        assert "Error: Failed to get timezone: No timezone configuration" in result.output
