"""Tests for the s3-explorer command-line interface."""

from unittest.mock import patch

import boto3
import pytest
from moto import mock_aws
from typer.testing import CliRunner

from s3_explorer import __version__
from s3_explorer.cli import _format_size, app

runner = CliRunner()


@pytest.fixture
def s3(aws_credentials):
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket="docs")
        client.put_object(Bucket="docs", Key="a.txt", Body=b"0123456789")
        client.put_object(Bucket="docs", Key="notes/b.txt", Body=b"x" * 20)
        yield client


class TestListCommand:
    """Test the list command."""

    def test_list_with_keys(self, s3):
        """Test listing the bucket root with explicit credentials."""
        result = runner.invoke(
            app,
            [
                "list",
                "s3://docs",
                "--access-key-id",
                "test_key",
                "--secret-access-key",
                "test_secret",
                "--region",
                "us-east-1",
            ],
        )

        assert result.exit_code == 0
        assert "notes/" in result.output
        assert "a.txt  (10 bytes)" in result.output
        assert "1 folders, 1 files" in result.output

    def test_list_json(self, s3):
        """Test JSON output for a nested prefix."""
        result = runner.invoke(
            app,
            [
                "list",
                "s3://docs/notes",
                "--access-key-id",
                "test_key",
                "--secret-access-key",
                "test_secret",
                "--json",
            ],
        )

        assert result.exit_code == 0
        assert '"fullPath": "notes/b.txt"' in result.output
        assert '"name": "b.txt"' in result.output
        assert '"size": 20' in result.output
        assert '"prefix": "notes/"' in result.output

    def test_list_empty_prefix(self, s3):
        """Test the message for an empty listing."""
        result = runner.invoke(
            app,
            ["list", "s3://docs/missing/", "--access-key-id", "k", "--secret-access-key", "s"],
        )

        assert result.exit_code == 0
        assert "No folders or files found." in result.output

    @patch("s3_explorer.service.bind_client")
    def test_list_with_profile(self, mock_bind, make_memory_client):
        """Test unattended binding with an AWS profile."""
        client = make_memory_client({"docs": {"a.txt": 10, "notes/b.txt": 20}})
        client.region_name = "us-east-1"
        mock_bind.return_value = client

        result = runner.invoke(app, ["list", "s3://docs/notes/", "--profile", "dev"])

        assert result.exit_code == 0
        assert "b.txt  (20 bytes)" in result.output
        assert mock_bind.call_args.args[0].aws_profile == "dev"

    def test_requires_credentials(self):
        """Test that listing without keys or a profile is refused."""
        result = runner.invoke(app, ["list", "s3://docs"])

        assert result.exit_code == 1
        assert "Missing credentials" in result.output

    def test_invalid_uri(self):
        """Test that a non-S3 URI exits with an error."""
        result = runner.invoke(app, ["list", "docs/notes"])

        assert result.exit_code == 1
        assert "Invalid S3 URI" in result.output

    def test_missing_bucket(self, s3):
        """Test that storage errors are reported."""
        result = runner.invoke(
            app,
            ["list", "s3://nope", "--access-key-id", "k", "--secret-access-key", "s"],
        )

        assert result.exit_code == 1
        assert "Failed to list objects" in result.output


def test_version():
    """Test the version option."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"s3-explorer {__version__}" in result.output


@pytest.mark.parametrize(
    "size, expected",
    [(10, "10 bytes"), (2048, "2.00 KB"), (5 * 1024**2, "5.00 MB"), (3 * 1024**3, "3.00 GB")],
)
def test_format_size(size, expected):
    """Test human readable sizes."""
    assert _format_size(size) == expected
