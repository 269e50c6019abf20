"""Tests for the algolia CLI commands."""

import json
from unittest.mock import MagicMock, Mock, patch

import pytest
from click.testing import CliRunner

from algolia_search.cli.indexes import indexes
from algolia_search.cli.main import cli
from algolia_search.cli.records import add, search
from algolia_search.client.exceptions import AlgoliaAuthError, AlgoliaUnreachableError


@pytest.fixture
def runner():
    """Create Click CLI runner."""
    return CliRunner()


@pytest.fixture
def mock_client():
    """Create mock SearchClient / Index usable as a context manager."""
    client = MagicMock()
    client.__enter__ = Mock(return_value=client)
    client.__exit__ = Mock(return_value=False)
    client.list_indexes.return_value = {
        "items": [{"name": "movies", "entries": 42, "updatedAt": "2024-01-01T10:00:00.000Z"}]
    }
    client.search.return_value = {
        "hits": [{"objectID": "x1", "title": "Alien", "_highlightResult": {}}],
        "nbHits": 1,
    }
    client.add_object.return_value = {"objectID": "x1", "taskID": 7}
    return client


class TestMain:
    """Tests for the CLI group."""

    def test_version(self, runner):
        """Test --version prints the program name."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "algolia" in result.output

    def test_commands_registered(self, runner):
        """Test all commands are available."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("indexes", "search", "add"):
            assert name in result.output

    def test_invalid_environment_aborts(self, runner):
        """Test a bad setting in the environment is reported, not raised."""
        result = runner.invoke(cli, ["indexes", "list"], env={"ALGOLIA_TIMEOUT": "0"})

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert "timeout" in result.output


class TestIndexesCommands:
    """Tests for index management commands."""

    def test_list_table(self, runner, mock_client):
        """Test indexes are listed as a table."""
        with patch("algolia_search.cli.indexes.SearchClient") as mock_cls:
            mock_cls.from_config.return_value = mock_client
            result = runner.invoke(indexes, ["list"])

        assert result.exit_code == 0
        assert "movies" in result.output
        assert "42" in result.output

    def test_list_json(self, runner, mock_client):
        """Test --json prints the raw response."""
        with patch("algolia_search.cli.indexes.SearchClient") as mock_cls:
            mock_cls.from_config.return_value = mock_client
            result = runner.invoke(indexes, ["list", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["items"][0]["name"] == "movies"

    def test_list_empty(self, runner, mock_client):
        """Test an empty index list is reported."""
        mock_client.list_indexes.return_value = {"items": []}
        with patch("algolia_search.cli.indexes.SearchClient") as mock_cls:
            mock_cls.from_config.return_value = mock_client
            result = runner.invoke(indexes, ["list"])

        assert result.exit_code == 0
        assert "No indexes found" in result.output

    def test_list_unreachable(self, runner, mock_client):
        """Test library errors abort with a message."""
        mock_client.list_indexes.side_effect = AlgoliaUnreachableError(hosts_tried=("a", "b"))
        with patch("algolia_search.cli.indexes.SearchClient") as mock_cls:
            mock_cls.from_config.return_value = mock_client
            result = runner.invoke(indexes, ["list"])

        assert result.exit_code != 0
        assert "Hosts unreachable" in result.output

    def test_delete_with_yes(self, runner, mock_client):
        """Test delete --yes skips confirmation."""
        with patch("algolia_search.cli.indexes.SearchClient") as mock_cls:
            mock_cls.from_config.return_value = mock_client
            result = runner.invoke(indexes, ["delete", "movies", "--yes"])

        assert result.exit_code == 0
        mock_client.delete_index.assert_called_once_with("movies")
        assert "Deleted index" in result.output

    def test_delete_declined(self, runner, mock_client):
        """Test declining the confirmation deletes nothing."""
        with patch("algolia_search.cli.indexes.SearchClient") as mock_cls:
            mock_cls.from_config.return_value = mock_client
            result = runner.invoke(indexes, ["delete", "movies"], input="n\n")

        assert result.exit_code != 0
        mock_client.delete_index.assert_not_called()


class TestRecordCommands:
    """Tests for search and add."""

    def test_search(self, runner, mock_client):
        """Test search shows hits without internal attributes."""
        with patch("algolia_search.cli.records.Index") as mock_cls:
            mock_cls.from_config.return_value = mock_client
            result = runner.invoke(search, ["movies", "alien"])

        assert result.exit_code == 0
        mock_cls.from_config.assert_called_once_with("movies")
        mock_client.search.assert_called_once_with("alien")
        assert "Found 1 hits" in result.output
        assert "Alien" in result.output
        assert "_highlightResult" not in result.output

    def test_search_auth_error(self, runner, mock_client):
        """Test an auth failure aborts with its message."""
        mock_client.search.side_effect = AlgoliaAuthError("Invalid application ID or API Key", "a")
        with patch("algolia_search.cli.records.Index") as mock_cls:
            mock_cls.from_config.return_value = mock_client
            result = runner.invoke(search, ["movies", "alien"])

        assert result.exit_code != 0
        assert "Invalid application ID or API Key" in result.output

    def test_add_with_object_id(self, runner, mock_client):
        """Test add passes the record and object ID through."""
        with patch("algolia_search.cli.records.Index") as mock_cls:
            mock_cls.from_config.return_value = mock_client
            result = runner.invoke(add, ["movies", '{"title": "Alien"}', "--object-id", "x1"])

        assert result.exit_code == 0
        mock_client.add_object.assert_called_once_with({"title": "Alien"}, object_id="x1")
        assert "x1" in result.output

    def test_add_invalid_json(self, runner):
        """Test invalid JSON aborts before any API call."""
        with patch("algolia_search.cli.records.Index") as mock_cls:
            result = runner.invoke(add, ["movies", "{not json"])

        assert result.exit_code != 0
        assert "Invalid record JSON" in result.output
        mock_cls.from_config.assert_not_called()

    def test_add_requires_object(self, runner):
        """Test a JSON array is rejected."""
        with patch("algolia_search.cli.records.Index") as mock_cls:
            result = runner.invoke(add, ["movies", "[1, 2]"])

        assert result.exit_code != 0
        mock_cls.from_config.assert_not_called()
