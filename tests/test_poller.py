"""
Tests for the Directory Poller.
"""
import pytest

from vault_handoff.vault.poller import DirectoryPoller, WAITING_MESSAGE

from fakes import FakeSearch, NoSleep, RecordingUI


@pytest.fixture
def ui():
    return RecordingUI()


@pytest.fixture
def sleep():
    return NoSleep()


class TestDirectoryPoller:
    """Tests for waiting on client discovery."""

    def test_found_immediately(self, ui, sleep):
        """Test no waiting when the client is already searchable."""
        search = FakeSearch(misses=0)
        poller = DirectoryPoller(search, ui, sleep=sleep)
        assert poller.wait_for("node1") == 1
        assert search.queries == [("client", "name:node1")]
        assert ui.infos == []
        assert sleep.calls == []

    @pytest.mark.parametrize("misses", [1, 3, 10])
    def test_waits_until_found(self, ui, sleep, misses):
        """Test N misses give N+1 queries and N waiting messages."""
        search = FakeSearch(misses=misses)
        poller = DirectoryPoller(search, ui, sleep=sleep)
        assert poller.wait_for("node1") == misses + 1
        assert len(search.queries) == misses + 1
        assert ui.infos == [WAITING_MESSAGE] * misses
        assert sleep.calls == [1.0] * misses

    def test_custom_interval_and_kind(self, ui, sleep):
        """Test interval and search kind are configurable."""
        search = FakeSearch(misses=2)
        poller = DirectoryPoller(search, ui, interval=0.5, kind="node", sleep=sleep)
        poller.wait_for("node1")
        assert sleep.calls == [0.5, 0.5]
        assert {kind for kind, _ in search.queries} == {"node"}

    def test_empty_first_result_is_not_found(self, ui, sleep):
        """Test a None first match still counts as not searchable."""
        class Search:
            calls = 0

            def search(self, kind, query):
                Search.calls += 1
                return [None] if Search.calls == 1 else [{"name": "node1"}]

        poller = DirectoryPoller(Search(), ui, sleep=sleep)
        assert poller.wait_for("node1") == 2
        assert len(ui.infos) == 1

    def test_search_errors_propagate(self, ui, sleep):
        """Test search failures are not retried."""
        search = FakeSearch(error=ConnectionError("directory down"))
        poller = DirectoryPoller(search, ui, sleep=sleep)
        with pytest.raises(ConnectionError):
            poller.wait_for("node1")
        assert len(search.queries) == 1
        assert ui.infos == []

    def test_empty_mapping_match_is_found(self, ui, sleep):
        """Test any first match other than None means searchable."""
        class Search:
            def search(self, kind, query):
                return [{}]

        poller = DirectoryPoller(Search(), ui, sleep=sleep)
        assert poller.wait_for("node1") == 1
        assert ui.infos == []

    def test_empty_results_are_not_found(self, ui, sleep):
        """Test empty result sequences keep the poller waiting."""
        poller = DirectoryPoller(FakeSearch(misses=1), ui, sleep=sleep)
        assert poller.client_found("node1") is False
        assert poller.client_found("node1") is True
