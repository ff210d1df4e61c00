"""
Tests for collaborator helpers.
"""
import logging

import pytest

from vault_handoff.vault.collaborators import LoggerUI, SecretStore
from vault_handoff.vault.exceptions import SecretStoreUnavailableError, VaultHandoffError


class ModuleBackedStore(SecretStore):
    requires = ("json", "vault_handoff_missing_backend")

    def load(self, vault, item):
        raise AssertionError("not expected")


class TestSecretStoreProbe:

    def test_probe_without_requirements(self):
        """Test a store without optional modules always probes fine."""
        class Store(SecretStore):
            def load(self, vault, item):
                return None
        Store().probe()

    def test_probe_names_missing_module(self):
        """Test the first missing module is named in the error."""
        with pytest.raises(SecretStoreUnavailableError) as exc:
            ModuleBackedStore().probe()
        err = exc.value
        assert err.dependency == "vault_handoff_missing_backend"
        assert "vault_handoff_missing_backend" in str(err)
        assert err.details == {"store": "ModuleBackedStore"}
        assert isinstance(err.__cause__, ImportError)

    def test_cannot_instantiate_without_load(self):
        """Test stores must implement load()."""
        with pytest.raises(TypeError):
            SecretStore()


class TestExceptions:

    def test_str_without_details(self):
        """Test the message is the string form."""
        assert str(VaultHandoffError("boom")) == "boom"

    def test_str_with_details(self):
        """Test details are appended to the string form."""
        err = VaultHandoffError("boom", {"vault": "v1"})
        assert str(err) == "boom (details: {'vault': 'v1'})"

    def test_unavailable_is_handoff_error(self):
        """Test the dependency error shares the package base class."""
        assert issubclass(SecretStoreUnavailableError, VaultHandoffError)


def test_logger_ui(caplog):
    """Test info and warn go to the package logger."""
    ui = LoggerUI()
    with caplog.at_level(logging.INFO, logger="vault_handoff"):
        ui.info("waiting")
        ui.warn("conflict")
    levels = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert (logging.INFO, "waiting") in levels
    assert (logging.WARNING, "conflict") in levels
