"""
Unit Tests for the Signer Registry
"""

import pytest

from blockchain.exceptions import ConfigurationError
from blockchain.signer import SignerRegistry

from conftest import DEPLOYER_ADDRESS, DEPLOYER_KEY, SECOND_ADDRESS, SECOND_KEY


@pytest.fixture
def registry():
    return SignerRegistry([DEPLOYER_KEY, SECOND_KEY])


class TestSignerRegistry:

    def test_first_signer_by_default(self, registry):
        assert registry.resolve().address == DEPLOYER_ADDRESS

    def test_resolve_by_index(self, registry):
        assert registry.resolve(1).address == SECOND_ADDRESS

    def test_resolve_by_address_ignores_case(self, registry):
        assert registry.resolve(SECOND_ADDRESS.lower()).address == SECOND_ADDRESS

    def test_addresses(self, registry):
        assert registry.addresses == [DEPLOYER_ADDRESS, SECOND_ADDRESS]

    def test_index_out_of_range(self, registry):
        with pytest.raises(ConfigurationError, match="out of range"):
            registry.resolve(2)

        with pytest.raises(ConfigurationError, match="out of range"):
            registry.resolve(-1)

    def test_bool_is_not_an_index(self, registry):
        with pytest.raises(ConfigurationError):
            registry.resolve(True)

    def test_unknown_address(self, registry):
        with pytest.raises(ConfigurationError, match="No configured account"):
            registry.resolve("0x0000000000000000000000000000000000000001")

    def test_invalid_key_is_not_echoed(self):
        registry = SignerRegistry(["0xnot-a-key"])

        with pytest.raises(ConfigurationError) as exc_info:
            registry.resolve(0)

        assert "0xnot-a-key" not in str(exc_info.value)

    def test_empty_registry(self):
        with pytest.raises(ConfigurationError):
            SignerRegistry([]).resolve(0)
