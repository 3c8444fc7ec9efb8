"""Tests for the deployed-contract address book."""

import pytest

from enskit.domain.networks import Network, contract_addresses, resolve_network

REGISTRY = "0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e"


class TestResolveNetwork:
    @pytest.mark.parametrize("name", ["mainnet", "MAINNET", " Sepolia "])
    def test_known(self, name: str) -> None:
        assert resolve_network(name) is not None

    @pytest.mark.parametrize("name", [None, "", "ropsten"])
    def test_unknown(self, name: str | None) -> None:
        assert resolve_network(name) is None


class TestContractAddresses:
    @pytest.mark.parametrize("network", list(Network))
    def test_registry_is_shared(self, network: Network) -> None:
        assert contract_addresses(network).registry == REGISTRY

    def test_resolvers_differ(self) -> None:
        assert (
            contract_addresses("mainnet").public_resolver
            != contract_addresses("sepolia").public_resolver
        )

    def test_unknown_falls_back_to_mainnet(self) -> None:
        assert contract_addresses("ropsten") == contract_addresses("mainnet")
        assert contract_addresses() == contract_addresses("mainnet")
