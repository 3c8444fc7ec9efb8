"""Deployed ENS contract addresses per network."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Network(StrEnum):
    MAINNET = "mainnet"
    GOERLI = "goerli"
    SEPOLIA = "sepolia"


class ContractAddresses(BaseModel):
    model_config = {"frozen": True}

    registry: str
    public_resolver: str
    base_registrar: str
    eth_controller: str


DEFAULT_NETWORK = Network.MAINNET

_ADDRESSES: dict[Network, ContractAddresses] = {
    Network.MAINNET: ContractAddresses(
        registry="0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e",
        public_resolver="0x4976fb03C32e5B8cfe2b6cCB31c09Ba78EBaBa41",
        base_registrar="0x57f1887a8BF19b14fC0dF6Fd9B2acc9Af147eA85",
        eth_controller="0x253553366Da8546fC250F225fe3d25d0C782303b",
    ),
    Network.GOERLI: ContractAddresses(
        registry="0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e",
        public_resolver="0x4B1488B7a6B320d2D721406204aBc3eeAa9AD329",
        base_registrar="0x57f1887a8BF19b14fC0dF6Fd9B2acc9Af147eA85",
        eth_controller="0xCc5e7dB10E2b927549dbcEacE848CC1D52f1fD101",
    ),
    Network.SEPOLIA: ContractAddresses(
        registry="0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e",
        public_resolver="0x8FADE66B79cC9f707aB26799354482EB93a5B7dD",
        base_registrar="0x57f1887a8BF19b14fC0dF6Fd9B2acc9Af147eA85",
        eth_controller="0xFED6a969AaA60E4961FCD3EBF1A2e8913ac65B72",
    ),
}


def resolve_network(name: str | None) -> Network | None:
    """Map a network name (case-insensitive) to :class:`Network`, or None."""
    if not name:
        return None
    try:
        return Network(name.strip().lower())
    except ValueError:
        return None


def contract_addresses(network: str | None = None) -> ContractAddresses:
    """Addresses for *network*; unknown or missing names fall back to mainnet."""
    resolved = resolve_network(network) or DEFAULT_NETWORK
    return _ADDRESSES[resolved]
