"""
Chain identification and network constants.

Chat actions name their network with a short tag (``ethereum`` / ``sepolia``)
while the order book, RPC endpoints and token store are keyed by integer
chain IDs. This module owns the translation between the two.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Set

MAINNET_CHAIN_ID: int = 1
SEPOLIA_CHAIN_ID: int = 11155111

# Default chain when none specified
DEFAULT_CHAIN_ID: int = MAINNET_CHAIN_ID

# Networks the chat agent may trade on
SUPPORTED_NETWORKS: Set[str] = {"ethereum", "sepolia"}

# Reserved placeholder the order book uses for the chain's native asset
NATIVE_PLACEHOLDER = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

CHAIN_METADATA: Dict[int, Dict[str, Any]] = {
    1: {
        "name": "Ethereum",
        "network": "ethereum",
        "order_book_slug": "mainnet",
        "native_symbol": "ETH",
        "wrapped_native": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        "icon": "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/ethereum/info/logo.png",
    },
    100: {
        "name": "Gnosis",
        "network": "gnosis",
        "order_book_slug": "xdai",
        "native_symbol": "xDAI",
        "wrapped_native": "0xe91D153E0b41518A2Ce8Dd3D7944Fa863463a97d",
        "icon": "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/xdai/info/logo.png",
    },
    8453: {
        "name": "Base",
        "network": "base",
        "order_book_slug": "base",
        "native_symbol": "ETH",
        "wrapped_native": "0x4200000000000000000000000000000000000006",
        "icon": "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/base/info/logo.png",
    },
    42161: {
        "name": "Arbitrum One",
        "network": "arbitrum",
        "order_book_slug": "arbitrum_one",
        "native_symbol": "ETH",
        "wrapped_native": "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1",
        "icon": "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/arbitrum/info/logo.png",
    },
    11155111: {
        "name": "Sepolia",
        "network": "sepolia",
        "order_book_slug": "sepolia",
        "native_symbol": "ETH",
        "wrapped_native": "0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14",
        "icon": "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/ethereum/info/logo.png",
    },
}


def network_to_chain_id(network: Optional[str]) -> int:
    """Map a chat network tag to its chain ID.

    Only two networks are tradable from chat, so anything other than
    ``sepolia`` resolves to Ethereum mainnet.
    """

    return SEPOLIA_CHAIN_ID if network == "sepolia" else MAINNET_CHAIN_ID


def chain_id_to_network(chain_id: Optional[int]) -> str:
    """Map a wallet chain ID onto the network tag injected into actions."""

    return "sepolia" if chain_id == SEPOLIA_CHAIN_ID else "ethereum"


def describe_network(chain_id: Optional[int]) -> str:
    """Human label for the wallet's network, ``unknown`` when unsupported."""

    if chain_id == SEPOLIA_CHAIN_ID:
        return "sepolia"
    if chain_id == MAINNET_CHAIN_ID:
        return "ethereum"
    return "unknown"


def wrapped_native_address(network: Optional[str]) -> Optional[str]:
    meta = CHAIN_METADATA.get(network_to_chain_id(network))
    return meta["wrapped_native"] if meta else None


def wrapped_native_for_chain(chain_id: int) -> Optional[str]:
    meta = CHAIN_METADATA.get(chain_id)
    return meta["wrapped_native"] if meta else None


def is_native_asset(address: Optional[str]) -> bool:
    return bool(address) and address.lower() == NATIVE_PLACEHOLDER.lower()


def is_wrapped_native(address: Optional[str], network: Optional[str]) -> bool:
    wrapped = wrapped_native_address(network)
    return bool(address) and bool(wrapped) and address.lower() == wrapped.lower()


__all__ = [
    "MAINNET_CHAIN_ID",
    "SEPOLIA_CHAIN_ID",
    "DEFAULT_CHAIN_ID",
    "SUPPORTED_NETWORKS",
    "NATIVE_PLACEHOLDER",
    "ZERO_ADDRESS",
    "CHAIN_METADATA",
    "network_to_chain_id",
    "chain_id_to_network",
    "describe_network",
    "wrapped_native_address",
    "wrapped_native_for_chain",
    "is_native_asset",
    "is_wrapped_native",
]
