"""
Token identifier resolution for chat actions.

The model names tokens either by symbol ("USDC") or by contract address.
Resolution falls through three sources in order:

1. strict ``0x`` + 40 hex input is returned untouched (case preserved);
2. the token store for the chain implied by the network, matched on symbol
   case-insensitively, first entry wins;
3. a small built-in symbol table.

Anything still unresolved is returned unchanged so the caller's address
check produces the user-facing error.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from ..core.chains import NATIVE_PLACEHOLDER, chain_id_to_network, network_to_chain_id
from ..types.tokens import Token
from .token_store import TokenStore

_EVM_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")

# Built-in fallback used when the token store has no entry for a symbol.
STATIC_TOKEN_ADDRESSES: Dict[str, Dict[str, str]] = {
    "ETH": {"ethereum": NATIVE_PLACEHOLDER, "sepolia": NATIVE_PLACEHOLDER},
    "WETH": {
        "ethereum": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        "sepolia": "0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14",
    },
    "USDC": {
        "ethereum": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        "sepolia": "0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238",
    },
    "DAI": {
        "ethereum": "0x6B175474E89094C44Da98b954EedeAC495271d0F",
        "sepolia": "0x3e622317f8C93f7328350cF0B56d9eD4C620C5d6",
    },
}


def is_valid_address(value: Optional[str]) -> bool:
    """Return True for exactly ``0x`` followed by 40 hex characters."""

    return bool(value) and bool(_EVM_ADDRESS_RE.fullmatch(value))


class TokenResolver:
    """Resolve symbols to addresses against the token store."""

    def __init__(self, store: TokenStore, protocol: str = "cowSwap") -> None:
        self.store = store
        self.protocol = protocol

    def get_tokens(self, chain_id: int) -> List[Token]:
        """Tokens known for ``chain_id``, read fresh from the store."""

        return self.store.get_tokens(self.protocol, chain_id)

    def find_token(self, address: str, chain_id: int) -> Optional[Token]:
        for token in self.get_tokens(chain_id):
            if token.matches_address(address):
                return token
        return None

    def find_by_symbol(self, symbol: str, chain_id: int) -> Optional[Token]:
        for token in self.get_tokens(chain_id):
            if token.matches_symbol(symbol):
                return token
        return None

    def resolve_token_address(self, identifier: str, network: Optional[str] = "ethereum") -> str:
        if is_valid_address(identifier):
            return identifier

        chain_id = network_to_chain_id(network)
        found = self.find_by_symbol(identifier, chain_id)
        if found is not None:
            return found.address

        static = STATIC_TOKEN_ADDRESSES.get(identifier.upper(), {})
        return static.get(chain_id_to_network(chain_id), identifier)


__all__ = [
    "STATIC_TOKEN_ADDRESSES",
    "TokenResolver",
    "is_valid_address",
]
