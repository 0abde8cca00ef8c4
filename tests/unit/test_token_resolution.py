"""
Tests for TokenResolver.

Covers:
- Address passthrough (case preserved)
- Store symbol lookup per network
- Static fallback table
- Unresolvable identifiers
"""

import pytest

from app.services.token_resolution import STATIC_TOKEN_ADDRESSES, TokenResolver, is_valid_address
from app.services.token_store import TokenStore

from ..helpers import MAINNET_USDC, NATIVE, SEPOLIA_USDC, SEPOLIA_WETH


@pytest.mark.parametrize(
    "address",
    [
        "0x0000000000000000000000000000000000000000",
        "0xAbCdEf0123456789aBcDeF0123456789ABCDEF01",
        NATIVE,
    ],
)
def test_addresses_pass_through_unchanged(resolver, address):
    assert resolver.resolve_token_address(address, "ethereum") == address
    assert resolver.resolve_token_address(resolver.resolve_token_address(address, "sepolia"), "sepolia") == address


@pytest.mark.parametrize(
    "value, expected",
    [
        (MAINNET_USDC, True),
        (MAINNET_USDC.lower(), True),
        ("0x123", False),
        (MAINNET_USDC[2:], False),
        (MAINNET_USDC + "0", False),
        ("0xZZb86991c6218b36c1d19D4a2e9Eb0cE3606eB48", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_address(value, expected):
    assert is_valid_address(value) is expected


def test_symbol_lookup_is_case_insensitive_and_network_scoped(resolver):
    assert resolver.resolve_token_address("usdc", "ethereum") == MAINNET_USDC
    assert resolver.resolve_token_address("USDC", "sepolia") == SEPOLIA_USDC
    assert resolver.resolve_token_address("weth", "sepolia") == SEPOLIA_WETH


def test_unknown_network_uses_mainnet(resolver):
    assert resolver.resolve_token_address("USDC", "optimism") == MAINNET_USDC


def test_static_table_used_when_store_empty(tmp_path):
    resolver = TokenResolver(TokenStore(tmp_path / "missing.json"))

    assert resolver.resolve_token_address("DAI", "ethereum") == STATIC_TOKEN_ADDRESSES["DAI"]["ethereum"]
    assert resolver.resolve_token_address("eth", "sepolia") == NATIVE


def test_unresolvable_symbol_returned_unchanged(resolver):
    assert resolver.resolve_token_address("NONEXISTENT", "ethereum") == "NONEXISTENT"


def test_first_symbol_match_wins(tmp_path):
    store = TokenStore(tmp_path / "tokens.json")
    first = "0x1111111111111111111111111111111111111111"
    second = "0x2222222222222222222222222222222222222222"
    store.save(
        {
            "cowSwap": {
                "1": [
                    {"chainId": 1, "address": first, "name": "Fake One", "symbol": "FAKE", "decimals": 18},
                    {"chainId": 1, "address": second, "name": "Fake Two", "symbol": "fake", "decimals": 18},
                ]
            }
        }
    )

    assert TokenResolver(store).resolve_token_address("FAKE", "ethereum") == first


def test_find_token_by_address_ignores_case(resolver):
    token = resolver.find_token(SEPOLIA_USDC.lower(), 11155111)

    assert token is not None
    assert token.symbol == "USDC"
    assert token.decimals == 6
    assert resolver.find_token(SEPOLIA_USDC, 1) is None
