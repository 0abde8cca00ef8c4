"""
Token list fetcher and the built-in Sepolia test tokens.
"""

from typing import Any, Dict, List, Optional

import httpx

from ..core.chains import NATIVE_PLACEHOLDER
from ..types.tokens import TokenList

ETH_LOGO = "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/ethereum/info/logo.png"
_TRUSTWALLET_ASSET = "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/ethereum/assets/{}/logo.png"

NATIVE_ETH_TOKEN: Dict[str, Any] = {
    "address": NATIVE_PLACEHOLDER,
    "name": "Ether",
    "symbol": "ETH",
    "decimals": 18,
    "logoURI": ETH_LOGO,
}

# The public CoW list carries no Sepolia entries; these are the test
# deployments the order book accepts there.
SEPOLIA_TEST_TOKENS: List[Dict[str, Any]] = [
    {**NATIVE_ETH_TOKEN, "chainId": 11155111},
    {
        "chainId": 11155111,
        "address": "0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14",
        "name": "Wrapped Ether",
        "symbol": "WETH",
        "decimals": 18,
        "logoURI": _TRUSTWALLET_ASSET.format("0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"),
    },
    {
        "chainId": 11155111,
        "address": "0xbe72E441BF55620febc26715db68d3494213D8Cb",
        "name": "USD Coin",
        "symbol": "USDC",
        "decimals": 6,
        "logoURI": _TRUSTWALLET_ASSET.format("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"),
    },
    {
        "chainId": 11155111,
        "address": "0xB4F1737Af37711e9A5890D9510c9bB60e170CB0D",
        "name": "Dai Stablecoin",
        "symbol": "DAI",
        "decimals": 18,
        "logoURI": _TRUSTWALLET_ASSET.format("0x6B175474E89094C44Da98b954EedeAC495271d0F"),
    },
    {
        "chainId": 11155111,
        "address": "0x0625aFB445C3B6B7B929342a04A22599fd5dBB59",
        "name": "CoW Protocol Token",
        "symbol": "COW",
        "decimals": 18,
        "logoURI": _TRUSTWALLET_ASSET.format("0xDEf1CA1fb7FBcDC777520aa7f396b4E015F497aB"),
    },
    {
        "chainId": 11155111,
        "address": "0xd3f3d46FeBCD4CdAa2B83799b7A5CdcB69d135De",
        "name": "Gnosis",
        "symbol": "GNO",
        "decimals": 18,
        "logoURI": _TRUSTWALLET_ASSET.format("0x6810e776880C02933D47DB1b9fc05908e5386b96"),
    },
    {
        "chainId": 11155111,
        "address": "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984",
        "name": "Uniswap",
        "symbol": "UNI",
        "decimals": 18,
        "logoURI": _TRUSTWALLET_ASSET.format("0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984"),
    },
]


class TokenListProvider:
    """Fetches a Uniswap-schema token list over HTTP"""

    name = "token_list"

    def __init__(self, url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self._transport = transport

    async def fetch(self) -> List[Dict[str, Any]]:
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.get(self.url)
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, dict) or "tokens" not in data:
            raise ValueError(f"Token list at {self.url} has no 'tokens' array")
        return TokenList.model_validate(data).tokens
