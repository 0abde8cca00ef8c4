"""Shared addresses and token data for the test suite."""

WALLET = "0x50ac5CFcc81BB0872e85255D7079F8a529345D16"

MAINNET_WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
MAINNET_USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
SEPOLIA_WETH = "0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14"
SEPOLIA_USDC = "0xbe72E441BF55620febc26715db68d3494213D8Cb"
NATIVE = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"

SAMPLE_TOKENS = {
    "cowSwap": {
        "1": [
            {"chainId": 1, "address": NATIVE, "name": "Ether", "symbol": "ETH", "decimals": 18},
            {"chainId": 1, "address": MAINNET_WETH, "name": "Wrapped Ether", "symbol": "WETH", "decimals": 18,
             "logoURI": "https://example.org/weth.png"},
            {"chainId": 1, "address": MAINNET_USDC, "name": "USD Coin", "symbol": "USDC", "decimals": 6,
             "logoURI": "https://example.org/usdc.png"},
        ],
        "11155111": [
            {"chainId": 11155111, "address": NATIVE, "name": "Ether", "symbol": "ETH", "decimals": 18},
            {"chainId": 11155111, "address": SEPOLIA_WETH, "name": "Wrapped Ether", "symbol": "WETH", "decimals": 18},
            {"chainId": 11155111, "address": SEPOLIA_USDC, "name": "USD Coin", "symbol": "USDC", "decimals": 6},
        ],
    }
}


def sample_quote(buy_amount: str = "250000000", fee_amount: str = "1000000000000000") -> dict:
    """Order-book quote response in the shape the API returns it."""

    return {
        "quote": {
            "sellToken": MAINNET_WETH,
            "buyToken": MAINNET_USDC,
            "receiver": WALLET,
            "sellAmount": "99000000000000000",
            "buyAmount": buy_amount,
            "feeAmount": fee_amount,
            "kind": "sell",
            "validTo": 1700000000,
            "appData": "0x" + "0" * 64,
            "partiallyFillable": False,
            "sellTokenBalance": "erc20",
            "buyTokenBalance": "erc20",
            "signingScheme": "eip712",
        },
        "from": WALLET,
        "expiration": "2024-01-01T00:00:00Z",
        "id": 4242,
        "verified": True,
    }
