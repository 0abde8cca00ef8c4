import time

import pytest
from unittest.mock import AsyncMock, MagicMock

from app.services.swap import QuoteParams, SwapGateway, enrich_quote
from app.types.tokens import Token

from ..helpers import MAINNET_USDC, MAINNET_WETH, NATIVE, SEPOLIA_WETH, WALLET, sample_quote


@pytest.fixture
def provider():
    p = MagicMock()
    p.get_quote = AsyncMock(return_value=sample_quote())
    p.send_order = AsyncMock(return_value="0xorderuid")
    p.get_order = AsyncMock(return_value={"uid": "0xorderuid", "status": "open"})
    return p


@pytest.fixture
def gateway(provider):
    return SwapGateway(lambda chain_id: provider)


def _params(**overrides) -> QuoteParams:
    fields = dict(
        sell_token=MAINNET_WETH,
        buy_token=MAINNET_USDC,
        amount="0.1",
        kind="sell",
        user_address=WALLET,
        sell_token_decimals=18,
        buy_token_decimals=6,
    )
    fields.update(overrides)
    return QuoteParams(**fields)


def test_sell_quote_request_fields(gateway):
    before = int(time.time())
    request = gateway.build_quote_request(_params(), 1)

    assert request["sellToken"] == MAINNET_WETH
    assert request["buyToken"] == MAINNET_USDC
    assert request["from"] == WALLET
    assert request["receiver"] == WALLET
    assert request["kind"] == "sell"
    assert request["sellAmountBeforeFee"] == str(10**17)
    assert "buyAmountAfterFee" not in request
    assert request["appData"] == "0x" + "0" * 64
    assert request["partiallyFillable"] is False
    assert request["sellTokenBalance"] == "erc20"
    assert request["buyTokenBalance"] == "erc20"
    assert request["signingScheme"] == "eip712"
    assert before + 3600 <= request["validTo"] <= int(time.time()) + 3600


def test_buy_quote_uses_buy_decimals(gateway):
    request = gateway.build_quote_request(_params(kind="buy", amount="250"), 1)

    assert request["kind"] == "buy"
    assert request["buyAmountAfterFee"] == "250000000"
    assert "sellAmountBeforeFee" not in request


@pytest.mark.parametrize("chain_id, wrapped", [(1, MAINNET_WETH), (11155111, SEPOLIA_WETH)])
def test_native_sell_is_quoted_as_wrapped(gateway, chain_id, wrapped):
    request = gateway.build_quote_request(_params(sell_token=NATIVE.lower()), chain_id)

    assert request["sellToken"] == wrapped


def test_excess_precision_is_rejected(gateway):
    with pytest.raises(ValueError):
        gateway.build_quote_request(_params(kind="buy", amount="0.0000001"), 1)


@pytest.mark.asyncio
async def test_get_quote_passes_request_to_provider(gateway, provider):
    quote = await gateway.get_quote(_params(), 1)

    assert quote == sample_quote()
    sent = provider.get_quote.await_args.args[0]
    assert sent["sellAmountBeforeFee"] == str(10**17)


@pytest.mark.asyncio
async def test_submit_order_merges_signature(gateway, provider):
    order_quote = sample_quote()["quote"]

    uid = await gateway.submit_order(
        {"quote": order_quote, "signature": "0xsig", "quoteId": 4242, "from": WALLET, "chainId": 1},
        1,
    )

    assert uid == "0xorderuid"
    sent = provider.send_order.await_args.args[0]
    assert sent["buyAmount"] == order_quote["buyAmount"]
    assert sent["signature"] == "0xsig"
    assert sent["quoteId"] == 4242
    assert sent["from"] == WALLET
    assert sent["signingScheme"] == "eip712"
    assert "chainId" not in sent


@pytest.mark.asyncio
async def test_order_status(gateway, provider):
    assert await gateway.get_order_status("0xorderuid", 1) == {"uid": "0xorderuid", "status": "open"}
    provider.get_order.assert_awaited_once_with("0xorderuid")


def test_unsupported_chain_raises():
    with pytest.raises(ValueError):
        SwapGateway().provider_for(137)


def test_enrich_defaults_when_tokens_unknown():
    enriched = enrich_quote(sample_quote(), sell_decimals=18, buy_decimals=6, request_amount="0.1")

    assert enriched["formattedSellAmount"] == "0.099"
    assert enriched["sellTokenSymbol"] == "UNKNOWN"
    assert enriched["buyTokenSymbol"] == "UNKNOWN"
    assert enriched["sellTokenLogoURI"] is None
    assert enriched["id"] == 4242


@pytest.mark.asyncio
async def test_refresh_keeps_request_amount_and_metadata(gateway, provider):
    weth = Token(chainId=1, address=MAINNET_WETH, name="Wrapped Ether", symbol="WETH", decimals=18, logoURI="w.png")
    usdc = Token(chainId=1, address=MAINNET_USDC, name="USD Coin", symbol="USDC", decimals=6, logoURI="u.png")
    previous = enrich_quote(
        sample_quote(),
        sell_decimals=18,
        buy_decimals=6,
        request_amount="0.1",
        sell_token=weth,
        buy_token=usdc,
        formatted_sell_amount="0.1",
    )
    provider.get_quote.return_value = sample_quote(buy_amount="260000000")

    refreshed = await gateway.refresh_quote(previous, 1)

    sent = provider.get_quote.await_args.args[0]
    assert sent["sellAmountBeforeFee"] == str(10**17)
    assert sent["from"] == WALLET
    assert refreshed["formattedBuyAmount"] == "260"
    assert refreshed["requestAmount"] == "0.1"
    assert (refreshed["sellTokenSymbol"], refreshed["buyTokenSymbol"]) == ("WETH", "USDC")
    assert (refreshed["sellTokenLogoURI"], refreshed["buyTokenLogoURI"]) == ("w.png", "u.png")
    assert (refreshed["sellTokenDecimals"], refreshed["buyTokenDecimals"]) == (18, 6)
    assert previous["formattedBuyAmount"] == "250"


@pytest.mark.asyncio
async def test_refresh_keeps_zero_decimals(gateway, provider):
    previous = {**sample_quote(), "sellTokenDecimals": 0, "buyTokenDecimals": 6, "requestAmount": "5"}

    refreshed = await gateway.refresh_quote(previous, 1)

    sent = provider.get_quote.await_args.args[0]
    assert sent["sellAmountBeforeFee"] == "5"
    assert (refreshed["sellTokenDecimals"], refreshed["buyTokenDecimals"]) == (0, 6)
