import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.providers.cow import OrderBookError
from app.services.container import ServiceContainer
from app.types.responses import RefreshResult

from .helpers import MAINNET_USDC, MAINNET_WETH, WALLET, sample_quote

QUOTE_BODY = {
    "sellToken": MAINNET_WETH,
    "buyToken": MAINNET_USDC,
    "amount": "0.1",
    "kind": "sell",
    "userAddress": WALLET,
    "chainId": 1,
}


@pytest.fixture
def container(token_file):
    container = ServiceContainer.from_settings(Settings(gemini_api_key="", token_store_path=token_file))
    container.gateway = MagicMock()
    container.gateway.get_quote = AsyncMock(return_value=sample_quote())
    container.gateway.refresh_quote = AsyncMock(return_value={"formattedBuyAmount": "260"})
    container.gateway.submit_order = AsyncMock(return_value="0xuid")
    container.gateway.get_order_status = AsyncMock(return_value={"uid": "0xuid", "status": "open"})
    container.token_lists = MagicMock()
    container.token_lists.refresh_tokens = AsyncMock(
        return_value=RefreshResult(success=True, message="Tokens refreshed successfully")
    )
    return container


@pytest.fixture
def client(container):
    return TestClient(create_app(container))


def test_quote_returns_raw_order_book_quote(client, container):
    response = client.post("/swap/quote", json=QUOTE_BODY)

    assert response.status_code == 200
    assert response.json() == sample_quote()
    params, chain_id = container.gateway.get_quote.await_args.args
    assert chain_id == 1
    assert (params.sell_token_decimals, params.buy_token_decimals) == (18, 18)
    assert params.user_address == WALLET


def test_quote_passes_explicit_decimals(client, container):
    client.post("/swap/quote", json={**QUOTE_BODY, "amount": 250, "kind": "buy", "buyTokenDecimals": 6})

    params, _ = container.gateway.get_quote.await_args.args
    assert params.amount == "250"
    assert params.kind == "buy"
    assert params.buy_token_decimals == 6


@pytest.mark.parametrize("missing", ["sellToken", "buyToken", "amount", "kind", "userAddress", "chainId"])
def test_quote_requires_fields(client, container, missing):
    body = {k: v for k, v in QUOTE_BODY.items() if k != missing}

    response = client.post("/swap/quote", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}
    container.gateway.get_quote.assert_not_awaited()


def test_quote_failure_is_a_500(client, container):
    container.gateway.get_quote.side_effect = OrderBookError("Order book error (400): SellAmountDoesNotCoverFee")

    response = client.post("/swap/quote", json=QUOTE_BODY)

    assert response.status_code == 500
    assert response.json() == {"error": "Order book error (400): SellAmountDoesNotCoverFee"}


def test_quote_refresh(client, container):
    previous = {"quote": sample_quote()["quote"], "requestAmount": "0.1"}

    response = client.post("/swap/quote/refresh", json={"quote": previous, "chainId": 11155111})

    assert response.json() == {"formattedBuyAmount": "260"}
    container.gateway.refresh_quote.assert_awaited_once_with(previous, 11155111, None)


def test_submit_order_defaults_to_mainnet(client, container):
    body = {"quote": sample_quote()["quote"], "signature": "0xsig", "quoteId": 4242, "from": WALLET}

    response = client.post("/swap/orders", json=body)

    assert response.json() == {"orderId": "0xuid"}
    payload, chain_id = container.gateway.submit_order.await_args.args
    assert chain_id == 1
    assert payload["signature"] == "0xsig"


def test_submit_order_failure(client, container):
    container.gateway.submit_order.side_effect = OrderBookError("Order book error (400): InvalidSignature")

    response = client.post("/swap/orders", json={"chainId": 11155111})

    assert response.status_code == 500
    assert response.json() == {"error": "Order book error (400): InvalidSignature"}
    assert container.gateway.submit_order.await_args.args[1] == 11155111


def test_order_status(client, container):
    response = client.get("/swap/orders/0xuid", params={"chainId": 11155111})

    assert response.json() == {"uid": "0xuid", "status": "open"}
    container.gateway.get_order_status.assert_awaited_once_with("0xuid", 11155111)


def test_order_status_failure(client, container):
    container.gateway.get_order_status.side_effect = OrderBookError("Order book error (404): NotFound")

    response = client.get("/swap/orders/0xmissing")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch order status"}


def test_tokens_by_chain(client):
    mainnet = client.get("/tokens").json()
    sepolia = client.get("/tokens", params={"chainId": 11155111}).json()

    assert [t["symbol"] for t in mainnet] == ["ETH", "WETH", "USDC"]
    assert {t["chainId"] for t in sepolia} == {11155111}
    assert client.get("/tokens", params={"chainId": 100}).json() == []


def test_chains(client):
    chains = {c["chainId"]: c for c in client.get("/chains").json()}

    assert set(chains) == {1, 100, 8453, 42161, 11155111}
    assert chains[11155111]["network"] == "sepolia"
    assert chains[1]["wrappedNativeAddress"] == MAINNET_WETH


def test_admin_refresh(client, container):
    response = client.post("/admin/tokens/refresh")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Tokens refreshed successfully"}


def test_admin_refresh_failure(client, container):
    container.token_lists.refresh_tokens.return_value = RefreshResult(
        success=False, message="Error refreshing tokens: boom"
    )

    response = client.post("/admin/tokens/refresh")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Error refreshing tokens: boom"}
