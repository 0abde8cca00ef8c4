"""Order-book gateway: quotes, order submission and order status."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..core.chains import ZERO_ADDRESS, is_native_asset, wrapped_native_for_chain
from ..providers.cow import CowOrderBookProvider
from ..types.tokens import Token
from .units import format_units, parse_units

logger = logging.getLogger(__name__)

ZERO_APP_DATA = "0x" + "0" * 64
QUOTE_VALIDITY_SECONDS = 3600
DEFAULT_DECIMALS = 18


@dataclass
class QuoteParams:
    sell_token: str
    buy_token: str
    amount: str
    kind: str
    user_address: str
    sell_token_decimals: int = DEFAULT_DECIMALS
    buy_token_decimals: int = DEFAULT_DECIMALS


def _quote_body(raw: Dict[str, Any]) -> Dict[str, Any]:
    body = raw.get("quote")
    return body if isinstance(body, dict) else raw


def _stored_decimals(value: Any) -> int:
    # 0 is a valid decimals value; only a missing one falls back
    return DEFAULT_DECIMALS if value is None else int(value)


def enrich_quote(
    raw: Dict[str, Any],
    *,
    sell_decimals: int,
    buy_decimals: int,
    request_amount: Optional[str],
    sell_token: Optional[Token] = None,
    buy_token: Optional[Token] = None,
    formatted_sell_amount: Optional[str] = None,
) -> Dict[str, Any]:
    """Attach display fields to a raw order-book quote.

    The raw fields are left untouched; everything added here is for the UI
    and is never sent back to the order book.
    """

    body = _quote_body(raw)
    return {
        **raw,
        "formattedSellAmount": formatted_sell_amount or format_units(body["sellAmount"], sell_decimals),
        "formattedBuyAmount": format_units(body["buyAmount"], buy_decimals),
        "formattedFeeAmount": format_units(body.get("feeAmount", "0"), sell_decimals),
        "sellTokenSymbol": sell_token.symbol if sell_token else "UNKNOWN",
        "buyTokenSymbol": buy_token.symbol if buy_token else "UNKNOWN",
        "sellTokenLogoURI": sell_token.logoURI if sell_token else None,
        "buyTokenLogoURI": buy_token.logoURI if buy_token else None,
        "sellTokenDecimals": sell_decimals,
        "buyTokenDecimals": buy_decimals,
        "requestAmount": request_amount,
    }


class SwapGateway:
    """Façade over the order book for one process, any supported chain."""

    def __init__(
        self,
        provider_factory: Optional[Callable[[int], CowOrderBookProvider]] = None,
    ) -> None:
        self._provider_factory = provider_factory or CowOrderBookProvider

    def provider_for(self, chain_id: int) -> CowOrderBookProvider:
        return self._provider_factory(chain_id)

    def build_quote_request(self, params: QuoteParams, chain_id: int) -> Dict[str, Any]:
        decimals = params.sell_token_decimals if params.kind == "sell" else params.buy_token_decimals
        atomic_amount = parse_units(params.amount, decimals)

        sell_token = params.sell_token
        if is_native_asset(sell_token):
            # Native sells are quoted against the wrapped contract (Eth-flow)
            wrapped = wrapped_native_for_chain(chain_id)
            if not wrapped:
                raise ValueError(f"No wrapped native token configured for chain {chain_id}")
            sell_token = wrapped

        request: Dict[str, Any] = {
            "sellToken": sell_token,
            "buyToken": params.buy_token,
            "from": params.user_address,
            "receiver": params.user_address,
            "validTo": int(time.time()) + QUOTE_VALIDITY_SECONDS,
            "appData": ZERO_APP_DATA,
            "partiallyFillable": False,
            "sellTokenBalance": "erc20",
            "buyTokenBalance": "erc20",
            "kind": "sell" if params.kind == "sell" else "buy",
            "signingScheme": "eip712",
        }
        if params.kind == "sell":
            request["sellAmountBeforeFee"] = str(atomic_amount)
        else:
            request["buyAmountAfterFee"] = str(atomic_amount)
        return request

    async def get_quote(self, params: QuoteParams, chain_id: int) -> Dict[str, Any]:
        request = self.build_quote_request(params, chain_id)
        logger.debug("Quote request on chain %s: %s", chain_id, request)
        return await self.provider_for(chain_id).get_quote(request)

    async def submit_order(self, params: Dict[str, Any], chain_id: int) -> str:
        """Forward a client-signed order.

        ``params`` carries ``quote`` (the order to sign from the quote
        response), ``signature``, ``quoteId`` and ``from``.
        """

        order = {
            **(params.get("quote") or {}),
            "from": params.get("from"),
            "quoteId": params.get("quoteId"),
            "signature": params.get("signature"),
            "signingScheme": "eip712",
        }
        return await self.provider_for(chain_id).send_order(order)

    async def get_order_status(self, order_uid: str, chain_id: int) -> Dict[str, Any]:
        return await self.provider_for(chain_id).get_order(order_uid)

    async def refresh_quote(
        self,
        previous: Dict[str, Any],
        chain_id: int,
        user_address: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Re-quote with the parameters of ``previous``.

        The new quote supersedes the old one; the requested amount and the
        token display metadata carry over so the UI renders consistently.
        """

        body = _quote_body(previous)
        kind = body.get("kind", "sell")
        sell_decimals = _stored_decimals(previous.get("sellTokenDecimals"))
        buy_decimals = _stored_decimals(previous.get("buyTokenDecimals"))
        request_amount = previous.get("requestAmount")
        amount = request_amount
        if not amount:
            atomic = body.get("sellAmount") if kind == "sell" else body.get("buyAmount")
            amount = format_units(atomic, sell_decimals if kind == "sell" else buy_decimals)

        params = QuoteParams(
            sell_token=body["sellToken"],
            buy_token=body["buyToken"],
            amount=amount,
            kind=kind,
            user_address=user_address or previous.get("from") or ZERO_ADDRESS,
            sell_token_decimals=sell_decimals,
            buy_token_decimals=buy_decimals,
        )
        fresh = await self.get_quote(params, chain_id)
        refreshed = enrich_quote(
            fresh,
            sell_decimals=sell_decimals,
            buy_decimals=buy_decimals,
            request_amount=request_amount,
        )
        for key in ("sellTokenSymbol", "buyTokenSymbol", "sellTokenLogoURI", "buyTokenLogoURI"):
            refreshed[key] = previous.get(key)
        return refreshed


__all__ = ["QuoteParams", "SwapGateway", "enrich_quote"]
