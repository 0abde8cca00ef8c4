import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from ..core.chains import DEFAULT_CHAIN_ID
from ..services.container import ServiceContainer
from ..services.swap import DEFAULT_DECIMALS, QuoteParams
from ..types.requests import QuoteRefreshRequest, SwapQuoteRequest
from .deps import get_container

router = APIRouter(prefix="/swap")
logger = logging.getLogger(__name__)


def _decimals(value: int | None) -> int:
    return DEFAULT_DECIMALS if value is None else value


@router.post("/quote")
async def post_swap_quote(
    request: SwapQuoteRequest,
    container: ServiceContainer = Depends(get_container),
):
    if request.missing_fields():
        return JSONResponse(status_code=400, content={"error": "Missing required fields"})

    params = QuoteParams(
        sell_token=request.sellToken,
        buy_token=request.buyToken,
        amount=request.amount,
        kind=request.kind,
        user_address=request.userAddress,
        sell_token_decimals=_decimals(request.sellTokenDecimals),
        buy_token_decimals=_decimals(request.buyTokenDecimals),
    )
    try:
        return await container.gateway.get_quote(params, request.chainId)
    except Exception as exc:
        logger.error("Quote failed on chain %s: %s", request.chainId, exc)
        return JSONResponse(status_code=500, content={"error": str(exc) or "Failed to get quote"})


@router.post("/quote/refresh")
async def post_quote_refresh(
    request: QuoteRefreshRequest,
    container: ServiceContainer = Depends(get_container),
):
    try:
        return await container.gateway.refresh_quote(request.quote, request.chainId, request.userAddress)
    except Exception as exc:
        logger.error("Quote refresh failed on chain %s: %s", request.chainId, exc)
        return JSONResponse(status_code=500, content={"error": str(exc) or "Failed to refresh quote"})


@router.post("/orders")
async def post_order(
    payload: Dict[str, Any] = Body(...),
    container: ServiceContainer = Depends(get_container),
):
    chain_id = payload.get("chainId") or DEFAULT_CHAIN_ID
    try:
        order_id = await container.gateway.submit_order(payload, int(chain_id))
    except Exception as exc:
        logger.error("Order submission failed on chain %s: %s", chain_id, exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})
    logger.info("Order %s submitted on chain %s", order_id, chain_id)
    return {"orderId": order_id}


@router.get("/orders/{order_uid}")
async def get_order_status(
    order_uid: str,
    chain_id: int = Query(default=DEFAULT_CHAIN_ID, alias="chainId"),
    container: ServiceContainer = Depends(get_container),
):
    try:
        return await container.gateway.get_order_status(order_uid, chain_id)
    except Exception as exc:
        logger.error("Order status lookup for %s failed: %s", order_uid, exc)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch order status"})
