"""Async client for the CoW Protocol order book API."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..config import settings
from ..core.chains import CHAIN_METADATA


class OrderBookError(Exception):
    """Raised when the order book rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CowOrderBookProvider:
    """Thin wrapper around https://api.cow.fi/{network}/api/v1 endpoints."""

    def __init__(
        self,
        chain_id: int,
        *,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        meta = CHAIN_METADATA.get(chain_id)
        if not meta:
            raise ValueError(f"Unsupported chain ID for the CoW order book: {chain_id}")
        root = (base_url or settings.cow_api_base_url).rstrip("/")
        self.chain_id = chain_id
        self.base_url = f"{root}/{meta['order_book_slug']}/api/v1"
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "accept": "application/json",
            "content-type": "application/json",
        }

    @staticmethod
    def _describe(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict):
            error_type = body.get("errorType")
            description = body.get("description")
            if error_type and description:
                return f"{error_type}: {description}"
            return str(description or error_type or body)
        return str(body)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(base_url=self.base_url, transport=self._transport) as client:
                response = await client.request(method, path, json=json, headers=self._headers())
                response.raise_for_status()
                return response
        except httpx.HTTPStatusError as exc:
            raise OrderBookError(
                f"Order book error ({exc.response.status_code}): {self._describe(exc.response)}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise OrderBookError(f"Could not reach the order book: {exc}") from exc

    async def get_quote(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """Request a price quote. ``request`` follows the order book's OrderQuoteRequest schema."""

        resp = await self._request("POST", "/quote", json=request)
        return resp.json()

    async def send_order(self, order: Dict[str, Any]) -> str:
        """Submit a signed order and return its UID."""

        resp = await self._request("POST", "/orders", json=order)
        return str(resp.json())

    async def get_order(self, order_uid: str) -> Dict[str, Any]:
        resp = await self._request("GET", f"/orders/{order_uid}")
        return resp.json()


__all__ = ["CowOrderBookProvider", "OrderBookError"]
