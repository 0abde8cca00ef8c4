import httpx
from typing import Any, List, Optional


class RpcError(Exception):
    """JSON-RPC call failed or returned an error object"""
    pass


class JsonRpcProvider:
    """Minimal read-only JSON-RPC client for an EVM node"""

    name = "rpc"

    def __init__(self, url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self._transport = transport
        self._next_id = 1

    async def call(self, method: str, params: List[Any]) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": self._next_id,
        }
        self._next_id += 1

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self.url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            raise RpcError(f"{method} request failed: {exc}") from exc

        if "error" in data:
            raise RpcError(f"{method} error: {data['error']}")
        return data.get("result")

    async def get_balance(self, address: str) -> int:
        """Native balance in wei"""
        result = await self.call("eth_getBalance", [address, "latest"])
        return int(result, 16)

    async def eth_call(self, to: str, data: str) -> str:
        """Execute a read-only contract call and return the raw hex result"""
        result = await self.call("eth_call", [{"to": to, "data": data}, "latest"])
        if not isinstance(result, str):
            raise RpcError(f"eth_call to {to} returned no data")
        return result
