"""
Native and ERC-20 balance reads over JSON-RPC.

Calldata is built by hand: a 4-byte selector followed by 32-byte words.
Return data is decoded for the three shapes we read: ``uint256``, ABI
``string`` and legacy ``bytes32`` symbols.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from eth_utils import keccak

from ..config import settings
from ..providers.rpc import JsonRpcProvider, RpcError
from .units import format_units


def _strip_0x(value: str) -> str:
    return value[2:] if value.startswith("0x") else value


def _selector(signature: str) -> str:
    return f"0x{keccak(text=signature)[:4].hex()}"


def _encode_address(address: str) -> str:
    addr = _strip_0x(address).lower()
    if len(addr) != 40:
        raise ValueError(f"Invalid address length: {address}")
    return addr.rjust(64, "0")


BALANCE_OF_SELECTOR = _selector("balanceOf(address)")
DECIMALS_SELECTOR = _selector("decimals()")
SYMBOL_SELECTOR = _selector("symbol()")


def decode_uint(result: str) -> int:
    data = _strip_0x(result)
    if not data:
        raise RpcError("Empty return data (is this a token contract?)")
    return int(data[:64], 16)


def decode_string(result: str) -> str:
    data = bytes.fromhex(_strip_0x(result))
    if not data:
        raise RpcError("Empty return data (is this a token contract?)")
    if len(data) == 32:
        return data.rstrip(b"\x00").decode("utf-8", errors="replace")
    offset = int.from_bytes(data[0:32], "big")
    length = int.from_bytes(data[offset:offset + 32], "big")
    raw = data[offset + 32:offset + 32 + length]
    return raw.decode("utf-8", errors="replace")


@dataclass
class TokenBalance:
    symbol: str
    decimals: int
    raw: int

    @property
    def formatted(self) -> str:
        return format_units(self.raw, self.decimals)


class BalanceChecker:
    """Reads balances for a wallet on a given chain."""

    def __init__(self, rpc_factory: Optional[Callable[[int], JsonRpcProvider]] = None) -> None:
        self._rpc_factory = rpc_factory or (lambda chain_id: JsonRpcProvider(settings.rpc_url_for(chain_id)))

    def rpc_for(self, chain_id: int) -> JsonRpcProvider:
        return self._rpc_factory(chain_id)

    async def native_balance(self, owner: str, chain_id: int, symbol: str = "ETH") -> TokenBalance:
        raw = await self.rpc_for(chain_id).get_balance(owner)
        return TokenBalance(symbol=symbol, decimals=18, raw=raw)

    async def erc20_balance(self, owner: str, token_address: str, chain_id: int) -> TokenBalance:
        rpc = self.rpc_for(chain_id)
        raw = decode_uint(await rpc.eth_call(token_address, BALANCE_OF_SELECTOR + _encode_address(owner)))
        decimals = decode_uint(await rpc.eth_call(token_address, DECIMALS_SELECTOR))
        symbol = decode_string(await rpc.eth_call(token_address, SYMBOL_SELECTOR))
        return TokenBalance(symbol=symbol, decimals=decimals, raw=raw)


__all__ = [
    "BALANCE_OF_SELECTOR",
    "DECIMALS_SELECTOR",
    "SYMBOL_SELECTOR",
    "BalanceChecker",
    "TokenBalance",
    "decode_string",
    "decode_uint",
]
