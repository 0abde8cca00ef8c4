"""Rebuild the token store from the canonical CoW Swap token list."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from ..core.chains import MAINNET_CHAIN_ID, SEPOLIA_CHAIN_ID
from ..providers.token_list import NATIVE_ETH_TOKEN, SEPOLIA_TEST_TOKENS, TokenListProvider
from ..types.responses import RefreshResult
from ..types.tokens import Token
from .token_store import TokenStore

logger = logging.getLogger(__name__)


class TokenListService:
    def __init__(self, provider: TokenListProvider, store: TokenStore, protocol: str = "cowSwap") -> None:
        self.provider = provider
        self.store = store
        self.protocol = protocol

    @staticmethod
    def group_by_chain(entries: List[Dict[str, Any]]) -> Dict[int, List[Token]]:
        grouped: Dict[int, List[Token]] = {}
        for entry in entries:
            try:
                token = Token.model_validate(entry)
            except ValidationError as exc:
                logger.warning("Skipping token list entry %s: %s", entry.get("symbol"), exc)
                continue
            grouped.setdefault(token.chainId, []).append(token)

        mainnet = grouped.get(MAINNET_CHAIN_ID)
        if mainnet and not any(token.symbol == "ETH" for token in mainnet):
            mainnet.insert(0, Token(chainId=MAINNET_CHAIN_ID, **NATIVE_ETH_TOKEN))

        if not grouped.get(SEPOLIA_CHAIN_ID):
            logger.info("Token list has no Sepolia entries, using built-in test tokens")
            grouped[SEPOLIA_CHAIN_ID] = [Token.model_validate(entry) for entry in SEPOLIA_TEST_TOKENS]
        return grouped

    async def refresh_tokens(self) -> RefreshResult:
        logger.info("Fetching token list from %s", self.provider.url)
        try:
            entries = await self.provider.fetch()
            grouped = self.group_by_chain(entries)
            for chain_id, tokens in grouped.items():
                self.store.update_tokens(self.protocol, chain_id, tokens)
                logger.info("Stored %d tokens for chain %s", len(tokens), chain_id)
        except Exception as exc:
            logger.error("Token refresh failed: %s", exc)
            return RefreshResult(success=False, message=f"Error refreshing tokens: {exc}")
        return RefreshResult(success=True, message="Tokens refreshed successfully")


__all__ = ["TokenListService"]
