"""Services shared by the HTTP routes, built once per application."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import ConfigurationError, Settings
from ..core.agent import ActionDispatcher, IntentParser
from ..providers.cow import CowOrderBookProvider
from ..providers.llm import LLMProvider, LLMProviderFactory
from ..providers.rpc import JsonRpcProvider
from ..providers.token_list import TokenListProvider
from .balances import BalanceChecker
from .swap import SwapGateway
from .token_refresh import TokenListService
from .token_resolution import TokenResolver
from .token_store import TokenStore

logger = logging.getLogger(__name__)

MISSING_GEMINI_KEY = (
    "GEMINI_API_KEY is not configured. Please add it to your .env file "
    "or environment before using the chat agent."
)


@dataclass
class ServiceContainer:
    settings: Settings
    store: TokenStore
    resolver: TokenResolver
    gateway: SwapGateway
    balances: BalanceChecker
    dispatcher: ActionDispatcher
    token_lists: TokenListService
    intent_parser: Optional[IntentParser] = None

    def require_intent_parser(self) -> IntentParser:
        if self.intent_parser is None:
            raise ConfigurationError(MISSING_GEMINI_KEY)
        return self.intent_parser

    async def aclose(self) -> None:
        if self.intent_parser is not None:
            await self.intent_parser.llm.close()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        llm: Optional[LLMProvider] = None,
    ) -> "ServiceContainer":
        store = TokenStore(settings.token_store_path)
        resolver = TokenResolver(store, protocol=settings.token_store_protocol)
        gateway = SwapGateway(
            lambda chain_id: CowOrderBookProvider(chain_id, base_url=settings.cow_api_base_url)
        )
        balances = BalanceChecker(lambda chain_id: JsonRpcProvider(settings.rpc_url_for(chain_id)))
        token_lists = TokenListService(
            TokenListProvider(settings.token_list_url),
            store,
            protocol=settings.token_store_protocol,
        )

        if llm is None and settings.has_gemini_key:
            llm = LLMProviderFactory.create_provider(
                "gemini",
                api_key=settings.gemini_api_key,
                model=settings.gemini_model,
                base_url=settings.gemini_base_url,
            )
        if llm is None:
            logger.warning("Gemini API key missing; /agent/message will answer 500")

        intent_parser = None
        if llm is not None:
            intent_parser = IntentParser(
                llm,
                resolver,
                temperature=settings.llm_temperature,
                max_tokens=settings.llm_max_tokens,
            )

        return cls(
            settings=settings,
            store=store,
            resolver=resolver,
            gateway=gateway,
            balances=balances,
            dispatcher=ActionDispatcher(resolver, gateway, balances),
            token_lists=token_lists,
            intent_parser=intent_parser,
        )


__all__ = ["MISSING_GEMINI_KEY", "ServiceContainer"]
