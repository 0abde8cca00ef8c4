"""
Intent parsing: turn the chat history into an assistant message plus a
structured action using the configured LLM.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import structlog

from ...providers.llm import LLMMessage, LLMProvider
from ...services.token_resolution import TokenResolver
from ...types.actions import ActionType
from ...types.requests import ChatMessage, WalletContext
from ..chains import DEFAULT_CHAIN_ID, chain_id_to_network, describe_network
from .action_parser import ParsedCompletion, parse_completion
from .prompts import AGENT_ACKNOWLEDGEMENT, build_system_context

logger = structlog.stdlib.get_logger(__name__)


class IntentParserError(RuntimeError):
    """The model could not be reached or did not answer."""


class IntentParser:
    def __init__(
        self,
        llm: LLMProvider,
        resolver: TokenResolver,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> None:
        self.llm = llm
        self.resolver = resolver
        self.temperature = temperature
        self.max_tokens = max_tokens

    def token_summary(self, chain_id: int) -> str:
        tokens = self.resolver.get_tokens(chain_id)
        return ", ".join(f"{token.symbol} ({token.name})" for token in tokens)

    def system_context(self, wallet: Optional[WalletContext]) -> str:
        current_network = wallet.currentNetwork if wallet else None
        chain_id = current_network or DEFAULT_CHAIN_ID
        return build_system_context(
            wallet_address=wallet.currentAddress if wallet else None,
            network_name=describe_network(current_network),
            chain_id=current_network,
            token_summary=self.token_summary(chain_id),
        )

    def build_prompt(
        self,
        history: Sequence[ChatMessage],
        wallet: Optional[WalletContext] = None,
    ) -> List[LLMMessage]:
        """Priming exchange, prior turns, then the latest message as the live turn."""

        prompt = [
            LLMMessage(role="user", content=self.system_context(wallet)),
            LLMMessage(role="assistant", content=AGENT_ACKNOWLEDGEMENT),
        ]
        *earlier, latest = history
        prompt.extend(LLMMessage(role=msg.role, content=msg.content) for msg in earlier)
        prompt.append(LLMMessage(role="user", content=latest.content))
        return prompt

    async def process_message(
        self,
        history: Sequence[ChatMessage],
        wallet: Optional[WalletContext] = None,
    ) -> ParsedCompletion:
        if not history:
            raise IntentParserError("Failed to process message: no messages supplied")

        try:
            prompt = self.build_prompt(history, wallet)
            response = await self.llm.generate_response(
                prompt,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except Exception as exc:
            logger.error("intent_llm_failed", error=str(exc))
            raise IntentParserError(f"Failed to process message: {exc}") from exc

        parsed = parse_completion(response.content)
        action = parsed.action
        if action.type != ActionType.NO_ACTION and not action.network:
            action.network = chain_id_to_network(wallet.currentNetwork if wallet else None)

        logger.info(
            "intent_parsed",
            action_type=action.type.value,
            network=action.network,
            tokens_used=response.tokens_used,
        )
        return parsed


__all__ = ["IntentParser", "IntentParserError"]
