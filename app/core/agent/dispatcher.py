"""
Turn a validated agent action into the chat response.

Each action tag has its own handler. Handlers never raise: failures from the
order book or the RPC node become part of the assistant message.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Dict, Optional

import structlog

from ...services.balances import BalanceChecker
from ...services.swap import DEFAULT_DECIMALS, QuoteParams, SwapGateway, enrich_quote
from ...services.token_resolution import TokenResolver, is_valid_address
from ...types.actions import ActionType, AgentAction
from ...types.requests import WalletContext
from ...types.responses import AgentResponse
from ..chains import ZERO_ADDRESS, is_native_asset, is_wrapped_native, network_to_chain_id

logger = structlog.stdlib.get_logger(__name__)

QUOTE_READY_SUFFIX = '\n\nQuote received! Review the details below and click "Accept Quote" to proceed.'
INVALID_TOKENS_MESSAGE = (
    "One or both token addresses are invalid. Please provide valid ERC‑20 contract "
    "addresses or supported symbols."
)
CONNECT_FOR_ORDER_MESSAGE = "Please connect your wallet first to submit an order."
CONNECT_FOR_BALANCE_MESSAGE = "Please connect your wallet first to check your balance."
NO_TOKENS_MESSAGE = "Please specify which token(s) you want to check."

Handler = Callable[[AgentAction, AgentResponse, Optional[WalletContext]], Awaitable[None]]


def _wallet_address(wallet: Optional[WalletContext]) -> Optional[str]:
    return wallet.currentAddress if wallet and wallet.currentAddress else None


class ActionDispatcher:
    """Resolves one action per chat turn; holds no per-conversation state."""

    def __init__(
        self,
        resolver: TokenResolver,
        gateway: SwapGateway,
        balances: BalanceChecker,
    ) -> None:
        self.resolver = resolver
        self.gateway = gateway
        self.balances = balances
        self._handlers: Dict[ActionType, Handler] = {
            ActionType.REQUEST_WALLET_CONNECT: self._require_client_step,
            ActionType.REQUEST_ALLOWANCE: self._require_client_step,
            ActionType.GET_QUOTE: self._get_quote,
            ActionType.SUBMIT_ORDER: self._submit_order,
            ActionType.CHECK_BALANCE: self._check_balance,
            ActionType.WRAP: self._pass_through,
        }

    async def dispatch(
        self,
        action: AgentAction,
        message: str,
        conversation_id: str,
        wallet: Optional[WalletContext] = None,
    ) -> AgentResponse:
        response = AgentResponse(assistantMessage=message, conversationId=conversation_id)
        handler = self._handlers.get(action.type)
        if handler is not None:
            await handler(action, response, wallet)

        logger.info(
            "action_dispatched",
            action_type=action.type.value,
            required_action=response.requiredAction.value if response.requiredAction else None,
            has_quote=response.quote is not None,
        )
        return response

    async def _require_client_step(
        self, action: AgentAction, response: AgentResponse, wallet: Optional[WalletContext]
    ) -> None:
        response.requiredAction = action.type

    async def _pass_through(
        self, action: AgentAction, response: AgentResponse, wallet: Optional[WalletContext]
    ) -> None:
        response.action = action.to_payload()

    async def _get_quote(
        self, action: AgentAction, response: AgentResponse, wallet: Optional[WalletContext]
    ) -> None:
        network = action.network or "ethereum"
        chain_id = network_to_chain_id(network)
        try:
            sell_address = self.resolver.resolve_token_address(action.sellToken, network)
            buy_address = self.resolver.resolve_token_address(action.buyToken, network)
            if not is_valid_address(sell_address) or not is_valid_address(buy_address):
                response.assistantMessage = INVALID_TOKENS_MESSAGE
                return

            wrap_type = self._wrap_direction(sell_address, buy_address, network)
            if wrap_type:
                label = "Wrap" if wrap_type == "wrap" else "Unwrap"
                response.assistantMessage = (
                    f"I'll help you {wrap_type} {action.amount} {action.sellToken} to {action.buyToken}. "
                    f'This is a 1:1 conversion. Click the "{label}" button below to proceed.'
                )
                response.action = {
                    "type": ActionType.WRAP.value,
                    "wrapType": wrap_type,
                    "wrapAmount": action.amount,
                    "sellToken": action.sellToken,
                    "buyToken": action.buyToken,
                    "network": network,
                }
                return

            sell_info = self.resolver.find_token(sell_address, chain_id)
            buy_info = self.resolver.find_token(buy_address, chain_id)
            sell_decimals = sell_info.decimals if sell_info else DEFAULT_DECIMALS
            buy_decimals = buy_info.decimals if buy_info else DEFAULT_DECIMALS

            params = QuoteParams(
                sell_token=sell_address,
                buy_token=buy_address,
                amount=action.amount,
                kind="sell" if action.amountType == "sell" else "buy",
                user_address=_wallet_address(wallet) or ZERO_ADDRESS,
                sell_token_decimals=sell_decimals,
                buy_token_decimals=buy_decimals,
            )
            raw_quote = await self.gateway.get_quote(params, chain_id)
            response.quote = enrich_quote(
                raw_quote,
                sell_decimals=sell_decimals,
                buy_decimals=buy_decimals,
                request_amount=action.amount,
                sell_token=sell_info,
                buy_token=buy_info,
                formatted_sell_amount=action.amount,
            )
            response.assistantMessage = response.assistantMessage + QUOTE_READY_SUFFIX
        except Exception as exc:
            logger.warning("quote_failed", error=str(exc), network=network)
            response.assistantMessage = (
                f"I encountered an error while fetching the quote: {exc}. "
                "Please check your parameters and try again."
            )

    @staticmethod
    def _wrap_direction(sell_address: str, buy_address: str, network: str) -> Optional[str]:
        if is_native_asset(sell_address) and is_wrapped_native(buy_address, network):
            return "wrap"
        if is_wrapped_native(sell_address, network) and is_native_asset(buy_address):
            return "unwrap"
        return None

    async def _submit_order(
        self, action: AgentAction, response: AgentResponse, wallet: Optional[WalletContext]
    ) -> None:
        if not _wallet_address(wallet):
            response.assistantMessage = CONNECT_FOR_ORDER_MESSAGE
            response.requiredAction = ActionType.REQUEST_WALLET_CONNECT
            return
        # The client holds the quote and signs it; it posts to /swap/orders
        response.requiredAction = ActionType.SUBMIT_ORDER

    async def _check_balance(
        self, action: AgentAction, response: AgentResponse, wallet: Optional[WalletContext]
    ) -> None:
        owner = _wallet_address(wallet)
        if not owner:
            response.assistantMessage = CONNECT_FOR_BALANCE_MESSAGE
            response.requiredAction = ActionType.REQUEST_WALLET_CONNECT
            return

        try:
            tokens = action.balance_tokens()
            if not tokens:
                response.assistantMessage = NO_TOKENS_MESSAGE
                return

            network = action.network or "ethereum"
            lines = [await self._balance_line(owner, token, network) for token in tokens]

            if len(tokens) == 1:
                single = lines[0].replace("• **", "", 1).replace("**:", ":", 1)
                response.assistantMessage = f"{response.assistantMessage}\n\nYour {single}"
            else:
                response.assistantMessage = f"{response.assistantMessage}\n\n" + "\n".join(lines)
        except Exception as exc:
            logger.warning("balance_check_failed", error=str(exc))
            response.assistantMessage = (
                f"I encountered an error while checking the balance: {exc}. Please try again."
            )

    async def _balance_line(self, owner: str, token: str, network: str) -> str:
        chain_id = network_to_chain_id(network)
        try:
            if token.upper() == "ETH" or is_native_asset(token):
                balance = await self.balances.native_balance(owner, chain_id)
            else:
                address = self.resolver.resolve_token_address(token, network)
                if not is_valid_address(address):
                    return f"• **{token}**: Token not found on {network}"
                balance = await self.balances.erc20_balance(owner, address, chain_id)
        except Exception as exc:
            logger.warning("token_balance_failed", token=token, network=network, error=str(exc))
            return f"• **{token}**: Error fetching balance"
        return f"• **{balance.symbol}**: {balance.formatted} {balance.symbol}"


__all__ = ["ActionDispatcher"]
