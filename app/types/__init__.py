from .actions import ActionType, AgentAction
from .requests import (
    AgentMessageRequest,
    ChatMessage,
    QuoteRefreshRequest,
    SwapQuoteRequest,
    WalletContext,
)
from .responses import AgentResponse, RefreshResult
from .tokens import ChainInfo, Token, TokenList

__all__ = [
    "ActionType",
    "AgentAction",
    "AgentMessageRequest",
    "ChatMessage",
    "QuoteRefreshRequest",
    "SwapQuoteRequest",
    "WalletContext",
    "AgentResponse",
    "RefreshResult",
    "ChainInfo",
    "Token",
    "TokenList",
]
