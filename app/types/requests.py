from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"] = Field(description="Message role: user or assistant")
    content: str = Field(description="Message content")
    metadata: Optional[Any] = Field(default=None, description="Opaque client-side metadata (quotes, balances)")


class WalletContext(BaseModel):
    currentAddress: Optional[str] = Field(default=None, description="Connected wallet address")
    currentNetwork: Optional[int] = Field(default=None, description="Chain ID the wallet is connected to")

    @property
    def is_connected(self) -> bool:
        return bool(self.currentAddress)


class AgentMessageRequest(BaseModel):
    conversationId: Optional[str] = Field(default=None, description="Conversation identifier echoed back to the client")
    messages: Optional[List[ChatMessage]] = Field(default=None, description="Full chat history, oldest first")
    walletContext: Optional[WalletContext] = Field(default=None, description="Wallet state at request time")


class SwapQuoteRequest(BaseModel):
    sellToken: Optional[str] = Field(default=None, description="Sell token address")
    buyToken: Optional[str] = Field(default=None, description="Buy token address")
    amount: Optional[str] = Field(default=None, description="Human decimal amount")
    kind: Optional[Literal["sell", "buy"]] = Field(default=None, description="Which side the amount refers to")
    sellTokenDecimals: Optional[int] = Field(default=None, ge=0, le=18)
    buyTokenDecimals: Optional[int] = Field(default=None, ge=0, le=18)
    userAddress: Optional[str] = Field(default=None, description="Address the order would be placed from")
    chainId: Optional[int] = Field(default=None, description="Chain to quote on")

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_as_string(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def missing_fields(self) -> List[str]:
        required = ("sellToken", "buyToken", "amount", "kind", "userAddress", "chainId")
        return [name for name in required if not getattr(self, name)]


class QuoteRefreshRequest(BaseModel):
    quote: Dict[str, Any] = Field(description="Previously enriched quote to refresh")
    chainId: int = Field(default=1, description="Chain the quote was obtained on")
    userAddress: Optional[str] = Field(default=None, description="Override for the quoting address")
