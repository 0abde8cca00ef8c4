from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ActionType(str, Enum):
    """Actions the chat agent can ask the backend or the client to perform"""
    NO_ACTION = "NO_ACTION"
    REQUEST_WALLET_CONNECT = "REQUEST_WALLET_CONNECT"
    GET_QUOTE = "GET_QUOTE"
    SUBMIT_ORDER = "SUBMIT_ORDER"
    REQUEST_ALLOWANCE = "REQUEST_ALLOWANCE"
    CHECK_BALANCE = "CHECK_BALANCE"
    WRAP = "WRAP"


class AgentAction(BaseModel):
    """Structured action emitted by the model after the ``ACTION:`` marker.

    The ``type`` tag selects the variant; which payload fields a variant needs
    is declared in ``app.core.agent.validator.REQUIRED_FIELDS``. Fields are
    kept loosely typed so malformed values reach the validator instead of
    failing the parse.
    """

    model_config = ConfigDict(extra="ignore", use_enum_values=False)

    type: ActionType = Field(description="Action tag")
    network: Optional[str] = Field(default=None, description="ethereum or sepolia")
    sellToken: Optional[str] = Field(default=None, description="Symbol or address being sold")
    buyToken: Optional[str] = Field(default=None, description="Symbol or address being bought")
    amountType: Optional[str] = Field(default=None, description="sell or buy")
    amount: Optional[str] = Field(default=None, description="Human decimal amount")
    quoteId: Optional[str] = Field(default=None, description="Quote identifier for order submission")
    token: Optional[str] = Field(default=None, description="Single token for balance checks")
    tokens: Optional[List[str]] = Field(default=None, description="Several tokens for balance checks")
    wrapType: Optional[str] = Field(default=None, description="wrap or unwrap")
    wrapAmount: Optional[str] = Field(default=None, description="Amount to wrap or unwrap")

    @field_validator("amount", "wrapAmount", "quoteId", "token", mode="before")
    @classmethod
    def _stringify_scalars(cls, value: Any) -> Any:
        # Models occasionally emit numbers where strings are expected
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("tokens", mode="before")
    @classmethod
    def _stringify_tokens(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [str(item) for item in value]
        return value

    def balance_tokens(self) -> List[str]:
        """Tokens for a balance check; ``tokens`` wins over ``token``."""

        if self.tokens:
            return list(self.tokens)
        if self.token:
            return [self.token]
        return []

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

