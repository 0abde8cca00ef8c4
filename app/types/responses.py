from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .actions import ActionType


class AgentResponse(BaseModel):
    assistantMessage: str = Field(description="Chat reply shown to the user")
    conversationId: str = Field(description="Conversation identifier")
    quote: Optional[Dict[str, Any]] = Field(default=None, description="Enriched order-book quote")
    orderId: Optional[str] = Field(default=None, description="Submitted order UID")
    requiredAction: Optional[ActionType] = Field(default=None, description="Client-side step the user must take next")
    action: Optional[Dict[str, Any]] = Field(default=None, description="Action the client should execute (e.g. WRAP)")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class RefreshResult(BaseModel):
    success: bool
    message: str
