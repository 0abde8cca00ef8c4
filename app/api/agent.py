import time
from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..core.agent import IntentParserError, validate_action
from ..services.container import ServiceContainer
from ..types.requests import AgentMessageRequest
from .deps import get_container

router = APIRouter(prefix="/agent")
logger = structlog.stdlib.get_logger("app.api.agent")

UNEXPECTED_ERROR_REPLY = "I apologize, but I encountered an unexpected error. Please try again."
MESSAGES_REQUIRED = "Messages array is required"


def _body_error(exc: ValidationError) -> str:
    if any(error["loc"] and error["loc"][0] == "messages" for error in exc.errors()):
        return MESSAGES_REQUIRED
    return "Invalid request body"


def _conversation_id(requested: str | None) -> str:
    return requested or f"conv_{int(time.time() * 1000)}"


@router.post("/message")
async def agent_message(
    payload: Any = Body(default=None),
    container: ServiceContainer = Depends(get_container),
):
    try:
        parser = container.require_intent_parser()

        try:
            request = AgentMessageRequest.model_validate(payload or {})
        except ValidationError as exc:
            return JSONResponse(status_code=400, content={"error": _body_error(exc)})
        if not request.messages:
            return JSONResponse(status_code=400, content={"error": MESSAGES_REQUIRED})

        parsed = await parser.process_message(request.messages, request.walletContext)

        validation = validate_action(parsed.action)
        if not validation.valid:
            logger.info("action_invalid", action_type=parsed.action.type.value, error=validation.error)
            return JSONResponse(
                status_code=400,
                content={
                    "error": f"Invalid action: {validation.error}",
                    "assistantMessage": (
                        f"I apologize, but I encountered an error: {validation.error}. "
                        "Please try rephrasing your request."
                    ),
                },
            )

        response = await container.dispatcher.dispatch(
            parsed.action,
            parsed.message,
            _conversation_id(request.conversationId),
            request.walletContext,
        )
        return response.to_payload()
    except IntentParserError as exc:
        logger.error("agent_message_failed", error=str(exc))
        return JSONResponse(status_code=500, content={"error": str(exc), "assistantMessage": UNEXPECTED_ERROR_REPLY})
    except Exception as exc:
        logger.exception("agent_message_unexpected_error")
        return JSONResponse(status_code=500, content={"error": str(exc), "assistantMessage": UNEXPECTED_ERROR_REPLY})
