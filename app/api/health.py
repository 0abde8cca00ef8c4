from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..core.chains import MAINNET_CHAIN_ID, SEPOLIA_CHAIN_ID
from ..services.container import ServiceContainer
from .deps import get_container

router = APIRouter()


@router.get("/health", response_class=PlainTextResponse)
async def health() -> str:
    return "OK"


@router.get("/healthz")
async def health_check(container: ServiceContainer = Depends(get_container)) -> Dict[str, Any]:
    """Report token store contents and whether the chat agent is configured"""

    token_counts = {
        str(chain_id): len(container.resolver.get_tokens(chain_id))
        for chain_id in (MAINNET_CHAIN_ID, SEPOLIA_CHAIN_ID)
    }
    llm_configured = container.intent_parser is not None
    tokens_loaded = any(token_counts.values())

    return {
        "status": "healthy" if llm_configured and tokens_loaded else "degraded",
        "llm": {
            "provider": "gemini",
            "model": container.settings.gemini_model,
            "configured": llm_configured,
        },
        "token_store": {
            "path": str(container.store.path),
            "tokens": token_counts,
        },
    }
