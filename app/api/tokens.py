from typing import List

from fastapi import APIRouter, Depends, Query

from ..core.chains import DEFAULT_CHAIN_ID
from ..services.container import ServiceContainer
from ..types.tokens import Token
from .deps import get_container

router = APIRouter(prefix="/tokens")


@router.get("")
async def list_tokens(
    chain_id: int = Query(default=DEFAULT_CHAIN_ID, alias="chainId"),
    container: ServiceContainer = Depends(get_container),
) -> List[Token]:
    """Tokens tradable on ``chainId`` as currently stored."""

    return container.resolver.get_tokens(chain_id)
