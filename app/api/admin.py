from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..services.container import ServiceContainer
from .deps import get_container

router = APIRouter(prefix="/admin")


# No authentication here; restrict access at the deployment layer.
@router.post("/tokens/refresh")
async def refresh_tokens(container: ServiceContainer = Depends(get_container)):
    result = await container.token_lists.refresh_tokens()
    if not result.success:
        return JSONResponse(status_code=500, content=result.model_dump())
    return result.model_dump()
