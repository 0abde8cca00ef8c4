from typing import List

from fastapi import APIRouter, Depends

from ..core.chains import CHAIN_METADATA
from ..services.container import ServiceContainer
from ..types.tokens import ChainInfo
from .deps import get_container

router = APIRouter(prefix="/chains")


@router.get("")
async def list_chains(container: ServiceContainer = Depends(get_container)) -> List[ChainInfo]:
    return [
        ChainInfo(
            chainId=chain_id,
            name=meta["name"],
            network=meta["network"],
            icon=meta["icon"],
            rpcUrl=container.settings.rpc_url_for(chain_id),
            wrappedNativeAddress=meta["wrapped_native"],
        )
        for chain_id, meta in CHAIN_METADATA.items()
    ]
