from typing import List, Optional

from pydantic import BaseModel, Field


class Token(BaseModel):
    chainId: int = Field(description="EVM chain ID")
    address: str = Field(description="0x-prefixed contract address")
    name: str = Field(description="Full token name")
    symbol: str = Field(description="Ticker symbol")
    decimals: int = Field(ge=0, le=18, description="Token decimal places")
    logoURI: Optional[str] = Field(default=None, description="Logo URL")

    def matches_address(self, address: str) -> bool:
        return self.address.lower() == (address or "").lower()

    def matches_symbol(self, symbol: str) -> bool:
        return self.symbol.upper() == (symbol or "").upper()


class TokenList(BaseModel):
    """Subset of the Uniswap token-list schema served by CoW Swap."""
    name: Optional[str] = None
    tokens: List[dict] = Field(default_factory=list)


class ChainInfo(BaseModel):
    chainId: int
    name: str
    network: str
    icon: Optional[str] = None
    rpcUrl: Optional[str] = None
    wrappedNativeAddress: Optional[str] = None
