import os

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class ConfigurationError(RuntimeError):
    """Raised when a service cannot be built from the current settings."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def model_post_init(self, __context: Any) -> None:
        """Pick up the legacy ``RPC_URL`` variable for the Sepolia endpoint."""

        super().model_post_init(__context)

        if not os.getenv("RPC_URL_SEPOLIA"):
            fallback = os.getenv("RPC_URL")
            if fallback:
                object.__setattr__(self, "rpc_url_sepolia", fallback)

    # Service identity
    service_name: str = Field(default="alphaswap-agent", description="Service name stamped on every log record")
    service_version: str = Field(default="0.1.0", description="Service version reported by the API and logs")

    # Server Settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=3000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")
    api_prefix: str = Field(default="", description="Path prefix for every router (e.g. /api)")

    # LLM Settings
    gemini_api_key: str = Field(
        default="",
        description="Gemini API key",
        validation_alias=AliasChoices("gemini_api_key", "GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )
    gemini_model: str = Field(default="gemini-2.5-flash", description="Gemini model identifier")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com",
        description="Base URL of the Gemini REST API",
    )
    llm_temperature: Optional[float] = Field(default=None, description="Sampling temperature override")
    llm_max_tokens: Optional[int] = Field(default=None, description="Maximum output tokens override")

    # Chain RPC endpoints
    rpc_url_ethereum: str = Field(default="https://eth.llamarpc.com", description="Ethereum mainnet RPC")
    rpc_url_sepolia: str = Field(
        default="https://eth-sepolia.public.blastapi.io",
        description="Sepolia testnet RPC",
    )
    rpc_url_gnosis: str = Field(default="https://rpc.gnosischain.com", description="Gnosis chain RPC")
    rpc_url_arbitrum: str = Field(default="https://arb1.arbitrum.io/rpc", description="Arbitrum One RPC")
    rpc_url_base: str = Field(default="https://mainnet.base.org", description="Base mainnet RPC")

    # Order book
    cow_api_base_url: str = Field(default="https://api.cow.fi", description="CoW Protocol order book API")

    # Token list
    token_list_url: str = Field(
        default="https://files.cow.fi/tokens/CowSwap.json",
        description="Canonical token list used by the admin refresh",
        validation_alias=AliasChoices("token_list_url", "COW_SWAP_TOKEN_LIST_URL"),
    )
    token_store_path: Path = Field(
        default=BASE_DIR / "data" / "tokens.json",
        description="Location of the flat JSON token store",
    )
    token_store_protocol: str = Field(default="cowSwap", description="Protocol key used inside the token store")

    @property
    def has_gemini_key(self) -> bool:
        return bool(self.gemini_api_key)

    @property
    def rpc_urls(self) -> Dict[int, str]:
        return {
            1: self.rpc_url_ethereum,
            100: self.rpc_url_gnosis,
            8453: self.rpc_url_base,
            42161: self.rpc_url_arbitrum,
            11155111: self.rpc_url_sepolia,
        }

    def rpc_url_for(self, chain_id: int) -> str:
        """Return the RPC endpoint for ``chain_id``, falling back to mainnet."""

        return self.rpc_urls.get(chain_id, self.rpc_url_ethereum)


# Global settings instance
settings = Settings()
