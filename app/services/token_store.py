"""Flat JSON token store keyed by protocol and chain ID."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError

from ..types.tokens import Token

logger = logging.getLogger(__name__)

# {protocol: {str(chain_id): [token, ...]}}
TokenStoreData = Dict[str, Dict[str, List[Dict[str, Any]]]]


class TokenStore:
    """Read/write access to the on-disk token cache.

    Every read goes back to disk: no parsed copy is kept between calls, so an
    admin refresh is visible to the next request without coordination. Writes
    are unsynchronized read-modify-write; concurrent refreshes resolve as
    last-writer-wins.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> TokenStoreData:
        if not self.path.exists():
            logger.warning("Token store not found at %s, using an empty store", self.path)
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Failed to load token store %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.error("Token store %s does not hold a JSON object", self.path)
            return {}
        return data

    def save(self, data: TokenStoreData) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)

    def get_tokens(self, protocol: str, chain_id: int) -> List[Token]:
        entries = self.load().get(protocol, {}).get(str(chain_id), [])
        tokens: List[Token] = []
        for entry in entries:
            try:
                tokens.append(Token.model_validate(entry))
            except ValidationError as exc:
                logger.warning("Skipping malformed token entry on chain %s: %s", chain_id, exc)
        return tokens

    def update_tokens(self, protocol: str, chain_id: int, tokens: List[Token]) -> None:
        data = self.load()
        data.setdefault(protocol, {})[str(chain_id)] = [
            token.model_dump(exclude_none=True) for token in tokens
        ]
        self.save(data)


__all__ = ["TokenStore", "TokenStoreData"]
