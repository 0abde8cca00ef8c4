import json
from pathlib import Path

import pytest

from app.services.token_resolution import TokenResolver
from app.services.token_store import TokenStore

from .helpers import SAMPLE_TOKENS


@pytest.fixture
def token_file(tmp_path: Path) -> Path:
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps(SAMPLE_TOKENS), encoding="utf-8")
    return path


@pytest.fixture
def store(token_file: Path) -> TokenStore:
    return TokenStore(token_file)


@pytest.fixture
def resolver(store: TokenStore) -> TokenResolver:
    return TokenResolver(store)
