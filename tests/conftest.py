import os

import pytest

# vor dem Import der App setzen: kein echter LLM-Call, keine lokale DB-Datei
os.environ.setdefault("LLM_PROVIDER", "fake")
os.environ.setdefault("DATABASE_URL", "sqlite://")


@pytest.fixture(autouse=True)
def _no_api_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
