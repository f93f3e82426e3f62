import pytest

import enigma_duel.config as config_mod


@pytest.fixture(autouse=True)
def forbid_local_dotenv(monkeypatch):
    """Empêche la .env locale de polluer les tests (sinon load_dotenv remet des vars)."""
    monkeypatch.setattr(config_mod, "load_dotenv", lambda *a, **k: False)
