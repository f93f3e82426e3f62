"""Module de configuration du client Enigma Duel, chargé de lire les variables d'environnement nécessaires.

Comme la clé privée de signature, l'URL du noeud RPC, le chain id, et les délais de confirmation.
"""

import os
from dataclasses import dataclass, field
from typing import Final

from dotenv import load_dotenv

from enigma_duel import defaults
from enigma_duel.exceptions.config import InvalidEnvVar, MissingEnvVar


def env_int_optional(name: str) -> int | None:
    """Récupère une variable d'environnement optionnelle, tente de la convertir en int, et retourne None si elle n'est pas définie."""
    value = os.getenv(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise InvalidEnvVar(name, "un entier") from e


def env_float_optional(name: str) -> float | None:
    """Récupère une variable d'environnement optionnelle, tente de la convertir en float, et retourne None si elle n'est pas définie."""
    value = os.getenv(name)
    if not value:
        return None
    try:
        result = float(value)
    except ValueError as e:
        raise InvalidEnvVar(name, "un nombre") from e
    if result <= 0:
        raise InvalidEnvVar(name, "un nombre strictement positif")
    return result


def env_str_optional(name: str) -> str | None:
    """Récupère une variable d'environnement optionnelle et retourne None si elle n'est pas définie ou est vide."""
    value = os.getenv(name)
    return value if value else None


PRIV_KEY_VAR: Final[str] = "PRIV_KEY"


@dataclass(frozen=True, slots=True)
class Settings:
    """Configuration d'une session client, figée une fois chargée."""

    rpc_url: str
    chain_id: int
    addresses_path: str
    rpc_timeout: float
    tx_timeout: float
    tx_poll_interval: float
    private_key: str | None = field(default=None, repr=False)

    @property
    def can_sign(self) -> bool:
        """Indique si une clé privée est disponible pour les opérations d'écriture."""
        return self.private_key is not None

    def require_private_key(self) -> str:
        """Retourne la clé privée, ou lève MissingEnvVar si aucune n'a été fournie."""
        if self.private_key is None:
            raise MissingEnvVar(PRIV_KEY_VAR)
        return self.private_key


def load_settings(*, dotenv: bool = True) -> Settings:
    """Charge la configuration depuis l'environnement (et le .env local si `dotenv` est vrai)."""
    if dotenv:
        load_dotenv()

    chain_id = env_int_optional("CHAIN_ID")
    if chain_id is not None and chain_id <= 0:
        raise InvalidEnvVar("CHAIN_ID", "un entier strictement positif")

    poll_ms = env_int_optional("TX_POLL_INTERVAL_MS")
    if poll_ms is not None and poll_ms <= 0:
        raise InvalidEnvVar("TX_POLL_INTERVAL_MS", "un entier strictement positif")

    return Settings(
        rpc_url=env_str_optional("RPC_URL") or defaults.RPC_URL_DEFAULT,
        chain_id=defaults.CHAIN_ID_DEFAULT if chain_id is None else chain_id,
        addresses_path=env_str_optional("ADDRESSES_PATH") or defaults.ADDRESSES_PATH_DEFAULT,
        rpc_timeout=env_float_optional("RPC_TIMEOUT_SECONDS") or defaults.RPC_TIMEOUT_SECONDS_DEFAULT,
        tx_timeout=env_float_optional("TX_TIMEOUT_SECONDS") or defaults.TX_TIMEOUT_SECONDS_DEFAULT,
        tx_poll_interval=(poll_ms or defaults.TX_POLL_INTERVAL_MS_DEFAULT) / 1000,
        private_key=env_str_optional(PRIV_KEY_VAR),
    )
