"""Valeurs par défaut centralisées.

Objectif : ne pas dupliquer les mêmes valeurs (réseau/délais) dans plusieurs fichiers.
Le reste du code doit importer depuis ici.
"""

from __future__ import annotations

from typing import Final


# -------------------- Réseau --------------------

# Noeud local (anvil / hardhat) et son chain id.
RPC_URL_DEFAULT: Final[str] = "http://localhost:8545"
CHAIN_ID_DEFAULT: Final[int] = 31337

# Délai appliqué à chaque requête HTTP vers le noeud.
RPC_TIMEOUT_SECONDS_DEFAULT: Final[float] = 10.0


# -------------------- Transactions --------------------

# Attente max d'un reçu après soumission, et intervalle de polling.
TX_TIMEOUT_SECONDS_DEFAULT: Final[float] = 120.0
TX_POLL_INTERVAL_MS_DEFAULT: Final[int] = 10


# -------------------- Carnet d'adresses --------------------

ADDRESSES_PATH_DEFAULT: Final[str] = "./data/constants/addresses.json"
