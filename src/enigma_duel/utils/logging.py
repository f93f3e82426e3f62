"""Utilitaires pour la configuration du logging, avec un format lisible et une réduction du bruit des logs web3/HTTP."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

NOISY_LOGGERS = ("web3", "urllib3", "aiohttp", "asyncio")


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """Configure le logging pour afficher les messages du niveau demandé ou supérieur, avec un format lisible, et réduit le bruit web3."""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    # Réduction du bruit web3 / HTTP
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("web3.providers").propagate = False

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)-10s  %(levelname)-10s  %(name)-30s - %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root.addHandler(handler)
