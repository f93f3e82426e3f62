"""Décodage des événements émis par le contrat Enigma Duel."""

from __future__ import annotations

import logging
from typing import Final

from eth_abi import decode
from eth_abi.exceptions import DecodingError
from eth_utils import keccak, to_checksum_address

from enigma_duel.features.ledger.models import GameFinishedEvent, RawLog

log = logging.getLogger(__name__)

GAME_FINISHED_SIGNATURE: Final[str] = "GameFinished(uint8,uint256,address,uint256,address,uint256)"
GAME_FINISHED_TOPIC: Final[bytes] = keccak(text=GAME_FINISHED_SIGNATURE)
GAME_FINISHED_TYPES: Final[list[str]] = ["uint8", "uint256", "address", "uint256", "address", "uint256"]


def decode_game_finished(raw_log: RawLog) -> GameFinishedEvent | None:
    """Décode un log GameFinished.

    Retourne None (pas d'exception) si le topic ne correspond pas ou si les données ne respectent pas
    le schéma attendu. Aucune validation métier n'est faite sur les montants.
    """
    if not raw_log.topics or raw_log.topics[0] != GAME_FINISHED_TOPIC:
        log.debug("Log ignoré : topic différent de GameFinished (%s)", raw_log.address)
        return None

    if not isinstance(raw_log.data, (bytes, bytearray, memoryview)):
        log.debug("Données GameFinished de type inattendu : %s", type(raw_log.data).__name__)
        return None

    try:
        status, fee, duelist1, duelist1_received, duelist2, duelist2_received = decode(
            GAME_FINISHED_TYPES, bytes(raw_log.data)
        )
    except DecodingError as e:
        log.debug("Données GameFinished non décodables : %s", e)
        return None

    return GameFinishedEvent(
        status=status,
        fee=fee,
        duelist1=to_checksum_address(duelist1),
        duelist1_received=duelist1_received,
        duelist2=to_checksum_address(duelist2),
        duelist2_received=duelist2_received,
    )
