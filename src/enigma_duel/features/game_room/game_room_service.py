"""Module de service pour les rooms de duel, servant de façade applicative au-dessus du contrat Enigma Duel.

Le client ne maintient aucune machine à états locale : les transitions (INACTIVE -> ACTIVE -> FINISHED)
vivent dans le ledger, le service ne fait qu'en observer des snapshots.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from enigma_duel.exceptions.ledger import MalformedEventError
from enigma_duel.features.ledger.events import decode_game_finished
from enigma_duel.features.ledger.gateway import LedgerGateway
from enigma_duel.features.ledger.models import (
    ZERO_ADDRESS,
    Balance,
    GameFinishedEvent,
    GameRoom,
    uint_from_abi,
)
from enigma_duel.features.ledger.room_key import derive_room_key
from enigma_duel.utils.hexcodec import parse_identifier, parse_room_key, room_key_to_hex

log = logging.getLogger(__name__)


@dataclass(slots=True)
class GameRoomService:
    """Façade applicative des rooms : création, clôture et lectures (room, solde, frais)."""

    gateway: LedgerGateway

    # -------------------------- écritures --------------------------

    async def start_game_room(self, room: GameRoom) -> tuple[GameRoom, bytes]:
        """Ouvre une room sur le ledger et retourne son snapshot enregistré avec sa clé.

        La clé est dérivée localement depuis (duelist1, duelist2), dans l'ordre de la requête.
        """
        await self.gateway.send_transaction("startGameRoom", room.to_abi())

        key = derive_room_key(room.duelist1, room.duelist2)
        snapshot = await self.get_game_room(key)
        log.info("Room %s ouverte (%s vs %s, pool=%s)", room_key_to_hex(key), room.duelist1, room.duelist2, snapshot.prize_pool)
        return snapshot, key

    async def finish_game_room(self, key: str | bytes, winner: str | bytes = ZERO_ADDRESS) -> GameFinishedEvent:
        """Termine une room en désignant le vainqueur (adresse nulle = match nul) et retourne le résultat émis."""
        room_key = parse_room_key(key)
        winner_address = parse_identifier(winner, "winner")

        receipt = await self.gateway.send_transaction("finishGameRoom", room_key, winner_address)

        if not receipt.logs:
            raise MalformedEventError(receipt.tx_hash, "aucun log dans le reçu")

        event = decode_game_finished(receipt.logs[0])
        if event is None:
            raise MalformedEventError(receipt.tx_hash, "le premier log n'est pas un GameFinished valide")

        log.info(
            "Room %s terminée (%s, frais=%s)",
            room_key_to_hex(room_key), "nul" if event.is_draw else f"vainqueur {event.winner}", event.fee,
        )
        return event

    # -------------------------- lectures --------------------------

    async def get_game_room(self, key: str | bytes) -> GameRoom:
        """Retourne le snapshot courant de la room."""
        raw = await self.gateway.call("getGameRoom", parse_room_key(key))
        return GameRoom.from_abi(raw)

    async def get_user_balance(self, user: str | bytes) -> Balance:
        """Retourne le solde courant d'un utilisateur (aucun cache : deux appels peuvent différer)."""
        raw = await self.gateway.call("getUserbalance", parse_identifier(user, "user"))
        return Balance.from_abi(raw)

    async def get_fee(self) -> int:
        """Retourne les frais de plateforme prélevés sur une victoire."""
        return uint_from_abi(await self.gateway.call("getFEE"), "getFEE")

    async def get_draw_fee(self) -> int:
        """Retourne les frais de plateforme prélevés sur un match nul."""
        return uint_from_abi(await self.gateway.call("getDRAW_FEE"), "getDRAW_FEE")
