"""Client du contrat Enigma Duel : rooms de duel, résultats et soldes EDT."""

from enigma_duel.features.game_room.game_room_service import GameRoomService
from enigma_duel.features.ledger.events import decode_game_finished
from enigma_duel.features.ledger.gateway import LedgerGateway
from enigma_duel.features.ledger.models import (
    ZERO_ADDRESS,
    Balance,
    GameFinishedEvent,
    GameRoom,
    GameRoomStatus,
)
from enigma_duel.features.ledger.room_key import derive_room_key
from enigma_duel.features.treasury.treasury_service import TreasuryService
from enigma_duel.version import VERSION

__all__ = [
    "Balance",
    "GameFinishedEvent",
    "GameRoom",
    "GameRoomService",
    "GameRoomStatus",
    "LedgerGateway",
    "TreasuryService",
    "VERSION",
    "ZERO_ADDRESS",
    "decode_game_finished",
    "derive_room_key",
]
