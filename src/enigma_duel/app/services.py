"""Module définissant les services utilisés par le client Enigma Duel, regroupant les différentes fonctionnalités en un seul endroit."""

from dataclasses import dataclass, fields

from enigma_duel.features.game_room.game_room_service import GameRoomService
from enigma_duel.features.treasury.treasury_service import TreasuryService


@dataclass(slots=True)
class Services:
    """Classe regroupant les différents services du client, partageant la même passerelle ledger."""

    game_room: GameRoomService
    treasury: TreasuryService

    def __len__(self) -> int:
        """Retourne le nombre de services définis dans cette classe."""
        return len(fields(self))
