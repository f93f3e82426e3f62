"""Modèles de données échangés avec le contrat Enigma Duel (rooms, soldes, événements, reçus, identité de signature)."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Final

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_typing import ChecksumAddress

from enigma_duel.exceptions.ledger import DecodeError, InputFormatError
from enigma_duel.utils.hexcodec import parse_amount, parse_identifier

ZERO_ADDRESS: Final[ChecksumAddress] = ChecksumAddress("0x0000000000000000000000000000000000000000")


class GameRoomStatus(IntEnum):
    """Statut d'une room, dans l'ordre de déclaration de l'enum Solidity."""

    INACTIVE = 0
    FINISHED = 1
    ACTIVE = 2


class GameRoomResultStatus(IntEnum):
    """Code `status` de l'événement GameFinished."""

    DRAW = 0
    VICTORY = 1


def identifier_from_abi(value: Any, what: str) -> ChecksumAddress:
    """Valide une adresse renvoyée par le ledger (DecodeError si elle est mal formée)."""
    try:
        return parse_identifier(value)
    except InputFormatError as e:
        raise DecodeError(what, f"adresse invalide: {value!r}") from e


def uint_from_abi(value: Any, what: str) -> int:
    """Valide un uint256 renvoyé par le ledger (DecodeError sinon)."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise DecodeError(what, f"uint256 attendu, reçu {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class GameRoom:
    """Snapshot d'une room telle que stockée par le ledger."""

    duelist1: ChecksumAddress
    duelist2: ChecksumAddress
    prize_pool: int
    status: GameRoomStatus = GameRoomStatus.INACTIVE

    @classmethod
    def request(cls, duelist1: str | bytes, duelist2: str | bytes, prize_pool: int | str) -> GameRoom:
        """Construit la requête de création de room, en validant les entrées de l'appelant."""
        return cls(
            duelist1=parse_identifier(duelist1, "duelist1"),
            duelist2=parse_identifier(duelist2, "duelist2"),
            prize_pool=parse_amount(prize_pool, "prize_pool"),
        )

    def to_abi(self) -> tuple[str, str, int, int]:
        """Retourne le tuple correspondant au struct Solidity `GameRoom`."""
        return (self.duelist1, self.duelist2, self.prize_pool, int(self.status))

    @classmethod
    def from_abi(cls, raw: Sequence[Any]) -> GameRoom:
        """Construit une room depuis le tuple renvoyé par `getGameRoom`."""
        if not isinstance(raw, (list, tuple)) or len(raw) != 4:
            raise DecodeError("GameRoom", f"tuple de 4 champs attendu, reçu {raw!r}")
        duelist1, duelist2, prize_pool, status = raw
        try:
            room_status = GameRoomStatus(status)
        except ValueError as e:
            raise DecodeError("GameRoom", f"statut inconnu: {status!r}") from e
        return cls(
            duelist1=identifier_from_abi(duelist1, "GameRoom.duelist1"),
            duelist2=identifier_from_abi(duelist2, "GameRoom.duelist2"),
            prize_pool=uint_from_abi(prize_pool, "GameRoom.prizePool"),
            status=room_status,
        )

    def to_dict(self) -> dict[str, Any]:
        """Retourne une représentation sérialisable (JSON) de la room."""
        return {
            "duelist1": self.duelist1,
            "duelist2": self.duelist2,
            "prize_pool": str(self.prize_pool),
            "status": self.status.name,
        }


GameRoomRequest = GameRoom


@dataclass(frozen=True, slots=True)
class Balance:
    """Solde d'un utilisateur dans le contrat (total = locked + available côté ledger)."""

    total: int
    locked: int
    available: int

    @classmethod
    def from_abi(cls, raw: Sequence[Any]) -> Balance:
        """Construit un solde depuis le tuple renvoyé par `getUserbalance`."""
        if not isinstance(raw, (list, tuple)) or len(raw) != 3:
            raise DecodeError("Balance", f"tuple de 3 champs attendu, reçu {raw!r}")
        total, locked, available = raw
        return cls(
            total=uint_from_abi(total, "Balance.total"),
            locked=uint_from_abi(locked, "Balance.locked"),
            available=uint_from_abi(available, "Balance.available"),
        )

    def to_dict(self) -> dict[str, str]:
        """Retourne une représentation sérialisable (JSON) du solde."""
        return {"total": str(self.total), "locked": str(self.locked), "available": str(self.available)}


@dataclass(frozen=True, slots=True)
class GameFinishedEvent:
    """Résultat d'une room terminée, tel qu'émis par le ledger.

    Une adresse nulle dans un des deux slots signale un match nul pour ce slot.
    """

    status: int
    fee: int
    duelist1: ChecksumAddress
    duelist1_received: int
    duelist2: ChecksumAddress
    duelist2_received: int

    @property
    def result(self) -> GameRoomResultStatus | None:
        """Interprète le code `status`, ou None s'il n'est pas connu."""
        try:
            return GameRoomResultStatus(self.status)
        except ValueError:
            return None

    @property
    def is_draw(self) -> bool:
        return self.result is GameRoomResultStatus.DRAW

    @property
    def winner(self) -> ChecksumAddress | None:
        """Adresse du duelliste ayant reçu le gain pour une victoire, None sinon."""
        if self.result is not GameRoomResultStatus.VICTORY:
            return None
        if self.duelist1_received > self.duelist2_received:
            return self.duelist1
        if self.duelist2_received > self.duelist1_received:
            return self.duelist2
        return None

    def to_dict(self) -> dict[str, Any]:
        """Retourne une représentation sérialisable (JSON) de l'événement."""
        result = self.result
        return {
            "status": self.status,
            "result": result.name if result is not None else None,
            "fee": str(self.fee),
            "duelist1": self.duelist1,
            "duelist1_received": str(self.duelist1_received),
            "duelist2": self.duelist2,
            "duelist2_received": str(self.duelist2_received),
        }


@dataclass(frozen=True, slots=True)
class RawLog:
    """Log brut d'un reçu : adresse émettrice, topics et données ABI."""

    address: str
    topics: tuple[bytes, ...]
    data: bytes


@dataclass(frozen=True, slots=True)
class TransactionReceipt:
    """Reçu d'une transaction incluse, avec ses logs dans l'ordre d'émission."""

    tx_hash: str
    block_number: int
    status: int
    gas_used: int
    logs: tuple[RawLog, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.status == 1


@dataclass(frozen=True, slots=True)
class Credential:
    """Clé de signature chargée une fois par processus, jamais modifiée ensuite."""

    account: LocalAccount = field(repr=False)

    @classmethod
    def from_private_key(cls, private_key: str) -> Credential:
        """Construit l'identité de signature depuis une clé privée hexadécimale."""
        try:
            account = Account.from_key(private_key.strip())
        except (ValueError, TypeError):
            # le message d'origine peut contenir la clé
            raise InputFormatError("private_key", "<masquée>", "32 octets en hexadécimal") from None
        return cls(account=account)

    @property
    def address(self) -> ChecksumAddress:
        return self.account.address

    def __repr__(self) -> str:
        return f"Credential(address={self.address})"
