"""Conversions entre les représentations hexadécimales (entrées/sorties du client) et les valeurs binaires du ledger."""

from __future__ import annotations

from typing import Final

from eth_typing import ChecksumAddress
from eth_utils import decode_hex, is_hex, remove_0x_prefix, to_checksum_address

from enigma_duel.exceptions.ledger import InputFormatError

IDENTIFIER_SIZE: Final[int] = 20
ROOM_KEY_SIZE: Final[int] = 32
UINT256_MAX: Final[int] = 2**256 - 1


def _decode_fixed(value: str | bytes, size: int, field: str) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text or not is_hex(text) or len(remove_0x_prefix(text)) != size * 2:
            raise InputFormatError(field, value, f"{size} octets en hexadécimal (préfixe 0x optionnel)")
        raw = decode_hex(text)
    else:
        raise InputFormatError(field, value, f"str hexadécimal ou bytes de {size} octets")

    if len(raw) != size:
        raise InputFormatError(field, value, f"{size} octets")
    return raw


def parse_identifier(value: str | bytes, field: str = "identifier") -> ChecksumAddress:
    """Normalise une adresse (hex avec ou sans 0x, ou 20 octets) en adresse checksum EIP-55."""
    return to_checksum_address(_decode_fixed(value, IDENTIFIER_SIZE, field))


def parse_room_key(value: str | bytes, field: str = "room_key") -> bytes:
    """Normalise une clé de room (hex avec ou sans 0x, ou 32 octets) en 32 octets."""
    return _decode_fixed(value, ROOM_KEY_SIZE, field)


def room_key_to_hex(key: bytes) -> str:
    """Retourne la clé de room sous forme hexadécimale préfixée par 0x."""
    return "0x" + parse_room_key(key).hex()


def parse_amount(value: int | str, field: str = "amount") -> int:
    """Valide un montant uint256 (int, ou chaîne décimale) et le retourne sous forme d'int."""
    if isinstance(value, bool):
        raise InputFormatError(field, value, "un entier positif")
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise InputFormatError(field, value, "un entier positif")
        value = int(text)
    if not isinstance(value, int) or not 0 <= value <= UINT256_MAX:
        raise InputFormatError(field, value, "un entier entre 0 et 2**256 - 1")
    return value
