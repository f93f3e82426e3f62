"""Chargement du carnet d'adresses des contrats déployés (data/constants/addresses.json)."""

import json
from dataclasses import dataclass
from typing import Any

from eth_typing import ChecksumAddress

from enigma_duel.exceptions.config import InvalidAddressBook
from enigma_duel.exceptions.ledger import InputFormatError
from enigma_duel.utils.hexcodec import parse_identifier


@dataclass(frozen=True, slots=True)
class Addresses:
    """Adresses des contrats Enigma Duel déployés sur le réseau courant."""

    enigma_duel: ChecksumAddress
    enigma_duel_state: ChecksumAddress
    enigma_duel_token: ChecksumAddress
    enigma_duel_proxy_admin: ChecksumAddress
    enigma_duel_proxy: ChecksumAddress


# clé JSON -> champ
_JSON_KEYS: dict[str, str] = {
    "EnigmaDuel": "enigma_duel",
    "EnigmaDuelState": "enigma_duel_state",
    "EnigmaDuelToken": "enigma_duel_token",
    "EnigmaDuelProxyAdmin": "enigma_duel_proxy_admin",
    "EnigmaDuelProxy": "enigma_duel_proxy",
}


def load_addresses_json(path: str) -> dict[str, Any]:
    """Charge le fichier JSON brut. Lève InvalidAddressBook s'il est absent ou illisible."""
    try:
        with open(path, encoding="utf-8") as file:
            data = json.load(file)
    except FileNotFoundError as e:
        raise InvalidAddressBook(path, "fichier introuvable") from e
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidAddressBook(path, f"lecture impossible ({e})") from e

    if not isinstance(data, dict):
        raise InvalidAddressBook(path, "un objet JSON est attendu")
    return data


def load_addresses(path: str) -> Addresses:
    """Retourne les adresses normalisées (checksum) du carnet situé à `path`."""
    data = load_addresses_json(path)

    missing = [key for key in _JSON_KEYS if not data.get(key)]
    if missing:
        raise InvalidAddressBook(path, f"clés manquantes: {', '.join(missing)}")

    values: dict[str, ChecksumAddress] = {}
    for key, attr in _JSON_KEYS.items():
        try:
            values[attr] = parse_identifier(data[key], key)
        except InputFormatError as e:
            raise InvalidAddressBook(path, f"adresse invalide pour {key}") from e

    return Addresses(**values)
