"""Calcul de la clé d'une room à partir des adresses des deux duellistes.

Le schéma doit rester identique à celui du contrat : `keccak256(abi.encode(duelist1, duelist2))`,
dans l'ordre d'enregistrement de la room (l'ordre compte).
"""

from eth_abi import encode
from eth_utils import keccak

from enigma_duel.utils.hexcodec import parse_identifier


def derive_room_key(duelist1: str | bytes, duelist2: str | bytes) -> bytes:
    """Retourne la clé (32 octets) de la room opposant `duelist1` à `duelist2`, sans trier les adresses."""
    encoded = encode(
        ["address", "address"],
        [parse_identifier(duelist1, "duelist1"), parse_identifier(duelist2, "duelist2")],
    )
    return keccak(encoded)
