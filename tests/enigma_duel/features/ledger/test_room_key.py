from __future__ import annotations

import pytest

from enigma_duel.exceptions.ledger import InputFormatError
from enigma_duel.features.ledger.room_key import derive_room_key
from tests._fakes._ledger_fakes import ALICE, BOB

# keccak256(abi.encode(0x11..11, 0x22..22)), côté contrat
GOLDEN_ALICE_BOB = "1bbe365357fe28ec15df954baa1b29fb309dd0e8a21208d768bce9ab1c0c4fd0"
GOLDEN_BOB_ALICE = "aadb466868548500a92b93cfa0c280d1e59c0d3ed16042360d0f032b7f4d952a"


def test_derive_room_key_matches_ledger_golden_vector():
    assert derive_room_key(ALICE, BOB).hex() == GOLDEN_ALICE_BOB


def test_derive_room_key_reversed_order_matches_its_own_golden_vector():
    assert derive_room_key(BOB, ALICE).hex() == GOLDEN_BOB_ALICE


def test_derive_room_key_is_32_bytes_and_deterministic():
    first = derive_room_key(ALICE, BOB)
    second = derive_room_key(ALICE, BOB)

    assert isinstance(first, bytes)
    assert len(first) == 32
    assert first == second


def test_derive_room_key_is_order_sensitive():
    assert derive_room_key(ALICE, BOB) != derive_room_key(BOB, ALICE)


def test_derive_room_key_ignores_hex_case_and_prefix():
    unprefixed = ALICE[2:]
    upper_bob = "0x" + BOB[2:].upper()

    assert derive_room_key(unprefixed, upper_bob).hex() == GOLDEN_ALICE_BOB


def test_derive_room_key_accepts_raw_20_byte_identifiers():
    assert derive_room_key(bytes.fromhex("11" * 20), bytes.fromhex("22" * 20)).hex() == GOLDEN_ALICE_BOB


@pytest.mark.parametrize("bad", ["0x1234", "0x" + "zz" * 20, "", b"\x11" * 19])
def test_derive_room_key_rejects_malformed_identifiers(bad):
    with pytest.raises(InputFormatError):
        derive_room_key(bad, BOB)
