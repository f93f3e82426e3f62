"""Initialisation d'une session client : carnet d'adresses, passerelles ledger et services."""

import logging
import time
from collections.abc import Callable
from typing import Any

from enigma_duel.app.services import Services
from enigma_duel.config import Settings
from enigma_duel.features.game_room.game_room_service import GameRoomService
from enigma_duel.features.ledger.abi import EDT_ABI, ENIGMA_DUEL_ABI
from enigma_duel.features.ledger.gateway import LedgerGateway
from enigma_duel.features.treasury.treasury_service import TreasuryService
from enigma_duel.json_tools.addresses_json import Addresses, load_addresses

log = logging.getLogger(__name__)


def step(name: str, fn: Callable[[], Any], *, critical: bool = True, logger: logging.Logger | None = None) -> Any:
    start = time.perf_counter()
    logger = logger or log
    try:
        result = fn()
        ms = (time.perf_counter() - start) * 1000
        label = f"{name} ({result})" if isinstance(result, (int, str)) else name
        logger.info("✅ %-53s %8.1f ms", label, ms)
        return result
    except Exception:
        ms = (time.perf_counter() - start) * 1000
        logger.exception("❌ %-50s %8.1f ms", name, ms)
        if critical:
            raise
        return None


def init_services(settings: Settings, addresses: Addresses) -> Services:
    gateway = LedgerGateway.connect(settings, addresses.enigma_duel_proxy, ENIGMA_DUEL_ABI)
    token = gateway.for_contract(addresses.enigma_duel_token, EDT_ABI)
    return Services(
        game_room=GameRoomService(gateway=gateway),
        treasury=TreasuryService(duel=gateway, token=token),
    )


def startup(settings: Settings) -> Services:
    addresses = step("Chargement du carnet d'adresses", lambda: load_addresses(settings.addresses_path))
    services = step("Initialisation des services", lambda: init_services(settings, addresses))
    return services
