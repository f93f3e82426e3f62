"""Module de service pour les dépôts et retraits d'EDT dans le contrat Enigma Duel."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from eth_typing import ChecksumAddress

from enigma_duel.features.ledger.gateway import LedgerGateway
from enigma_duel.features.ledger.models import Balance, identifier_from_abi
from enigma_duel.utils.hexcodec import parse_amount

log = logging.getLogger(__name__)


@dataclass(slots=True)
class TreasuryService:
    """Façade des mouvements d'EDT du signataire entre son portefeuille et le contrat."""

    duel: LedgerGateway
    token: LedgerGateway

    async def deposit_edt(self, amount: int | str) -> Balance:
        """Autorise le contrat à prélever `amount` EDT, les dépose, puis retourne le nouveau solde du signataire."""
        value = parse_amount(amount)

        await self.token.send_transaction("approve", self.duel.contract_address, value)
        log.info("Contrat %s autorisé pour %s EDT", self.duel.contract_address, value)

        await self.duel.send_transaction("depositEDT", value)
        return await self._own_balance()

    async def withdraw_edt(self, amount: int | str) -> Balance:
        """Retire `amount` EDT disponibles vers le portefeuille du signataire et retourne le nouveau solde."""
        value = parse_amount(amount)
        await self.duel.send_transaction("withdrawEDT", value)
        return await self._own_balance()

    async def get_edt(self) -> ChecksumAddress:
        """Retourne l'adresse du token EDT utilisé par le contrat."""
        return identifier_from_abi(await self.duel.call("getEDT"), "getEDT")

    async def _own_balance(self) -> Balance:
        return Balance.from_abi(await self.duel.call("getUserbalance", self.duel.address))
