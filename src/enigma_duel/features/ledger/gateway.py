"""Passerelle vers le ledger : appels en lecture et transactions signées sur un contrat, via web3 (async).

La passerelle ne garde aucun état mutable entre deux appels (hors identité de signature et pool HTTP),
elle peut donc être partagée par plusieurs tâches concurrentes.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

import aiohttp
from eth_abi.exceptions import DecodingError
from eth_typing import ChecksumAddress
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import (
    ABIFunctionNotFound,
    BadFunctionCallOutput,
    ContractLogicError,
    ProviderConnectionError,
    TimeExhausted,
    Web3RPCError,
)

from enigma_duel.config import PRIV_KEY_VAR, Settings
from enigma_duel.exceptions.config import MissingEnvVar
from enigma_duel.exceptions.ledger import (
    ConfirmationTimeout,
    DecodeError,
    ExecutionRevertedError,
    SubmissionError,
    TransportError,
)
from enigma_duel.features.ledger.models import Credential, RawLog, TransactionReceipt
from enigma_duel.utils.hexcodec import parse_identifier

log = logging.getLogger(__name__)

_NETWORK_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ProviderConnectionError, ConnectionError)


def _hex(value: bytes | str) -> str:
    if isinstance(value, str):
        return value if value.startswith("0x") else "0x" + value
    return "0x" + bytes(value).hex()


def _revert_reason(e: ContractLogicError) -> str | None:
    message = getattr(e, "message", None) or (e.args[0] if e.args else None)
    return str(message) if message else None


@contextmanager
def _translate_read_errors(method: str) -> Iterator[None]:
    """Convertit les erreurs web3 d'un appel en lecture en erreurs du client."""
    try:
        yield
    except ContractLogicError as e:
        raise ExecutionRevertedError(method, _revert_reason(e)) from e
    except (BadFunctionCallOutput, DecodingError, ABIFunctionNotFound) as e:
        raise DecodeError(f"la réponse de {method}", str(e)) from e
    except Web3RPCError as e:
        raise TransportError(f"l'appel {method}", str(e)) from e
    except _NETWORK_ERRORS as e:
        raise TransportError(f"l'appel {method}", repr(e)) from e


def _to_raw_log(entry: Mapping[str, Any]) -> RawLog:
    return RawLog(
        address=str(entry["address"]),
        topics=tuple(bytes(topic) for topic in entry["topics"]),
        data=bytes(entry["data"]),
    )


def to_receipt(raw: Mapping[str, Any]) -> TransactionReceipt:
    """Convertit un reçu web3 en `TransactionReceipt`, logs triés par ordre d'émission."""
    try:
        entries = sorted(raw["logs"], key=lambda entry: entry.get("logIndex", 0))
        return TransactionReceipt(
            tx_hash=_hex(raw["transactionHash"]),
            block_number=int(raw["blockNumber"]),
            status=int(raw["status"]),
            gas_used=int(raw["gasUsed"]),
            logs=tuple(_to_raw_log(entry) for entry in entries),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DecodeError("le reçu de transaction", repr(e)) from e


class LedgerGateway:
    """Accès à un contrat du ledger : lectures (`call`) et écritures signées confirmées (`send_transaction`)."""

    def __init__(
        self,
        w3: AsyncWeb3,
        contract_address: str,
        abi: Sequence[Mapping[str, Any]],
        credential: Credential | None,
        *,
        chain_id: int,
        tx_timeout: float,
        poll_interval: float,
    ) -> None:
        self._w3 = w3
        self._contract_address = parse_identifier(contract_address, "contract_address")
        self._contract = w3.eth.contract(address=self._contract_address, abi=abi)
        self._credential = credential
        self._chain_id = chain_id
        self._tx_timeout = tx_timeout
        self._poll_interval = poll_interval

    @classmethod
    def connect(
        cls,
        settings: Settings,
        contract_address: str,
        abi: Sequence[Mapping[str, Any]],
    ) -> LedgerGateway:
        """Ouvre une passerelle HTTP vers le noeud configuré, avec signature si une clé privée est disponible."""
        provider = AsyncHTTPProvider(
            settings.rpc_url,
            request_kwargs={"timeout": aiohttp.ClientTimeout(total=settings.rpc_timeout)},
        )
        credential = Credential.from_private_key(settings.require_private_key()) if settings.can_sign else None
        gateway = cls(
            AsyncWeb3(provider),
            contract_address,
            abi,
            credential,
            chain_id=settings.chain_id,
            tx_timeout=settings.tx_timeout,
            poll_interval=settings.tx_poll_interval,
        )
        log.info(
            "Passerelle ledger prête (rpc=%s, chain_id=%s, contrat=%s, signataire=%s)",
            settings.rpc_url, settings.chain_id, gateway.contract_address, credential.address if credential else None,
        )
        return gateway

    def for_contract(self, contract_address: str, abi: Sequence[Mapping[str, Any]]) -> LedgerGateway:
        """Retourne une passerelle vers un autre contrat, partageant la connexion et l'identité de signature."""
        return LedgerGateway(
            self._w3,
            contract_address,
            abi,
            self._credential,
            chain_id=self._chain_id,
            tx_timeout=self._tx_timeout,
            poll_interval=self._poll_interval,
        )

    @property
    def contract_address(self) -> ChecksumAddress:
        return self._contract_address

    @property
    def address(self) -> ChecksumAddress:
        """Adresse du signataire."""
        return self._require_credential().address

    def _require_credential(self) -> Credential:
        if self._credential is None:
            raise MissingEnvVar(PRIV_KEY_VAR)
        return self._credential

    def _function(self, method: str, args: tuple[Any, ...]) -> Any:
        return getattr(self._contract.functions, method)(*args)

    # -------------------------- lecture --------------------------

    async def call(self, method: str, *args: Any) -> Any:
        """Appel en lecture seule, sans signature ni confirmation."""
        log.debug("call %s%s", method, args)
        with _translate_read_errors(method):
            return await self._function(method, args).call()

    # -------------------------- écriture --------------------------

    async def send_transaction(self, method: str, *args: Any) -> TransactionReceipt:
        """Construit, signe et soumet une transaction, puis attend sa confirmation.

        Lève SubmissionError si le noeud la rejette avant inclusion, ExecutionRevertedError si le contrat
        la refuse (estimation ou reçu en échec), TransportError / ConfirmationTimeout pour le réseau.
        """
        credential = self._require_credential()
        sender = credential.address

        try:
            nonce = await self._w3.eth.get_transaction_count(sender, "pending")
            tx = await self._function(method, args).build_transaction(
                {"from": sender, "chainId": self._chain_id, "nonce": nonce}
            )
        except ContractLogicError as e:
            raise ExecutionRevertedError(method, _revert_reason(e)) from e
        except ABIFunctionNotFound as e:
            raise DecodeError(f"la méthode {method}", str(e)) from e
        except Web3RPCError as e:
            raise SubmissionError(method, str(e)) from e
        except _NETWORK_ERRORS as e:
            raise TransportError(f"la préparation de {method}", repr(e)) from e

        signed = credential.account.sign_transaction(tx)

        try:
            tx_hash = _hex(await self._w3.eth.send_raw_transaction(signed.raw_transaction))
        except Web3RPCError as e:
            raise SubmissionError(method, str(e)) from e
        except _NETWORK_ERRORS as e:
            raise TransportError(f"l'envoi de {method}", repr(e)) from e
        log.info("Transaction %s envoyée (nonce=%s) : %s", method, nonce, tx_hash)

        try:
            raw_receipt = await self._w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self._tx_timeout, poll_latency=self._poll_interval
            )
        except TimeExhausted as e:
            raise ConfirmationTimeout(tx_hash, self._tx_timeout) from e
        except (Web3RPCError, *_NETWORK_ERRORS) as e:
            raise TransportError(f"l'attente de confirmation de {method}", repr(e)) from e

        receipt = to_receipt(raw_receipt)
        if not receipt.succeeded:
            log.warning("Transaction %s incluse mais annulée (bloc %s) : %s", method, receipt.block_number, tx_hash)
            raise ExecutionRevertedError(method, None, tx_hash)

        log.info("Transaction %s confirmée (bloc %s, gas %s)", method, receipt.block_number, receipt.gas_used)
        return receipt
