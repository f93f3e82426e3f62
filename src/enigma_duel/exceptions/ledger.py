"""Module de définition des exceptions liées aux échanges avec le ledger (contrat Enigma Duel).

Chaque erreur porte un `kind` issu d'une énumération fermée, pour que l'appelant puisse choisir
sa stratégie (resoumettre, corriger l'entrée, abandonner) sans inspecter le message.
"""

from enum import StrEnum

from enigma_duel.exceptions.base import AppError


class LedgerErrorKind(StrEnum):
    """Catégories d'erreurs remontées par la couche ledger."""

    TRANSPORT = "TRANSPORT"
    SUBMISSION = "SUBMISSION"
    EXECUTION_REVERTED = "EXECUTION_REVERTED"
    DECODE = "DECODE"
    INPUT_FORMAT = "INPUT_FORMAT"


class LedgerError(AppError):
    """Base de toutes les erreurs liées au ledger."""

    kind: LedgerErrorKind
    retryable: bool = False


# ---------------- réseau / noeud ----------------
class TransportError(LedgerError):
    """Le noeud RPC est injoignable ou a renvoyé une réponse inexploitable."""

    kind = LedgerErrorKind.TRANSPORT
    retryable = True

    def __init__(self, operation: str, detail: str) -> None:
        """Initialise l'exception avec l'opération tentée et le détail de l'échec réseau."""
        super().__init__(f"Échec de transport pendant {operation}: {detail}")
        self.operation = operation
        self.detail = detail

class ConfirmationTimeout(TransportError):
    """La transaction a été soumise mais sa confirmation n'est pas arrivée à temps.

    La transaction peut encore être incluse plus tard : ne pas resoumettre sans vérifier `tx_hash`.
    """

    retryable = False

    def __init__(self, tx_hash: str, timeout: float) -> None:
        """Initialise l'exception avec le hash de la transaction en attente et le délai dépassé."""
        super().__init__("l'attente de confirmation", f"transaction {tx_hash} non confirmée après {timeout}s")
        self.tx_hash = tx_hash
        self.timeout = timeout


# ---------------- transactions ----------------
class SubmissionError(LedgerError):
    """La transaction a été rejetée par le noeud avant inclusion (nonce, fonds, gas...)."""

    kind = LedgerErrorKind.SUBMISSION
    retryable = True

    def __init__(self, method: str, reason: str) -> None:
        """Initialise l'exception avec la méthode du contrat et la raison du rejet."""
        super().__init__(f"Transaction {method} rejetée avant inclusion: {reason}")
        self.method = method
        self.reason = reason

class ExecutionRevertedError(LedgerError):
    """La logique du contrat a refusé l'opération (room déjà active, joueur non autorisé, allowance insuffisante...)."""

    kind = LedgerErrorKind.EXECUTION_REVERTED

    def __init__(self, method: str, reason: str | None = None, tx_hash: str | None = None) -> None:
        """Initialise l'exception avec la méthode, la raison du revert si connue, et le hash si la transaction a été incluse."""
        where = f" (tx {tx_hash})" if tx_hash else ""
        super().__init__(f"Exécution de {method} annulée par le contrat{where}: {reason or 'raison inconnue'}")
        self.method = method
        self.reason = reason
        self.tx_hash = tx_hash


# ---------------- décodage ----------------
class DecodeError(LedgerError):
    """La réponse du ledger ne correspond pas à la structure attendue (dérive de schéma)."""

    kind = LedgerErrorKind.DECODE

    def __init__(self, what: str, detail: str) -> None:
        """Initialise l'exception avec l'élément décodé et le détail de l'écart."""
        super().__init__(f"Impossible de décoder {what}: {detail}")
        self.what = what
        self.detail = detail

class MalformedEventError(DecodeError):
    """Le log attendu dans le reçu n'est pas un événement GameFinished exploitable."""

    def __init__(self, tx_hash: str, detail: str) -> None:
        """Initialise l'exception avec le hash de la transaction et la nature du problème."""
        super().__init__("l'événement GameFinished", f"{detail} (tx {tx_hash})")
        self.tx_hash = tx_hash


# ---------------- entrées ----------------
class InputFormatError(LedgerError):
    """Une valeur fournie par l'appelant est mal formée (hex invalide, mauvaise longueur, montant négatif)."""

    kind = LedgerErrorKind.INPUT_FORMAT

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialise l'exception avec le champ concerné, la valeur reçue et le format attendu."""
        super().__init__(f"Valeur invalide pour {field}: {value!r} (attendu: {expected})")
        self.field = field
        self.value = value
        self.expected = expected
