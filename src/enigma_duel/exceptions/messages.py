"""Messages lisibles pour les erreurs remontées à l'utilisateur de la ligne de commande."""

from __future__ import annotations

from enigma_duel.exceptions.base import AppError
from enigma_duel.exceptions.config import ConfigError
from enigma_duel.exceptions.ledger import (
    ConfirmationTimeout,
    DecodeError,
    ExecutionRevertedError,
    InputFormatError,
    MalformedEventError,
    SubmissionError,
    TransportError,
)


def error_message(e: AppError) -> str:
    """Retourne un message court (pas trop technique) adapté au type d'erreur."""
    match e:
        case ConfirmationTimeout(tx_hash=tx_hash):
            return f"⌛ Transaction {tx_hash} envoyée mais pas encore confirmée. Vérifie avant de renvoyer."

        case TransportError():
            return "📡 Le noeud RPC ne répond pas. Réessaie plus tard."

        case SubmissionError(reason=reason):
            return f"⚠️ Transaction refusée par le noeud : {reason}"

        case ExecutionRevertedError(reason=reason):
            return f"⛔ Le contrat a refusé l'opération : {reason or 'raison inconnue'}"

        case MalformedEventError():
            return "❓ Partie terminée, mais le résultat n'a pas pu être interprété."

        case DecodeError():
            return "❌ Réponse du contrat inattendue (ABI pas à jour ?)."

        case InputFormatError(field=field, expected=expected):
            return f"⚠️ {field} invalide (attendu : {expected})."

        case ConfigError():
            return f"⚙️ Configuration invalide : {e}"

        case _:
            return "❌ Une erreur est survenue."
