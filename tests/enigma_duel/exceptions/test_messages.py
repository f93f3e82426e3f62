import pytest

from enigma_duel.exceptions import ledger as exc
from enigma_duel.exceptions.base import AppError
from enigma_duel.exceptions.config import InvalidAddressBook, MissingEnvVar
from enigma_duel.exceptions.messages import error_message


class UnknownAppError(AppError):
    pass


@pytest.mark.parametrize(
    "error, expected",
    [
        (exc.TransportError("l'appel getFEE", "x"), "📡 Le noeud RPC ne répond pas. Réessaie plus tard."),
        (exc.SubmissionError("depositEDT", "nonce too low"), "⚠️ Transaction refusée par le noeud : nonce too low"),
        (exc.ExecutionRevertedError("startGameRoom", "Room already active"), "⛔ Le contrat a refusé l'opération : Room already active"),
        (exc.ExecutionRevertedError("startGameRoom"), "⛔ Le contrat a refusé l'opération : raison inconnue"),
        (exc.MalformedEventError("0x01", "aucun log"), "❓ Partie terminée, mais le résultat n'a pas pu être interprété."),
        (exc.DecodeError("GameRoom", "x"), "❌ Réponse du contrat inattendue (ABI pas à jour ?)."),
        (exc.InputFormatError("winner", "0x", "20 octets"), "⚠️ winner invalide (attendu : 20 octets)."),
        (UnknownAppError("boom"), "❌ Une erreur est survenue."),
    ],
)
def test_error_message_specific_cases(error, expected):
    assert error_message(error) == expected


def test_confirmation_timeout_message_is_not_generic_transport():
    msg = error_message(exc.ConfirmationTimeout("0xabc", 120.0))

    assert msg.startswith("⌛")
    assert "0xabc" in msg


@pytest.mark.parametrize("error", [MissingEnvVar("PRIV_KEY"), InvalidAddressBook("a.json", "fichier introuvable")])
def test_config_errors_show_detail(error):
    msg = error_message(error)

    assert msg.startswith("⚙️ Configuration invalide")
    assert str(error) in msg
