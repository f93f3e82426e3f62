"""Module contenant la base des exceptions du client Enigma Duel."""

class AppError(Exception):
    """Classe de base des erreurs du client Enigma Duel.

    Les erreurs de configuration et les erreurs du ledger en héritent : la ligne de commande
    n'attrape que `AppError` et laisse remonter le reste (bugs).
    """
