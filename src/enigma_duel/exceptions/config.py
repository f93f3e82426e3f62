"""Module définissant les exceptions liées à la configuration du client (variables d'environnement, .env, carnet d'adresses)."""

from enigma_duel.exceptions.base import AppError


class ConfigError(AppError):
    """Erreur de configuration (variables d'environnement, .env, etc.)."""

class MissingEnvVar(ConfigError):
    """Erreur indiquant qu'une variable d'environnement requise est manquante."""

    def __init__(self, name: str) -> None:
        """Initialise l'exception avec le nom de la variable d'environnement manquante."""
        super().__init__(f"Variable d'environnement requise manquante: {name}")
        self.name = name

class InvalidEnvVar(ConfigError):
    """Erreur indiquant qu'une variable d'environnement a une valeur invalide ou mal formatée."""

    def __init__(self, name: str, expected: str) -> None:
        """Initialise l'exception avec le nom de la variable d'environnement concernée et une description du format attendu."""
        super().__init__(f"Variable d'environnement invalide: {name} (attendu: {expected})")
        self.name = name
        self.expected = expected

class InvalidAddressBook(ConfigError):
    """Erreur indiquant que le carnet d'adresses des contrats déployés est absent, illisible ou incomplet."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialise l'exception avec le chemin du fichier et la raison du rejet."""
        super().__init__(f"Carnet d'adresses invalide ({path}): {reason}")
        self.path = path
        self.reason = reason
