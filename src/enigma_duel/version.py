"""Version du client Enigma Duel, affichée par `enigma-duel --version`."""
from typing import Final

VERSION: Final[str] = "0.3.0"
