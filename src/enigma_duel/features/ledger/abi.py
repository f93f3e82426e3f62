"""ABI des contrats utilisés par le client : le proxy Enigma Duel et le token EDT (ERC-20).

Seules les entrées appelées par le client sont déclarées.
"""

from typing import Any, Final

_GAME_ROOM_COMPONENTS: Final[list[dict[str, str]]] = [
    {"internalType": "address", "name": "duelist1", "type": "address"},
    {"internalType": "address", "name": "duelist2", "type": "address"},
    {"internalType": "uint256", "name": "prizePool", "type": "uint256"},
    {"internalType": "enum IEnigmaDuel.GameRoomStatus", "name": "status", "type": "uint8"},
]

_BALANCE_COMPONENTS: Final[list[dict[str, str]]] = [
    {"internalType": "uint256", "name": "total", "type": "uint256"},
    {"internalType": "uint256", "name": "locked", "type": "uint256"},
    {"internalType": "uint256", "name": "available", "type": "uint256"},
]


def _view(name: str, inputs: list[dict[str, Any]], outputs: list[dict[str, Any]]) -> dict[str, Any]:
    return {"inputs": inputs, "name": name, "outputs": outputs, "stateMutability": "view", "type": "function"}


def _write(name: str, inputs: list[dict[str, Any]], outputs: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    return {"inputs": inputs, "name": name, "outputs": outputs or [], "stateMutability": "nonpayable", "type": "function"}


ENIGMA_DUEL_ABI: Final[list[dict[str, Any]]] = [
    _write(
        "startGameRoom",
        [{"components": _GAME_ROOM_COMPONENTS, "internalType": "struct IEnigmaDuel.GameRoom", "name": "_gameRoom", "type": "tuple"}],
        [{"internalType": "bytes32", "name": "gameRoomKey", "type": "bytes32"}],
    ),
    _write(
        "finishGameRoom",
        [
            {"internalType": "bytes32", "name": "_gameRoomKey", "type": "bytes32"},
            {"internalType": "address", "name": "_winner", "type": "address"},
        ],
    ),
    _write("depositEDT", [{"internalType": "uint256", "name": "_amount", "type": "uint256"}]),
    _write("withdrawEDT", [{"internalType": "uint256", "name": "_amount", "type": "uint256"}]),
    _view(
        "getGameRoom",
        [{"internalType": "bytes32", "name": "_gameRoomKey", "type": "bytes32"}],
        [{"components": _GAME_ROOM_COMPONENTS, "internalType": "struct IEnigmaDuel.GameRoom", "name": "", "type": "tuple"}],
    ),
    _view(
        "getUserbalance",
        [{"internalType": "address", "name": "_user", "type": "address"}],
        [{"components": _BALANCE_COMPONENTS, "internalType": "struct IEnigmaDuel.Balance", "name": "", "type": "tuple"}],
    ),
    _view("getFEE", [], [{"internalType": "uint256", "name": "", "type": "uint256"}]),
    _view("getDRAW_FEE", [], [{"internalType": "uint256", "name": "", "type": "uint256"}]),
    _view("getEDT", [], [{"internalType": "address", "name": "", "type": "address"}]),
    {
        "anonymous": False,
        "inputs": [
            {"indexed": False, "internalType": "uint8", "name": "status", "type": "uint8"},
            {"indexed": False, "internalType": "uint256", "name": "fee", "type": "uint256"},
            {"indexed": False, "internalType": "address", "name": "duelist1", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "duelist1Received", "type": "uint256"},
            {"indexed": False, "internalType": "address", "name": "duelist2", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "duelist2Received", "type": "uint256"},
        ],
        "name": "GameFinished",
        "type": "event",
    },
]

EDT_ABI: Final[list[dict[str, Any]]] = [
    _write(
        "approve",
        [
            {"internalType": "address", "name": "spender", "type": "address"},
            {"internalType": "uint256", "name": "value", "type": "uint256"},
        ],
        [{"internalType": "bool", "name": "", "type": "bool"}],
    ),
]
