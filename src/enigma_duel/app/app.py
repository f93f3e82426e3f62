"""Point d'entrée en ligne de commande du client Enigma Duel (`enigma-duel`)."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from enigma_duel.app.startup import startup
from enigma_duel.app.services import Services
from enigma_duel.config import load_settings
from enigma_duel.exceptions.base import AppError
from enigma_duel.exceptions.messages import error_message
from enigma_duel.features.ledger.models import ZERO_ADDRESS, GameRoom
from enigma_duel.utils.hexcodec import room_key_to_hex
from enigma_duel.utils.logging import setup_logging
from enigma_duel.version import VERSION

log = logging.getLogger(__name__)

DRAW_KEYWORDS = ("draw", "nul", "0", "0x0")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="enigma-duel", description="Client du contrat Enigma Duel.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="logs de niveau DEBUG")
    sub = parser.add_subparsers(dest="command", required=True)

    room = sub.add_parser("room", help="affiche une room")
    room.add_argument("key")

    balance = sub.add_parser("balance", help="affiche le solde d'une adresse")
    balance.add_argument("address")

    sub.add_parser("fees", help="affiche les frais (victoire / nul)")
    sub.add_parser("token", help="affiche l'adresse du token EDT")

    start = sub.add_parser("start", help="ouvre une room entre deux duellistes")
    start.add_argument("duelist1")
    start.add_argument("duelist2")
    start.add_argument("prize_pool")

    finish = sub.add_parser("finish", help="termine une room (winner=draw pour un nul)")
    finish.add_argument("key")
    finish.add_argument("winner")

    deposit = sub.add_parser("deposit", help="dépose des EDT dans le contrat")
    deposit.add_argument("amount")

    withdraw = sub.add_parser("withdraw", help="retire des EDT du contrat")
    withdraw.add_argument("amount")

    return parser


async def execute(services: Services, args: argparse.Namespace) -> dict[str, Any]:
    """Exécute la commande demandée et retourne un résultat sérialisable en JSON."""
    game_room = services.game_room
    treasury = services.treasury

    match args.command:
        case "room":
            return (await game_room.get_game_room(args.key)).to_dict()

        case "balance":
            return (await game_room.get_user_balance(args.address)).to_dict()

        case "fees":
            fee, draw_fee = await asyncio.gather(game_room.get_fee(), game_room.get_draw_fee())
            return {"fee": str(fee), "draw_fee": str(draw_fee)}

        case "token":
            return {"edt": await treasury.get_edt()}

        case "start":
            request = GameRoom.request(args.duelist1, args.duelist2, args.prize_pool)
            room, key = await game_room.start_game_room(request)
            return {"key": room_key_to_hex(key), "room": room.to_dict()}

        case "finish":
            winner = ZERO_ADDRESS if args.winner.lower() in DRAW_KEYWORDS else args.winner
            return (await game_room.finish_game_room(args.key, winner)).to_dict()

        case "deposit":
            return (await treasury.deposit_edt(args.amount)).to_dict()

        case "withdraw":
            return (await treasury.withdraw_edt(args.amount)).to_dict()

        case _:
            raise ValueError(f"Commande inconnue: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout est réservé au résultat JSON
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, stream=sys.stderr)

    try:
        services = startup(load_settings())
        result = asyncio.run(execute(services, args))
    except AppError as e:
        log.debug("Commande %s en échec", args.command, exc_info=e)
        print(error_message(e), file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


def run() -> None:
    sys.exit(main())
