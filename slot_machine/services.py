import logging
from dataclasses import dataclass

from sqlmodel import Session

from slot_machine.config import settings
from slot_machine.core.spin import Grid, SpinEngine, compute_winnings
from slot_machine.db.crud import create_player, find_player, log_spin, set_balance

logger = logging.getLogger(__name__)


@dataclass
class PlayerSession:
    player_id: int | None
    balance: float
    created: bool = False


@dataclass
class SpinOutcome:
    grid: Grid
    bet: float
    winnings: float
    balance: float


def provision_player(session: Session, name: str, age: int, card: str,
                     starting_balance: float | None = None) -> PlayerSession:
    player_id = find_player(session, name, age, card)
    created = False
    if player_id is None:
        create_player(session, name, age, card)
        player_id = find_player(session, name, age, card)
        created = True
        if player_id is None:
            logger.error("Player %r was not stored; continuing without a saved record", name)

    # every session starts from the same balance, whatever was stored before
    balance = settings.starting_balance if starting_balance is None else starting_balance
    set_balance(session, player_id, balance)
    logger.info("player_id=%s created=%s balance=%.2f", player_id, created, balance)
    return PlayerSession(player_id=player_id, balance=balance, created=created)


def settle_spin(session: Session, engine: SpinEngine, player: PlayerSession, bet: float) -> SpinOutcome:
    grid = engine.spin()
    winnings = compute_winnings(grid, bet)
    player.balance = player.balance + winnings - bet
    set_balance(session, player.player_id, player.balance)
    log_spin(session, player.player_id, bet, winnings, player.balance)
    logger.debug("player_id=%s bet=%.2f winnings=%.2f balance=%.2f",
                 player.player_id, bet, winnings, player.balance)
    return SpinOutcome(grid=grid, bet=bet, winnings=winnings, balance=player.balance)
