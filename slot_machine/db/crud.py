import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from slot_machine.db.models import Player, SpinHistory

logger = logging.getLogger(__name__)


def find_player(session: Session, name: str, age: int, card: str) -> int | None:
    return session.exec(
        select(Player.id)
        .where(Player.name == name)
        .where(Player.age == age)
        .where(Player.card == card)
        .order_by(Player.id)
        .limit(1)
    ).first()


def create_player(session: Session, name: str, age: int, card: str) -> None:
    # balance falls back to its default; callers look the id up again
    try:
        session.add(Player(name=name, age=age, card=card))
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.error("Error adding player.", exc_info=True)


def set_balance(session: Session, player_id: int | None, balance: float) -> None:
    try:
        player = session.get(Player, player_id) if player_id is not None else None
        if player is None:
            logger.warning("No player with id %s; balance not stored.", player_id)
            return
        player.balance = balance
        session.add(player)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.error("Error updating balance.", exc_info=True)


def get_balance(session: Session, player_id: int) -> float | None:
    return session.exec(select(Player.balance).where(Player.id == player_id)).first()


def log_spin(session: Session, player_id: int | None, bet: float, winnings: float, balance: float) -> None:
    try:
        session.add(SpinHistory(player_id=player_id, bet=bet, winnings=winnings, balance=balance))
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.error("Error saving spin history.", exc_info=True)
