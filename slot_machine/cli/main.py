import logging
from typing import Callable, TypeVar

import typer
from sqlmodel import Session

from slot_machine.config import settings
from slot_machine.core.spin import SpinEngine, format_grid
from slot_machine.core.validation import parse_age, parse_bet, parse_choice, parse_token
from slot_machine.db.base import DatabaseUnavailable, ensure_schema, open_database, session_scope
from slot_machine.logging_config import configure_logging
from slot_machine.services import provision_player, settle_spin

T = TypeVar("T")

app = typer.Typer()
logger = logging.getLogger(__name__)


def _ask(text: str, parse: Callable[[str], T]) -> T:
    while True:
        raw = typer.prompt(text)
        try:
            return parse(raw)
        except ValueError as exc:
            typer.echo(f"Invalid input: {exc}")


def run_game(session: Session, spinner: SpinEngine) -> None:
    name = _ask("Enter your name", parse_token)
    age = _ask("Enter your age", parse_age)
    card = _ask("Enter your card", parse_token)

    player = provision_player(session, name, age, card)
    if player.created:
        typer.echo("New player detected. Adding to database.")

    while True:
        try:
            choice = _ask("Press 'p' to play, 'q' to quit", parse_choice)
        except typer.Abort:
            # stdin closed
            break
        if choice == "q":
            break

        bet = _ask("Enter your bet amount", parse_bet)
        outcome = settle_spin(session, spinner, player, bet)
        typer.echo(format_grid(outcome.grid))
        typer.echo(f"New Balance: {outcome.balance:g}")


@app.command()
def play():
    """Play the slot machine until 'q' is entered."""
    configure_logging(settings.log_level)
    try:
        engine = open_database(settings.db_dsn)
    except DatabaseUnavailable:
        logger.debug("Database open failed", exc_info=True)
        typer.echo("Error opening database.", err=True)
        raise typer.Exit(code=1)

    try:
        ensure_schema(engine)
        spinner = SpinEngine(weighted=settings.weighted_spin)
        with session_scope(engine) as session:
            run_game(session, spinner)
    finally:
        engine.dispose()


if __name__ == "__main__":
    app()
