from sqlmodel import Session, create_engine, select
from typer.testing import CliRunner

from slot_machine.cli.main import app
from slot_machine.config import settings
from slot_machine.db.models import Player, SpinHistory

runner = CliRunner()


def _use_db(monkeypatch, tmp_path):
    dsn = f"sqlite:///{tmp_path / 'slot_machine.db'}"
    monkeypatch.setattr(settings, "db_dsn", dsn)
    return dsn


def _rows(dsn, model):
    eng = create_engine(dsn)
    try:
        with Session(eng) as s:
            return s.exec(select(model)).all()
    finally:
        eng.dispose()


def test_play_one_spin_then_quit(monkeypatch, tmp_path):
    dsn = _use_db(monkeypatch, tmp_path)
    result = runner.invoke(app, [], input="Alice\n30\n1111\np\n20\nq\n")
    assert result.exit_code == 0
    assert "New player detected. Adding to database." in result.output
    assert "New Balance: 80" in result.output

    players = _rows(dsn, Player)
    assert [(p.name, p.age, p.card, p.balance) for p in players] == [("Alice", 30, "1111", 80.0)]
    spins = _rows(dsn, SpinHistory)
    assert [(h.bet, h.winnings, h.balance) for h in spins] == [(20.0, 0.0, 80.0)]


def test_second_session_resets_balance(monkeypatch, tmp_path):
    dsn = _use_db(monkeypatch, tmp_path)
    runner.invoke(app, [], input="Alice\n30\n1111\np\n15\nq\n")
    result = runner.invoke(app, [], input="Alice\n30\n1111\nq\n")
    assert result.exit_code == 0
    assert "New player detected" not in result.output
    players = _rows(dsn, Player)
    assert len(players) == 1
    assert players[0].balance == 100.0


def test_bad_input_is_reprompted(monkeypatch, tmp_path):
    _use_db(monkeypatch, tmp_path)
    result = runner.invoke(app, [], input="Alice\nthirty\n30\n1111\nx\np\nabc\n-5\n20\nq\n")
    assert result.exit_code == 0
    assert result.output.count("Invalid input") == 4
    assert "New Balance: 80" in result.output


def test_unopenable_database_exits_nonzero(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "db_dsn", f"sqlite:///{tmp_path / 'missing' / 'dir' / 'slot_machine.db'}")
    result = runner.invoke(app, [], input="Alice\n30\n1111\nq\n")
    assert result.exit_code == 1
    assert "Error opening database." in result.output


def test_end_of_input_quits(monkeypatch, tmp_path):
    dsn = _use_db(monkeypatch, tmp_path)
    result = runner.invoke(app, [], input="Al\n3\nc\np\n5\n")
    assert result.exit_code == 0
    assert "New Balance: 95" in result.output
    assert [h.balance for h in _rows(dsn, SpinHistory)] == [95.0]


def test_unopenable_database_prints_no_traceback(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "db_dsn", f"sqlite:///{tmp_path / 'missing' / 'slot_machine.db'}")
    result = runner.invoke(app, [], input="")
    assert result.exit_code == 1
    assert "Traceback" not in result.output
