import pytest

from slot_machine.db.base import ensure_schema, open_database, session_scope


@pytest.fixture
def engine(tmp_path):
    eng = open_database(f"sqlite:///{tmp_path / 'slot_machine.db'}")
    ensure_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    with session_scope(engine) as s:
        yield s
