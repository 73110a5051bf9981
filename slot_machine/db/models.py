from sqlmodel import SQLModel, Field


class Player(SQLModel, table=True):
    __tablename__ = "players"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    age: int | None = None
    card: str | None = None
    # the database default applies when a row is inserted without a balance
    balance: float = Field(default=0.0, sa_column_kwargs={"server_default": "0"})


class SpinHistory(SQLModel, table=True):
    __tablename__ = "spin_history"

    id: int | None = Field(default=None, primary_key=True)
    player_id: int | None = Field(default=None, foreign_key="players.id")
    bet: float
    winnings: float
    balance: float  # balance right after the spin
