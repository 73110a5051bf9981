from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    db_dsn: str = os.getenv("DB_DSN", "sqlite:///./slot_machine.db")
    starting_balance: float = float(os.getenv("STARTING_BALANCE", 100.0))
    weighted_spin: bool = os.getenv("WEIGHTED_SPIN", "0") in ("1", "true", "True")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

settings = Settings()
