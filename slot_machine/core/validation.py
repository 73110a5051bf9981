import math

CHOICES = ("p", "q")


def parse_token(text: str) -> str:
    parts = (text or "").split()
    if not parts:
        raise ValueError("a value is required")
    return parts[0]


def parse_age(text: str) -> int:
    try:
        age = int(parse_token(text))
    except ValueError:
        raise ValueError("age must be a whole number") from None
    if age < 0:
        raise ValueError("age cannot be negative")
    return age


def parse_bet(text: str) -> float:
    try:
        bet = float(parse_token(text))
    except ValueError:
        raise ValueError("bet must be a number") from None
    if not math.isfinite(bet):
        raise ValueError("bet must be a finite number")
    if bet < 0:
        raise ValueError("bet cannot be negative")
    return bet


def parse_choice(text: str) -> str:
    choice = (text or "").strip().lower()
    if choice not in CHOICES:
        raise ValueError("choose 'p' to play or 'q' to quit")
    return choice
