"""Rock-Paper-Scissors game core."""
from .game import (
    BEATS,
    HISTORY_SIZE,
    VALID_MOVES,
    Choice,
    GameSession,
    InvalidChoiceError,
    OpponentChoiceGenerator,
    Outcome,
    RoundRecord,
    ScoreBoard,
    SessionSnapshot,
    parse_choice,
    resolve,
)

__all__ = [
    "BEATS",
    "HISTORY_SIZE",
    "VALID_MOVES",
    "Choice",
    "GameSession",
    "InvalidChoiceError",
    "OpponentChoiceGenerator",
    "Outcome",
    "RoundRecord",
    "ScoreBoard",
    "SessionSnapshot",
    "parse_choice",
    "resolve",
]
