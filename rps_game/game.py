"""Core game logic for Rock-Paper-Scissors."""
from __future__ import annotations
import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

HISTORY_SIZE = 5


class Choice(str, Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


class Outcome(str, Enum):
    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


VALID_MOVES = tuple(c.value for c in Choice)

# key beats value
BEATS = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSORS: Choice.PAPER,
}


class InvalidChoiceError(ValueError):
    """Raised when raw input does not name one of the three moves."""


def parse_choice(raw: str) -> Choice:
    """Turn raw user input into a Choice.

    Accepts any case and surrounding whitespace. Anything else raises
    InvalidChoiceError, so bad input never reaches GameSession.
    """
    if isinstance(raw, Choice):
        return raw
    if not isinstance(raw, str):
        raise InvalidChoiceError(f"invalid move: {raw!r}. valid moves: {VALID_MOVES}")
    try:
        return Choice(raw.strip().lower())
    except ValueError:
        raise InvalidChoiceError(f"invalid move: {raw!r}. valid moves: {VALID_MOVES}") from None


def resolve(player: Choice, opponent: Choice) -> Outcome:
    """Decide a single round from the player's point of view.

    Returns:
      Outcome.TIE if both picked the same move,
      Outcome.WIN if player's move beats opponent's,
      Outcome.LOSE otherwise.
    """
    if player == opponent:
        return Outcome.TIE
    if BEATS[player] == opponent:
        return Outcome.WIN
    return Outcome.LOSE


class OpponentChoiceGenerator:
    """Draws the computer's move uniformly at random, independent of past draws."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()

    def next(self) -> Choice:
        return self._rng.choice(tuple(Choice))


@dataclass(frozen=True)
class RoundRecord:
    player_choice: Choice
    opponent_choice: Choice
    outcome: Outcome


@dataclass(frozen=True)
class ScoreBoard:
    wins: int = 0
    losses: int = 0
    ties: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.ties

    def record(self, outcome: Outcome) -> "ScoreBoard":
        """Return a new board with the counter for ``outcome`` bumped by one."""
        if outcome is Outcome.WIN:
            return ScoreBoard(self.wins + 1, self.losses, self.ties)
        if outcome is Outcome.LOSE:
            return ScoreBoard(self.wins, self.losses + 1, self.ties)
        return ScoreBoard(self.wins, self.losses, self.ties + 1)


HistoryLog = Tuple[RoundRecord, ...]


@dataclass(frozen=True)
class SessionSnapshot:
    score: ScoreBoard
    history: HistoryLog
    round_in_progress: bool


RoundListener = Callable[[RoundRecord, SessionSnapshot], None]


class GameSession:
    """One player's game: scores, the last few rounds and the in-progress flag.

    A session is either idle or has a round in progress. ``submit_choice``
    is ignored while a round is in progress; with ``hold=True`` the session
    stays in that state after the round is recorded until ``finish_round``
    or ``reset`` is called. Ignored submissions are never queued.
    """

    def __init__(self, opponent: Optional[OpponentChoiceGenerator] = None):
        self._opponent = opponent if opponent is not None else OpponentChoiceGenerator()
        self._score = ScoreBoard()
        self._history: deque[RoundRecord] = deque(maxlen=HISTORY_SIZE)
        self._in_progress = False
        self._listeners: List[RoundListener] = []

    @property
    def round_in_progress(self) -> bool:
        return self._in_progress

    def current_score(self) -> ScoreBoard:
        return self._score

    def history(self) -> HistoryLog:
        """Most recent round first, at most HISTORY_SIZE entries."""
        return tuple(self._history)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(self._score, self.history(), self._in_progress)

    def add_listener(self, listener: RoundListener) -> None:
        self._listeners.append(listener)

    def submit_choice(self, choice: Choice, hold: bool = False) -> Optional[RoundRecord]:
        """Play one round against the computer.

        Args:
          choice: the player's move; raw input must go through parse_choice first.
          hold: keep the round marked in progress after it is recorded, until
            finish_round() or reset().

        Returns the completed RoundRecord, or None if a round was already in
        progress and the submission was ignored.
        """
        if not isinstance(choice, Choice):
            raise TypeError(f"expected Choice, got {type(choice).__name__}")
        if self._in_progress:
            logger.debug("Ignoring %s: round already in progress", choice.value)
            return None

        self._in_progress = True
        try:
            opponent_choice = self._opponent.next()
            outcome = resolve(choice, opponent_choice)
            record = RoundRecord(choice, opponent_choice, outcome)
            new_score = self._score.record(outcome)
            new_history = deque(self._history, maxlen=HISTORY_SIZE)
            # a full deque drops from the right, i.e. the oldest round
            new_history.appendleft(record)
            # commit score and history together
            self._score, self._history = new_score, new_history
        except Exception:
            self._in_progress = False
            raise
        if not hold:
            self._in_progress = False

        logger.debug(
            "Round resolved: %s vs %s -> %s (%d-%d-%d)",
            choice.value, opponent_choice.value, outcome.value,
            new_score.wins, new_score.losses, new_score.ties,
        )
        snapshot = self.snapshot()
        for listener in self._listeners:
            listener(record, snapshot)
        return record

    def finish_round(self) -> None:
        """Mark a held round as complete so new submissions are accepted."""
        self._in_progress = False

    def reset(self) -> None:
        """Back to a fresh game: zero scores, empty history, idle."""
        self._score = ScoreBoard()
        self._history = deque(maxlen=HISTORY_SIZE)
        self._in_progress = False
        logger.info("Game reset")


if __name__ == "__main__":
    print("Run the CLI with `python -m rps_game.cli` or import rps_game.game")
