"""Command-line interface for the Rock-Paper-Scissors game."""
from __future__ import annotations
import argparse
import logging
from typing import Optional

from .game import GameSession, InvalidChoiceError, RoundRecord, SessionSnapshot, parse_choice


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="rps", description="Play Rock-Paper-Scissors against the computer.")
    p.add_argument("rounds", type=int, nargs="?", default=1, help="Number of rounds to play (default: 1)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every resolved round")
    return p.parse_args(argv)


def format_history(snapshot: SessionSnapshot) -> str:
    return "  ".join(
        f"{r.player_choice.value}/{r.opponent_choice.value}:{r.outcome.value.upper()}"
        for r in snapshot.history
    )


def print_round(record: RoundRecord, snapshot: SessionSnapshot) -> None:
    score = snapshot.score
    print(f"You: {record.player_choice.value}  Computer: {record.opponent_choice.value} -> {record.outcome.value.upper()}")
    print(f"Score  W:{score.wins} L:{score.losses} T:{score.ties}   Last rounds: {format_history(snapshot)}")


def interactive_rounds(session: GameSession, rounds: int) -> None:
    print(f"Playing {rounds} round(s). Enter 'quit' to exit early, 'reset' to start over.")
    played = 0
    while played < rounds:
        user = input(f"Round {played + 1} - your move (rock/paper/scissors): ").strip().lower()
        if user == "quit":
            print("Exiting early.")
            return
        if user == "reset":
            session.reset()
            played = 0
            print("Scores cleared.")
            continue
        try:
            choice = parse_choice(user)
        except InvalidChoiceError:
            print("Invalid move. Try again.")
            continue
        session.submit_choice(choice)
        played += 1


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    session = GameSession()
    session.add_listener(print_round)
    interactive_rounds(session, args.rounds)
    score = session.current_score()
    print("\nFinal score:")
    print(f"Wins: {score.wins}, Losses: {score.losses}, Ties: {score.ties}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
