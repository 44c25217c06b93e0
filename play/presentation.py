"""How rounds look on screen: emoji, result badges, narration and JSON payloads."""
from rps_game import Choice, Outcome, RoundRecord, ScoreBoard, SessionSnapshot

CHOICE_EMOJI = {
    Choice.ROCK: "🪨",
    Choice.PAPER: "📄",
    Choice.SCISSORS: "✂️",
}

BADGES = {
    Outcome.WIN: "WIN",
    Outcome.LOSE: "LOSE",
    Outcome.TIE: "TIE",
}


def result_message(record: RoundRecord) -> str:
    player = CHOICE_EMOJI[record.player_choice]
    computer = CHOICE_EMOJI[record.opponent_choice]
    if record.outcome is Outcome.WIN:
        return f"🎉 You Win! {player} beats {computer}"
    if record.outcome is Outcome.LOSE:
        return f"💻 Computer Wins! {computer} beats {player}"
    return f"🤝 It's a Tie! Both chose {player}"


def round_data(record: RoundRecord) -> dict:
    return {
        "player": record.player_choice.value,
        "opponent": record.opponent_choice.value,
        "outcome": record.outcome.value,
        "badge": BADGES[record.outcome],
    }


def score_data(score: ScoreBoard) -> dict:
    return {"wins": score.wins, "losses": score.losses, "ties": score.ties}


def state_payload(snapshot: SessionSnapshot) -> dict:
    return {
        "type": "state",
        "score": score_data(snapshot.score),
        "history": [round_data(r) for r in snapshot.history],
        "round_in_progress": snapshot.round_in_progress,
    }


def round_payload(record: RoundRecord, snapshot: SessionSnapshot) -> dict:
    payload = state_payload(snapshot)
    payload.update({
        "type": "round",
        "round": round_data(record),
        "message": result_message(record),
    })
    return payload
