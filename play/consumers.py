import logging

from channels.generic.websocket import AsyncJsonWebsocketConsumer

from rps_game import GameSession

from .forms import ChoiceForm
from .presentation import round_payload, state_payload

logger = logging.getLogger(__name__)


class PlayConsumer(AsyncJsonWebsocketConsumer):
    """One game per connection; reloading the page starts a new one."""

    async def connect(self):
        self.session = GameSession()
        await self.accept()
        logger.info("Game started for %s", self.scope.get("client"))
        await self.send_json(state_payload(self.session.snapshot()))

    async def disconnect(self, close_code):
        score = self.session.current_score()
        logger.info(
            "Game closed (%s): %d-%d-%d after %d rounds",
            close_code, score.wins, score.losses, score.ties, score.total,
        )

    async def receive_json(self, content, **kwargs):
        action = content.get("action") if isinstance(content, dict) else None

        if action == "choose":
            await self.choose(content)
        elif action == "finish":
            self.session.finish_round()
            await self.send_json(state_payload(self.session.snapshot()))
        elif action == "reset":
            self.session.reset()
            await self.send_json(state_payload(self.session.snapshot()))
        else:
            logger.warning("Unknown action %r", action)
            await self.send_json({
                "type": "error",
                "errors": {"action": [{"message": "Unknown action.", "code": "invalid"}]},
            })

    async def choose(self, content):
        form = ChoiceForm(data={"choice": content.get("choice")})
        if not form.is_valid():
            logger.warning("Rejected choice %r", content.get("choice"))
            await self.send_json({"type": "error", "errors": form.errors.get_json_data()})
            return

        # held until the browser reports its reveal animation is over
        record = self.session.submit_choice(form.cleaned_data["choice"], hold=True)
        if record is None:
            await self.send_json({"type": "ignored", "reason": "round in progress"})
            return
        await self.send_json(round_payload(record, self.session.snapshot()))
