from unittest import mock

from channels.routing import URLRouter
from channels.testing import WebsocketCommunicator
from django.test import SimpleTestCase

from play.routing import websocket_urlpatterns
from rps_game import Choice, OpponentChoiceGenerator


class PlayConsumerTest(SimpleTestCase):
    def setUp(self):
        patcher = mock.patch.object(OpponentChoiceGenerator, "next", return_value=Choice.SCISSORS)
        patcher.start()
        self.addCleanup(patcher.stop)

    async def connect(self):
        communicator = WebsocketCommunicator(URLRouter(websocket_urlpatterns), "/ws/play/")
        connected, _ = await communicator.connect()
        self.assertTrue(connected)
        state = await communicator.receive_json_from()
        self.assertEqual(state["type"], "state")
        self.assertEqual(state["score"], {"wins": 0, "losses": 0, "ties": 0})
        self.assertEqual(state["history"], [])
        return communicator

    async def test_choose_plays_a_round(self):
        communicator = await self.connect()

        await communicator.send_json_to({"action": "choose", "choice": "rock"})
        data = await communicator.receive_json_from()

        self.assertEqual(data["type"], "round")
        self.assertEqual(data["round"], {
            "player": "rock",
            "opponent": "scissors",
            "outcome": "win",
            "badge": "WIN",
        })
        self.assertEqual(data["message"], "🎉 You Win! 🪨 beats ✂️")
        self.assertEqual(data["score"], {"wins": 1, "losses": 0, "ties": 0})
        self.assertEqual(len(data["history"]), 1)
        self.assertTrue(data["round_in_progress"])
        await communicator.disconnect()

    async def test_choice_ignored_until_animation_finishes(self):
        communicator = await self.connect()

        await communicator.send_json_to({"action": "choose", "choice": "rock"})
        await communicator.receive_json_from()
        await communicator.send_json_to({"action": "choose", "choice": "paper"})
        ignored = await communicator.receive_json_from()
        self.assertEqual(ignored, {"type": "ignored", "reason": "round in progress"})

        await communicator.send_json_to({"action": "finish"})
        state = await communicator.receive_json_from()
        self.assertFalse(state["round_in_progress"])
        self.assertEqual(state["score"], {"wins": 1, "losses": 0, "ties": 0})

        await communicator.send_json_to({"action": "choose", "choice": "paper"})
        data = await communicator.receive_json_from()
        self.assertEqual(data["round"]["outcome"], "lose")
        self.assertEqual(data["score"], {"wins": 1, "losses": 1, "ties": 0})
        self.assertEqual([r["player"] for r in data["history"]], ["paper", "rock"])
        await communicator.disconnect()

    async def test_finish_keeps_round_while_reset_clears_it(self):
        communicator = await self.connect()

        await communicator.send_json_to({"action": "choose", "choice": "paper"})
        played = await communicator.receive_json_from()
        await communicator.send_json_to({"action": "finish"})
        finished = await communicator.receive_json_from()
        self.assertEqual(finished["type"], "state")
        self.assertEqual(finished["score"], played["score"])
        self.assertEqual(finished["history"], [played["round"]])

        await communicator.send_json_to({"action": "reset"})
        cleared = await communicator.receive_json_from()
        self.assertEqual(cleared["history"], [])
        self.assertEqual(cleared["score"], {"wins": 0, "losses": 0, "ties": 0})
        await communicator.disconnect()

    async def test_history_shows_latest_five_rounds(self):
        communicator = await self.connect()
        played = ["rock", "paper", "scissors", "rock", "paper", "scissors"]

        for choice in played:
            await communicator.send_json_to({"action": "choose", "choice": choice})
            data = await communicator.receive_json_from()
            self.assertEqual(data["type"], "round")
            self.assertEqual(data["history"][0], data["round"])
            await communicator.send_json_to({"action": "finish"})
            await communicator.receive_json_from()

        self.assertEqual(
            [r["player"] for r in data["history"]],
            ["scissors", "paper", "rock", "scissors", "paper"],
        )
        self.assertEqual(data["score"], {"wins": 2, "losses": 2, "ties": 2})
        await communicator.disconnect()

    async def test_invalid_choice_is_rejected(self):
        communicator = await self.connect()

        await communicator.send_json_to({"action": "choose", "choice": "lizard"})
        data = await communicator.receive_json_from()
        self.assertEqual(data["type"], "error")
        self.assertIn("choice", data["errors"])

        await communicator.send_json_to({"action": "finish"})
        state = await communicator.receive_json_from()
        self.assertEqual(state["score"], {"wins": 0, "losses": 0, "ties": 0})
        self.assertEqual(state["history"], [])
        await communicator.disconnect()

    async def test_unknown_action(self):
        communicator = await self.connect()

        await communicator.send_json_to({"action": "cheat"})
        data = await communicator.receive_json_from()
        self.assertEqual(data["type"], "error")
        self.assertIn("action", data["errors"])
        await communicator.disconnect()

    async def test_reset_mid_round(self):
        communicator = await self.connect()

        await communicator.send_json_to({"action": "choose", "choice": "scissors"})
        await communicator.receive_json_from()
        await communicator.send_json_to({"action": "reset"})
        state = await communicator.receive_json_from()
        self.assertEqual(state, {
            "type": "state",
            "score": {"wins": 0, "losses": 0, "ties": 0},
            "history": [],
            "round_in_progress": False,
        })

        await communicator.send_json_to({"action": "choose", "choice": "scissors"})
        data = await communicator.receive_json_from()
        self.assertEqual(data["round"]["outcome"], "tie")
        self.assertEqual(data["message"], "🤝 It's a Tie! Both chose ✂️")
        await communicator.disconnect()
