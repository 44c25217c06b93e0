from django.shortcuts import render
from django.views.decorators.http import require_http_methods

from rps_game import Choice, ScoreBoard


@require_http_methods(["GET"])
def index(request):
    # The live game is owned by the WebSocket consumer; the page starts blank.
    return render(request, "play/index.html", {
        "choices": list(Choice),
        "score": ScoreBoard(),
    })
