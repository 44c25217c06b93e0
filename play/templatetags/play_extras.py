from django import template

from play.presentation import CHOICE_EMOJI
from rps_game import Choice

register = template.Library()


@register.filter
def choice_emoji(value):
    """Emoji for a move, accepting a Choice or its string value. Usage: {{ choice|choice_emoji }}"""
    try:
        return CHOICE_EMOJI[Choice(value)]
    except ValueError:
        return "?"
