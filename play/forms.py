from django import forms

from rps_game import Choice, parse_choice


class ChoiceForm(forms.Form):
    choice = forms.ChoiceField(
        choices=[(c.value, c.value.title()) for c in Choice],
        required=True
    )

    def clean_choice(self):
        """Hand the game a Choice, never the raw string."""
        return parse_choice(self.cleaned_data['choice'])
