# backend/utils/preferences.py
from fastapi import Request

from schemas.settings import Preferences


class PreferencesStore:
    """Holds the application preferences for the lifetime of the app.

    One instance lives on ``app.state``; routes reach it only through the
    ``get_preferences`` dependency.
    """

    def __init__(self, initial: Preferences):
        self._current = initial

    def get(self) -> Preferences:
        return self._current

    def replace(self, prefs: Preferences) -> Preferences:
        self._current = prefs
        return self._current

    def toggle_theme(self) -> Preferences:
        theme = "light" if self._current.theme == "dark" else "dark"
        self._current = self._current.model_copy(update={"theme": theme})
        return self._current


def get_preferences(request: Request) -> PreferencesStore:
    return request.app.state.preferences
