"""Shared screen behaviour."""

from textual.screen import Screen

from essence_farm.config import ui_text
from essence_farm.models import Language


class PlannerScreen(Screen):
    """Screen that redraws its labels when the app language changes."""

    @property
    def language(self) -> Language:
        return self.app.language

    def ui_label(self, key: str) -> str:
        return ui_text(key, self.language.value)

    def refresh_language(self) -> None:
        """Called by the app after the language is toggled."""
        pass
