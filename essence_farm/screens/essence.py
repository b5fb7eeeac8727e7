"""Essence screen: choose tags, list the weapons that want them."""

from typing import Optional, Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, ScrollableContainer
from textual.widgets import Footer, Header, Label, Select, Static

from essence_farm.config import ui_text
from essence_farm.models import MAIN_SLOT, SKILL_SLOT, STAT_SLOT, Language, Weapon
from essence_farm.tag_filter import filter_weapons, tag_options
from essence_farm.utils import format_tags
from .base import PlannerScreen
from .farming import weapon_text

ANY = "any"

# (select id, tag slot, label key)
TAG_ROWS = (
    ("main-select", MAIN_SLOT, "main_tag"),
    ("stat-select", STAT_SLOT, "stat_tag"),
    ("skill-select", SKILL_SLOT, "skill_tag"),
)


def render_matches(weapons: Sequence[Weapon], language: Language = Language.EN) -> Text:
    """Matching weapons, one per line with their tags."""
    if not weapons:
        return Text(ui_text("none", language.value), style="dim")
    text = Text()
    for weapon in weapons:
        text.append_text(weapon_text(weapon, language))
        text.append(f"  {format_tags(weapon, language)}\n", style="dim")
    return text


class EssenceScreen(PlannerScreen):
    """Three tag selectors and the filtered weapon list."""

    CSS = """
    EssenceScreen {
        layout: vertical;
    }

    #title {
        text-align: center;
        text-style: bold;
        color: $accent;
        padding: 1;
    }

    #description {
        text-align: center;
        color: $text-muted;
    }

    .tag-row {
        height: 3;
        margin: 0 2;
    }

    .tag-label {
        width: 18;
        content-align: left middle;
        color: $warning;
    }

    .tag-select {
        width: 40;
    }

    #matches-container {
        height: 1fr;
        margin: 1 2;
        border: solid green;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("c", "clear", "Clear"),
    ]

    def __init__(self):
        super().__init__()
        self.constraints: dict[int, Optional[str]] = {
            MAIN_SLOT: None,
            STAT_SLOT: None,
            SKILL_SLOT: None,
        }

    def _options(self, slot: int) -> list[tuple[str, str]]:
        return [(self.ui_label("any"), ANY)] + tag_options(self.app.weapons, slot, self.language)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(self.ui_label("essence_farming"), id="title")
        yield Static(self.ui_label("select_tags"), id="description")

        for select_id, slot, label_key in TAG_ROWS:
            with Horizontal(classes="tag-row"):
                yield Label(self.ui_label(label_key), id=f"{select_id}-label", classes="tag-label")
                yield Select(
                    self._options(slot),
                    value=ANY,
                    allow_blank=False,
                    id=select_id,
                    classes="tag-select",
                )

        with ScrollableContainer(id="matches-container"):
            yield Static("", id="matches")

        yield Footer()

    def on_mount(self) -> None:
        self._refresh_matches()

    def current_matches(self) -> list[Weapon]:
        return filter_weapons(
            self.app.weapons,
            main_tag=self.constraints[MAIN_SLOT],
            stat_tag=self.constraints[STAT_SLOT],
            skill_tag=self.constraints[SKILL_SLOT],
        )

    def _refresh_matches(self) -> None:
        self.query_one("#matches", Static).update(
            render_matches(self.current_matches(), self.language)
        )

    def on_select_changed(self, event: Select.Changed) -> None:
        for select_id, slot, _ in TAG_ROWS:
            if event.select.id == select_id:
                self.constraints[slot] = None if event.value == ANY else event.value
                self._refresh_matches()
                return

    def refresh_language(self) -> None:
        self.query_one("#title", Static).update(self.ui_label("essence_farming"))
        self.query_one("#description", Static).update(self.ui_label("select_tags"))
        for select_id, slot, label_key in TAG_ROWS:
            self.query_one(f"#{select_id}-label", Label).update(self.ui_label(label_key))
            select = self.query_one(f"#{select_id}", Select)
            select.set_options(self._options(slot))
            select.value = self.constraints[slot] or ANY
        self._refresh_matches()

    def action_clear(self) -> None:
        for select_id, slot, _ in TAG_ROWS:
            self.constraints[slot] = None
            self.query_one(f"#{select_id}", Select).value = ANY
        self._refresh_matches()

    def action_back(self) -> None:
        self.app.pop_screen()
