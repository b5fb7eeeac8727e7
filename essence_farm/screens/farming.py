"""Weapon farming screen: pick a weapon, see its best farming area."""

from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.widgets import Footer, Header, OptionList, Select, Static
from textual.widgets.option_list import Option

from essence_farm.config import RARITY_OPTIONS, ui_text
from essence_farm.matcher import recommend
from essence_farm.models import BestAreaResult, Language, Weapon, WeaponType
from essence_farm.tag_filter import filter_by_rarity_and_type
from essence_farm.utils import format_rarity, format_tags, rarity_color, weapon_type_label
from .base import PlannerScreen


def weapon_text(weapon: Weapon, language: Language = Language.EN) -> Text:
    """One weapon as a rarity-colored line."""
    text = Text()
    text.append(f"{format_rarity(weapon.rarity)} ", style=rarity_color(weapon.rarity))
    text.append(weapon.label(language), style="bold")
    return text


def render_best_area(
    weapon: Weapon,
    result: Optional[BestAreaResult],
    language: Language = Language.EN,
) -> Text:
    """Best-area panel for a selected weapon.

    Groups under each lock list the weapon's own main tag first.
    """
    lang = language.value
    text = weapon_text(weapon, language)
    text.append("\n")
    text.append(format_tags(weapon, language), style="italic")
    text.append("\n\n")

    if result is None:
        text.append(ui_text("no_area", lang), style="red")
        return text

    text.append(f"{ui_text('best_farming_area', lang)}\n", style="bold yellow")
    text.append(f"{result.area.label(language)}\n", style="bold")

    for locked in result.locked_tags:
        text.append("\n")
        text.append(f"{ui_text('lock_secondary', lang)}: {locked.label(language)}", style="bold cyan")
        text.append(f"  {locked.perfect_count} {ui_text('perfect', lang)}\n")
        for group in locked.ordered_groups(weapon.main_tag):
            text.append(f"  {group.label(language)}: ", style="yellow")
            text.append(", ".join(w.label(language) for w in group.weapons))
            text.append("\n")
    return text


class FarmingScreen(PlannerScreen):
    """Rarity/type filters, a weapon list and the best-area panel."""

    CSS = """
    FarmingScreen {
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

    #filter-row {
        height: 3;
        margin: 1 2 0 2;
    }

    .filter-select {
        width: 24;
        margin-right: 2;
    }

    #farming-body {
        height: 1fr;
        padding: 0 2;
    }

    #weapon-list {
        width: 40;
        height: 100%;
    }

    #result-container {
        height: 100%;
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
        self.rarity: Optional[int] = None
        self.weapon_type: Optional[WeaponType] = None
        self.selected: Optional[Weapon] = None
        self.shown_weapons: list[Weapon] = []

    def _rarity_options(self) -> list[tuple[str, object]]:
        return [(format_rarity(r, self.language), r) for r in RARITY_OPTIONS]

    def _type_options(self) -> list[tuple[str, object]]:
        return [(self.ui_label("all"), "all")] + [
            (weapon_type_label(t, self.language), t) for t in WeaponType
        ]

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(self.ui_label("weapon_farming"), id="title")
        yield Static(self.ui_label("select_weapon"), id="description")

        with Horizontal(id="filter-row"):
            yield Select(
                self._rarity_options(),
                value="all",
                allow_blank=False,
                id="rarity-select",
                classes="filter-select",
            )
            yield Select(
                self._type_options(),
                value="all",
                allow_blank=False,
                id="type-select",
                classes="filter-select",
            )

        with Horizontal(id="farming-body"):
            yield OptionList(id="weapon-list")
            with Vertical():
                with ScrollableContainer(id="result-container"):
                    yield Static("", id="result")

        yield Footer()

    def on_mount(self) -> None:
        self._refresh_weapons()

    def _refresh_weapons(self) -> None:
        """Rebuild the weapon list from the current filters."""
        self.shown_weapons = filter_by_rarity_and_type(self.app.weapons, self.rarity, self.weapon_type)
        weapon_list = self.query_one("#weapon-list", OptionList)
        weapon_list.clear_options()
        weapon_list.add_options([
            Option(weapon_text(w, self.language), id=w.id) for w in self.shown_weapons
        ])

    def _refresh_result(self) -> None:
        result_widget = self.query_one("#result", Static)
        if self.selected is None:
            result_widget.update("")
            return
        result = recommend(self.selected, self.app.weapons, self.app.areas)
        result_widget.update(render_best_area(self.selected, result, self.language))

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "rarity-select":
            self.rarity = None if event.value == "all" else event.value
        elif event.select.id == "type-select":
            self.weapon_type = None if event.value == "all" else event.value
        else:
            return
        self._refresh_weapons()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        weapon_id = event.option.id
        self.selected = next((w for w in self.shown_weapons if w.id == weapon_id), None)
        self._refresh_result()

    def refresh_language(self) -> None:
        self.query_one("#title", Static).update(self.ui_label("weapon_farming"))
        self.query_one("#description", Static).update(self.ui_label("select_weapon"))

        rarity_select = self.query_one("#rarity-select", Select)
        rarity_select.set_options(self._rarity_options())
        rarity_select.value = "all" if self.rarity is None else self.rarity

        type_select = self.query_one("#type-select", Select)
        type_select.set_options(self._type_options())
        type_select.value = "all" if self.weapon_type is None else self.weapon_type

        self._refresh_weapons()
        self._refresh_result()

    def action_clear(self) -> None:
        self.selected = None
        self._refresh_result()

    def action_back(self) -> None:
        self.app.pop_screen()
