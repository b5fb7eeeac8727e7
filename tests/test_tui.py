"""Headless tests for the Textual screens."""

import asyncio

from textual.widgets import OptionList, Static

from essence_farm.config import ui_text
from essence_farm.matcher import recommend
from essence_farm.models import Language
from essence_farm.screens import EssenceScreen, FarmingScreen, ToolSelectScreen
from essence_farm.screens.essence import render_matches
from essence_farm.screens.farming import render_best_area
from essence_farm.tui import EssenceFarmApp


def test_render_best_area(by_id, weapons, areas):
    result = recommend(by_id["striker"], weapons, areas)

    text = render_best_area(by_id["striker"], result, Language.EN).plain

    assert "Area A" in text
    assert "Lock secondary: Attack  2 perfect" in text
    assert "Strength: Cleaver, Rookie" in text


def test_render_best_area_without_result(by_id):
    text = render_best_area(by_id["striker"], None, Language.JP).plain

    assert "ストライカー" in text
    assert "エリアはありません" in text


def test_render_matches_empty():
    assert render_matches([], Language.EN).plain == "No matching weapons"


def test_app_navigation(weapons, areas):
    async def scenario():
        app = EssenceFarmApp(weapons, areas)
        async with app.run_test() as pilot:
            assert isinstance(app.screen, ToolSelectScreen)

            app.screen.action_select_1()
            await pilot.pause()
            assert isinstance(app.screen, FarmingScreen)
            assert app.screen.query_one("#weapon-list", OptionList).option_count == len(weapons)

            app.action_toggle_language()
            await pilot.pause()
            assert app.language is Language.JP

            app.screen.action_back()
            await pilot.pause()
            app.screen.action_select_2()
            await pilot.pause()
            assert isinstance(app.screen, EssenceScreen)
            assert len(app.screen.current_matches()) == len(weapons)

    asyncio.run(scenario())


def test_tool_select_title_follows_language(weapons, areas):
    async def scenario():
        app = EssenceFarmApp(weapons, areas)
        async with app.run_test() as pilot:
            title = app.screen.query_one("#tool-title", Static)
            assert str(title.render()) == ui_text("select_tool", "en")

            app.action_toggle_language()
            await pilot.pause()
            assert str(title.render()) == ui_text("select_tool", "jp")

    asyncio.run(scenario())


def test_select_tool_label_is_localized():
    assert ui_text("select_tool", "en") == "Select Tool:"
    assert ui_text("select_tool", "jp") == "ツールを選択:"
