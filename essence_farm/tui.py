"""TUI for the essence farm planner using Textual."""
import argparse
import sys
from typing import Optional, Sequence

from textual.app import App
from textual.binding import Binding

from essence_farm import tools  # noqa: F401  registers the planner tools
from essence_farm.catalogue import CatalogueError, load_catalogue
from essence_farm.config import DEFAULT_LANGUAGE, DEFAULT_LOG_LEVEL
from essence_farm.log import get_logger, setup_logging
from essence_farm.models import Area, Language, Weapon
from essence_farm.screens import PlannerScreen, ToolSelectScreen

logger = get_logger(__name__)


class EssenceFarmApp(App):
    """Main TUI application.

    Holds the catalogues and the display language; screens read them
    from ``self.app`` and keep their own selection state.
    """

    TITLE = "Essence Farm Planner"
    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("l", "toggle_language", "EN/JP", show=True),
    ]

    def __init__(
        self,
        weapons: Sequence[Weapon],
        areas: Sequence[Area],
        language: Language = Language.EN,
    ):
        super().__init__()
        self.weapons = tuple(weapons)
        self.areas = tuple(areas)
        self.language = language

    def on_mount(self) -> None:
        self.sub_title = self.language.value.upper()
        self.push_screen(ToolSelectScreen())

    def action_toggle_language(self) -> None:
        self.language = self.language.toggled()
        self.sub_title = self.language.value.upper()
        logger.debug("Language switched to %s", self.language.value)
        for screen in self.screen_stack:
            if isinstance(screen, PlannerScreen):
                screen.refresh_language()


def main(argv: Optional[list[str]] = None):
    """Entry point for the TUI."""
    parser = argparse.ArgumentParser(description="Essence Farm Planner (TUI)")
    parser.add_argument(
        "--catalogue",
        help="JSON file with 'weapons' and optional 'areas' arrays",
    )
    parser.add_argument(
        "--lang",
        choices=[lang.value for lang in Language],
        default=DEFAULT_LANGUAGE,
        help=f"Display language (default: {DEFAULT_LANGUAGE})",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Log level (default: {DEFAULT_LOG_LEVEL})",
    )
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        weapons, areas = load_catalogue(args.catalogue)
    except (CatalogueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    app = EssenceFarmApp(weapons, areas, Language(args.lang))
    app.run()


if __name__ == "__main__":
    main()
