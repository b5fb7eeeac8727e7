"""Start screen for choosing a planner tool."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Button, Footer, Header, Static

from essence_farm.core import ToolInfo, ToolRegistry
from .base import PlannerScreen


class ToolButton(Button):
    """Button representing a selectable tool."""

    def __init__(self, tool_info: ToolInfo, position: int, label: str):
        self.tool_info = tool_info
        self.position = position
        super().__init__(self.make_label(label), id=f"tool-btn-{tool_info.id}")

    def make_label(self, label: str) -> str:
        return f"[{self.position}] {label}"


class ToolSelectScreen(PlannerScreen):
    """Starting screen listing every registered planner tool."""

    CSS = """
    ToolSelectScreen {
        layout: vertical;
    }

    #tool-list-container {
        height: 1fr;
        padding: 1 2;
    }

    #tool-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    ToolButton {
        width: 100%;
        margin: 1 0;
    }

    .tool-description {
        color: $text-muted;
        margin-left: 4;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("1", "select_1", "Select 1", show=False),
        Binding("2", "select_2", "Select 2", show=False),
    ]

    def __init__(self):
        super().__init__()
        self.tools = ToolRegistry.get_all_info()

    def compose(self) -> ComposeResult:
        yield Header()

        with Container(id="tool-list-container"):
            yield Static(self.ui_label("select_tool"), id="tool-title")

            for i, tool_info in enumerate(self.tools, 1):
                yield ToolButton(tool_info, i, tool_info.label(self.language))
                yield Static(
                    tool_info.summary(self.language),
                    id=f"tool-desc-{tool_info.id}",
                    classes="tool-description",
                )

        yield Footer()

    def refresh_language(self) -> None:
        self.query_one("#tool-title", Static).update(self.ui_label("select_tool"))
        for button in self.query(ToolButton):
            button.label = button.make_label(button.tool_info.label(self.language))
        for tool_info in self.tools:
            self.query_one(f"#tool-desc-{tool_info.id}", Static).update(
                tool_info.summary(self.language)
            )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, ToolButton):
            self._select_tool(event.button.tool_info)

    def _select_tool(self, tool_info: ToolInfo) -> None:
        tool_class = ToolRegistry.get(tool_info.id)
        if tool_class:
            self.app.push_screen(tool_class.get_screen_class()())

    def _select_by_index(self, index: int) -> None:
        """Select a tool by its index (1-based)."""
        if 0 < index <= len(self.tools):
            self._select_tool(self.tools[index - 1])

    def action_select_1(self) -> None:
        self._select_by_index(1)

    def action_select_2(self) -> None:
        self._select_by_index(2)

    def action_quit(self) -> None:
        self.app.exit()
