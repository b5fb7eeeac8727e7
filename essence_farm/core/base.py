"""Base abstractions for planner tool modules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from essence_farm.models import Language


@dataclass
class ToolInfo:
    """Metadata about a planner tool for the start screen.

    Attributes:
        id: Unique identifier (e.g., "farming", "essence")
        name: Display name
        description: Brief description for the selection screen
        name_jp: Japanese display name
        description_jp: Japanese description
        order: Position on the start screen
    """
    id: str
    name: str
    description: str
    name_jp: str = ""
    description_jp: str = ""
    order: int = 0

    def label(self, language: Language = Language.EN) -> str:
        if language is Language.JP and self.name_jp:
            return self.name_jp
        return self.name

    def summary(self, language: Language = Language.EN) -> str:
        if language is Language.JP and self.description_jp:
            return self.description_jp
        return self.description


class PlannerTool(ABC):
    """Abstract base class for planner tools (plugin pattern).

    Each tool (farming, essence) implements this class to register
    with the system.
    """

    @classmethod
    @abstractmethod
    def get_info(cls) -> ToolInfo:
        """Return metadata about this tool."""
        pass

    @classmethod
    @abstractmethod
    def get_screen_class(cls) -> type:
        """Return the TUI screen class."""
        pass
