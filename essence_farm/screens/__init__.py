"""TUI screens for the essence farm planner."""

from .base import PlannerScreen
from .essence import EssenceScreen
from .farming import FarmingScreen
from .module_select import ToolSelectScreen

__all__ = [
    "EssenceScreen",
    "FarmingScreen",
    "PlannerScreen",
    "ToolSelectScreen",
]
