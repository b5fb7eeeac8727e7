"""Core abstractions for the essence farm planner."""

from .base import PlannerTool, ToolInfo
from .registry import ToolRegistry

__all__ = [
    "PlannerTool",
    "ToolInfo",
    "ToolRegistry",
]
