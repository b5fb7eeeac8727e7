"""Registry for planner tool modules."""

from typing import Dict, Optional, Type

from .base import PlannerTool, ToolInfo


class ToolRegistry:
    """Central registry for all planner tools.

    Use the @ToolRegistry.register decorator to register tools.

    Example:
        @ToolRegistry.register
        class FarmingTool(PlannerTool):
            ...
    """

    _tools: Dict[str, Type[PlannerTool]] = {}

    @classmethod
    def register(cls, tool_class: Type[PlannerTool]) -> Type[PlannerTool]:
        """Decorator to register a tool.

        Args:
            tool_class: The tool class to register

        Returns:
            The same tool class (for decorator chaining)
        """
        info = tool_class.get_info()
        cls._tools[info.id] = tool_class
        return tool_class

    @classmethod
    def get(cls, tool_id: str) -> Optional[Type[PlannerTool]]:
        """Get a tool by its ID, or None if not found."""
        return cls._tools.get(tool_id)

    @classmethod
    def get_all_info(cls) -> list[ToolInfo]:
        """Get info for all tools in start-screen order.

        Returns:
            List of ToolInfo sorted by order, then name
        """
        return sorted(
            [t.get_info() for t in cls._tools.values()],
            key=lambda x: (x.order, x.name)
        )
