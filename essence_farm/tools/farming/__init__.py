"""Weapon farming tool: best area and perfect matches for one weapon."""

from essence_farm.core.base import PlannerTool, ToolInfo
from essence_farm.core.registry import ToolRegistry


@ToolRegistry.register
class FarmingTool(PlannerTool):
    """Pick a weapon, see where to farm its essences."""

    @classmethod
    def get_info(cls) -> ToolInfo:
        return ToolInfo(
            id="farming",
            name="Weapon Farming",
            name_jp="武器厳選",
            description="Find the best area to farm a weapon's essences",
            description_jp="武器の基質を厳選する最適なエリアを探す",
            order=1,
        )

    @classmethod
    def get_screen_class(cls) -> type:
        # Import here to avoid circular imports
        from essence_farm.screens.farming import FarmingScreen
        return FarmingScreen
