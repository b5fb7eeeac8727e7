"""Essence browsing tool: weapons matching chosen tags."""

from essence_farm.core.base import PlannerTool, ToolInfo
from essence_farm.core.registry import ToolRegistry


@ToolRegistry.register
class EssenceTool(PlannerTool):
    """Pick tags, see which weapons want them."""

    @classmethod
    def get_info(cls) -> ToolInfo:
        return ToolInfo(
            id="essence",
            name="Essence Farming",
            name_jp="基質厳選",
            description="Browse weapons by main, stat and skill tag",
            description_jp="メイン・サブ・スキルタグで武器を絞り込む",
            order=2,
        )

    @classmethod
    def get_screen_class(cls) -> type:
        # Import here to avoid circular imports
        from essence_farm.screens.essence import EssenceScreen
        return EssenceScreen
