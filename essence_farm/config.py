"""Planner configuration: rarity tables, display defaults and UI strings.

Catalogue data lives in essence_farm.data; this module only holds values
the presentation layer and loader share.
"""

# Weapon star ratings present in the game
RARITIES: tuple[int, ...] = (3, 4, 5, 6)

# Farming screen rarity filter buttons ("all" first)
RARITY_OPTIONS: tuple = ("all", 6, 5, 4, 3)

# Card background per rarity
# Format: {rarity: color}
RARITY_COLORS: dict[int, str] = {
    6: "#ff4d4d",   # red
    5: "#ffcc00",   # gold
    4: "#9933ff",   # purple
    3: "#3399ff",   # blue
}
DEFAULT_RARITY_COLOR: str = "#1a1a1a"

# Default display language ("en" or "jp")
DEFAULT_LANGUAGE: str = "en"

# Default log level for the CLI and TUI
DEFAULT_LOG_LEVEL: str = "WARNING"

# UI strings per language
UI_TEXT: dict[str, dict[str, str]] = {
    "en": {
        "select_tool": "Select Tool:",
        "weapon_farming": "Weapon Farming",
        "essence_farming": "Essence Farming",
        "select_weapon": "Select a weapon to find the best farming area",
        "select_tags": "Select tags to find matching weapons",
        "best_farming_area": "Best Farming Area",
        "no_area": "No farming area can roll this weapon's tags",
        "lock_secondary": "Lock secondary",
        "perfect": "perfect",
        "main_tag": "Main Tag",
        "stat_tag": "Secondary Tag",
        "skill_tag": "Skill Tag",
        "any": "Any",
        "all": "All",
        "none": "No matching weapons",
    },
    "jp": {
        "select_tool": "ツールを選択:",
        "weapon_farming": "武器厳選",
        "essence_farming": "基質厳選",
        "select_weapon": "武器を選択して最適な厳選エリアを探す",
        "select_tags": "タグを選択して一致する武器を探す",
        "best_farming_area": "最適な厳選エリア",
        "no_area": "この武器のタグを厳選できるエリアはありません",
        "lock_secondary": "サブタグ固定",
        "perfect": "完全一致",
        "main_tag": "メインタグ",
        "stat_tag": "サブタグ",
        "skill_tag": "スキルタグ",
        "any": "すべて",
        "all": "すべて",
        "none": "一致する武器はありません",
    },
}


def ui_text(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Look up a UI string, falling back to English, then the key."""
    table = UI_TEXT.get(language, UI_TEXT["en"])
    return table.get(key, UI_TEXT["en"].get(key, key))
