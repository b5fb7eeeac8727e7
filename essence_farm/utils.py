"""Utility functions for formatting and display."""
from typing import Optional

from essence_farm.config import DEFAULT_RARITY_COLOR, RARITY_COLORS, ui_text
from essence_farm.data import WEAPON_TYPE_LABELS_JP
from essence_farm.models import Language, Weapon, WeaponType


def format_rarity(rarity, language: Language = Language.EN) -> str:
    """Rarity as a star label ("★6"), or the localized "All"."""
    if rarity == "all" or rarity is None:
        return ui_text("all", language.value)
    return f"★{rarity}"


def rarity_color(rarity: Optional[int]) -> str:
    """Card color for a rarity."""
    return RARITY_COLORS.get(rarity, DEFAULT_RARITY_COLOR)


def weapon_type_label(weapon_type: WeaponType, language: Language = Language.EN) -> str:
    if language is Language.JP:
        return WEAPON_TYPE_LABELS_JP.get(weapon_type.value, weapon_type.value)
    return weapon_type.value


def format_tags(weapon: Weapon, language: Language = Language.EN, sep: str = " / ") -> str:
    """Non-empty tags joined for one-line display."""
    return sep.join(weapon.tag_labels(language))
