"""Japanese labels for tag values and weapon types.

Labels are display-only; matching always uses the English tag.
"""

TAG_LABELS_JP: dict[str, str] = {
    # Main attributes
    "Agility": "敏捷",
    "Strength": "筋力",
    "Will": "意志",
    "Intellect": "知性",
    "Main Attribute": "メイン能力",

    # Stats
    "Attack": "攻撃力",
    "HP": "HP",
    "Physical DMG": "物理ダメージ",
    "Heat DMG": "灼熱ダメージ",
    "Electric DMG": "電磁ダメージ",
    "Cryo DMG": "寒冷ダメージ",
    "Nature DMG": "自然ダメージ",
    "Crit Rate": "会心率",
    "Ultimate Gain": "必殺技効率",
    "Arts DMG": "アーツダメージ",
    "Arts Intensity": "アーツ強度",
    "Treatment Efficiency": "治療効率",

    # Skills
    "Assault": "強襲",
    "Suppression": "制圧",
    "Pursuit": "追撃",
    "Crusher": "粉砕",
    "Inspiring": "鼓舞",
    "Combative": "闘志",
    "Brutality": "残虐",
    "Infliction": "付与",
    "Medicant": "医療",
    "Fracture": "破砕",
    "Detonate": "爆破",
    "Twilight": "黄昏",
    "Flow": "奔流",
    "Efficacy": "効能",
}

WEAPON_TYPE_LABELS_JP: dict[str, str] = {
    "Greatsword": "大剣",
    "Polearm": "長柄武器",
    "Handcannon": "拳銃",
    "Sword": "片手剣",
    "Arts Unit": "アーツユニット",
}


def tag_label_jp(tag: str) -> str:
    """Japanese label for a tag, or the tag itself when none is known."""
    return TAG_LABELS_JP.get(tag, tag)
