"""Farming area catalogue.

Each area lists every value its essences can roll per slot:
(main attributes, stats, skills). Order matters: it is the tie-break
order when two areas score the same.
"""

_MAIN_ATTRIBUTES = ["Agility", "Strength", "Will", "Intellect", "Main Attribute"]

AREA_RECORDS: list[dict] = [
    {
        "id": "area1",
        "name": "Severe Energy Alluvium: Originium Science Park",
        "name_jp": "重度エネルギー沖積層：源石科学園区",
        "tag_slots": [
            _MAIN_ATTRIBUTES,
            [
                "Attack",
                "Physical DMG",
                "Electric DMG",
                "Cryo DMG",
                "Nature DMG",
                "Crit Rate",
                "Ultimate Gain",
                "Arts DMG",
            ],
            [
                "Suppression",
                "Pursuit",
                "Inspiring",
                "Combative",
                "Infliction",
                "Medicant",
                "Fracture",
                "Efficacy",
            ],
        ],
    },
    {
        "id": "area2",
        "name": "Severe Energy Alluvium: Power Plateau",
        "name_jp": "重度エネルギー沖積層：発電高原",
        "tag_slots": [
            _MAIN_ATTRIBUTES,
            [
                "Attack",
                "HP",
                "Physical DMG",
                "Heat DMG",
                "Nature DMG",
                "Crit Rate",
                "Arts Intensity",
                "Treatment Efficiency",
            ],
            [
                "Pursuit",
                "Crusher",
                "Inspiring",
                "Brutality",
                "Infliction",
                "Medicant",
                "Fracture",
                "Flow",
            ],
        ],
    },
    {
        "id": "area3",
        "name": "Severe Energy Alluvium: The Hub",
        "name_jp": "重度エネルギー沖積層：枢紐区",
        "tag_slots": [
            _MAIN_ATTRIBUTES,
            [
                "Attack",
                "Heat DMG",
                "Electric DMG",
                "Cryo DMG",
                "Nature DMG",
                "Arts Intensity",
                "Ultimate Gain",
                "Arts DMG",
            ],
            [
                "Assault",
                "Suppression",
                "Pursuit",
                "Crusher",
                "Combative",
                "Detonate",
                "Flow",
                "Efficacy",
            ],
        ],
    },
    {
        "id": "area4",
        "name": "Severe Energy Alluvium: Origin Lodespring",
        "name_jp": "重度エネルギー沖積層：源鉱泉",
        "tag_slots": [
            _MAIN_ATTRIBUTES,
            [
                "HP",
                "Physical DMG",
                "Heat DMG",
                "Cryo DMG",
                "Nature DMG",
                "Crit Rate",
                "Arts Intensity",
                "Treatment Efficiency",
            ],
            [
                "Assault",
                "Suppression",
                "Combative",
                "Brutality",
                "Infliction",
                "Detonate",
                "Twilight",
                "Efficacy",
            ],
        ],
    },
    {
        "id": "area5",
        "name": "Severe Energy Alluvium: Wuling City",
        "name_jp": "重度エネルギー沖積層：武陵城",
        "tag_slots": [
            _MAIN_ATTRIBUTES,
            [
                "Attack",
                "HP",
                "Electric DMG",
                "Cryo DMG",
                "Crit Rate",
                "Ultimate Gain",
                "Arts DMG",
                "Treatment Efficiency",
            ],
            [
                "Assault",
                "Crusher",
                "Brutality",
                "Medicant",
                "Fracture",
                "Detonate",
                "Twilight",
                "Flow",
            ],
        ],
    },
]
