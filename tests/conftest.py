"""Shared test fixtures.

Small catalogue with hand-checked scores:

    area-a  main: Strength, Agility   stat: Attack, HP          skill: Pursuit, Flow
    area-b  main: Strength, Will      stat: Attack, Crit Rate   skill: Pursuit, Medicant
    area-c  main: Intellect           stat: Arts DMG            skill: Twilight

For striker (Strength / Attack / Pursuit):
    area-a  lock Attack -> Strength: cleaver, rookie (2)
            lock Pursuit -> Agility: hunter (1)             total 3
    area-b  lock Attack -> Strength: rookie (1)
            lock Pursuit -> Will: warden (1)                total 2
"""

import pytest

from essence_farm.catalogue import build_areas, build_weapons
from essence_farm.models import Area, Weapon


def make_weapon(weapon_id: str, tags, rarity: int = 5, weapon_type: str = "Sword") -> Weapon:
    return build_weapons([{
        "id": weapon_id,
        "name": weapon_id.title(),
        "rarity": rarity,
        "type": weapon_type,
        "tags": list(tags),
    }])[0]


AREA_RECORDS = [
    {
        "id": "area-a",
        "name": "Area A",
        "tag_slots": [["Strength", "Agility"], ["Attack", "HP"], ["Pursuit", "Flow"]],
    },
    {
        "id": "area-b",
        "name": "Area B",
        "tag_slots": [["Strength", "Will"], ["Attack", "Crit Rate"], ["Pursuit", "Medicant"]],
    },
    {
        "id": "area-c",
        "name": "Area C",
        "tag_slots": [["Intellect"], ["Arts DMG"], ["Twilight"]],
    },
]

WEAPON_RECORDS = [
    {"id": "striker", "name": "Striker", "name_jp": "ストライカー", "rarity": 6,
     "type": "Sword", "tags": ["Strength", "Attack", "Pursuit"]},
    {"id": "cleaver", "name": "Cleaver", "rarity": 5,
     "type": "Greatsword", "tags": ["Strength", "Attack", "Flow"]},
    {"id": "hunter", "name": "Hunter", "rarity": 4,
     "type": "Polearm", "tags": ["Agility", "HP", "Pursuit"]},
    {"id": "warden", "name": "Warden", "rarity": 5,
     "type": "Handcannon", "tags": ["Will", "Crit Rate", "Pursuit"]},
    {"id": "rookie", "name": "Rookie", "rarity": 3,
     "type": "Sword", "tags": ["Strength", "Attack", ""]},
]


@pytest.fixture()
def areas() -> tuple[Area, ...]:
    return build_areas(AREA_RECORDS)


@pytest.fixture()
def weapons() -> tuple[Weapon, ...]:
    return build_weapons(WEAPON_RECORDS)


@pytest.fixture()
def by_id(weapons):
    """Weapon lookup by id."""
    return {w.id: w for w in weapons}
