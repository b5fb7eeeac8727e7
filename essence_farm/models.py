"""Data models for essence farming.

Catalogue records (weapons, areas) are frozen so they can be shared freely
between screens. Result objects are rebuilt on every selection.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Language(Enum):
    """Display language for labels."""
    EN = "en"
    JP = "jp"

    def toggled(self) -> "Language":
        return Language.JP if self is Language.EN else Language.EN


class WeaponType(Enum):
    """Weapon categories."""
    GREATSWORD = "Greatsword"   # 大剣
    POLEARM = "Polearm"         # 長柄武器
    HANDCANNON = "Handcannon"   # 拳銃
    SWORD = "Sword"             # 片手剣
    ARTS_UNIT = "Arts Unit"     # アーツユニット


# Tag slot positions
MAIN_SLOT = 0
STAT_SLOT = 1
SKILL_SLOT = 2


@dataclass(frozen=True, slots=True)
class Weapon:
    """A weapon and its three essence tags.

    Attributes:
        id: Unique, stable identifier
        name: English display name
        rarity: Star rating (3-6)
        weapon_type: Weapon category
        tags: (main, stat, skill); an empty string means "no tag"
        name_jp: Japanese display name
        tags_jp: Japanese labels, parallel to ``tags``
    """
    id: str
    name: str
    rarity: int
    weapon_type: WeaponType
    tags: tuple[str, str, str]
    name_jp: str = ""
    tags_jp: tuple[str, str, str] = ("", "", "")

    @property
    def main_tag(self) -> str:
        return self.tags[MAIN_SLOT]

    @property
    def stat_tag(self) -> str:
        return self.tags[STAT_SLOT]

    @property
    def skill_tag(self) -> str:
        return self.tags[SKILL_SLOT]

    def label(self, language: Language = Language.EN) -> str:
        if language is Language.JP and self.name_jp:
            return self.name_jp
        return self.name

    def tag_label(self, index: int, language: Language = Language.EN) -> str:
        """Label for one tag slot, falling back to the canonical tag."""
        if language is Language.JP and self.tags_jp[index]:
            return self.tags_jp[index]
        return self.tags[index]

    def tag_labels(self, language: Language = Language.EN) -> list[str]:
        """Labels of the non-empty tags, in slot order."""
        return [
            self.tag_label(i, language)
            for i, tag in enumerate(self.tags)
            if tag
        ]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "name_jp": self.name_jp,
            "rarity": self.rarity,
            "type": self.weapon_type.value,
            "tags": list(self.tags),
            "tags_jp": list(self.tags_jp),
        }


@dataclass(frozen=True, slots=True)
class Area:
    """A farming area and the tag values its essences can roll per slot."""
    id: str
    name: str
    tag_slots: tuple[tuple[str, ...], tuple[str, ...], tuple[str, ...]]
    name_jp: str = ""

    @property
    def main_tags(self) -> tuple[str, ...]:
        return self.tag_slots[MAIN_SLOT]

    @property
    def secondary_tags(self) -> frozenset[str]:
        """Every value either secondary slot can roll."""
        return frozenset(self.tag_slots[STAT_SLOT]) | frozenset(self.tag_slots[SKILL_SLOT])

    def can_roll_main(self, tag: str) -> bool:
        return tag in self.tag_slots[MAIN_SLOT]

    def can_roll_secondary(self, tag: str) -> bool:
        return tag in self.tag_slots[STAT_SLOT] or tag in self.tag_slots[SKILL_SLOT]

    def label(self, language: Language = Language.EN) -> str:
        if language is Language.JP and self.name_jp:
            return self.name_jp
        return self.name

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "name_jp": self.name_jp,
            "tag_slots": [list(slot) for slot in self.tag_slots],
        }


@dataclass(slots=True)
class MainTagGroup:
    """Weapons sharing one main tag under a locked secondary tag."""
    main_tag: str
    weapons: tuple[Weapon, ...]
    main_tag_jp: str = ""

    def label(self, language: Language = Language.EN) -> str:
        if language is Language.JP and self.main_tag_jp:
            return self.main_tag_jp
        return self.main_tag

    def to_dict(self) -> dict:
        return {
            "main_tag": self.main_tag,
            "main_tag_jp": self.main_tag_jp,
            "weapons": [w.id for w in self.weapons],
        }


@dataclass(slots=True)
class LockedTagResult:
    """Perfect matches in an area when one secondary tag is locked."""
    locked_tag: str
    perfect_count: int
    groups: list[MainTagGroup] = field(default_factory=list)
    locked_tag_jp: str = ""

    @property
    def weapons_by_main(self) -> dict[str, tuple[Weapon, ...]]:
        return {group.main_tag: group.weapons for group in self.groups}

    def ordered_groups(self, main_tag: Optional[str] = None) -> list[MainTagGroup]:
        """Groups with ``main_tag`` moved to the front, others in area order."""
        if main_tag is None:
            return list(self.groups)
        return sorted(self.groups, key=lambda g: g.main_tag != main_tag)

    def label(self, language: Language = Language.EN) -> str:
        if language is Language.JP and self.locked_tag_jp:
            return self.locked_tag_jp
        return self.locked_tag

    def to_dict(self) -> dict:
        return {
            "locked_tag": self.locked_tag,
            "locked_tag_jp": self.locked_tag_jp,
            "perfect_count": self.perfect_count,
            "weapons_by_main": {g.main_tag: g.to_dict() for g in self.groups},
        }


@dataclass(slots=True)
class BestAreaResult:
    """Recommended area for a weapon and its lock breakdown."""
    area: Area
    locked_tags: list[LockedTagResult]

    @property
    def perfect_total(self) -> int:
        return sum(lt.perfect_count for lt in self.locked_tags)

    def to_dict(self) -> dict:
        return {
            "area": self.area.to_dict(),
            "perfect_total": self.perfect_total,
            "locked_tags": [lt.to_dict() for lt in self.locked_tags],
        }
