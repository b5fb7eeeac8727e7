"""Tag-based weapon browsing."""

from typing import Optional, Sequence

from essence_farm.models import (
    MAIN_SLOT,
    STAT_SLOT,
    SKILL_SLOT,
    Language,
    Weapon,
    WeaponType,
)


def match_score(
    weapon: Weapon,
    main_tag: Optional[str] = None,
    stat_tag: Optional[str] = None,
    skill_tag: Optional[str] = None,
) -> int:
    """Number of set constraints the weapon hits exactly (0-3)."""
    score = 0
    if main_tag and weapon.main_tag == main_tag:
        score += 1
    if stat_tag and weapon.stat_tag == stat_tag:
        score += 1
    if skill_tag and weapon.skill_tag == skill_tag:
        score += 1
    return score


def _matches(
    weapon: Weapon,
    main_tag: Optional[str],
    stat_tag: Optional[str],
    skill_tag: Optional[str],
) -> bool:
    if main_tag and weapon.main_tag != main_tag:
        return False
    if stat_tag and weapon.stat_tag != stat_tag:
        return False
    if skill_tag and weapon.skill_tag != skill_tag:
        return False
    return True


def filter_weapons(
    weapons: Sequence[Weapon],
    main_tag: Optional[str] = None,
    stat_tag: Optional[str] = None,
    skill_tag: Optional[str] = None,
) -> list[Weapon]:
    """Weapons matching every set tag constraint.

    None or "" means "any". A set skill constraint also excludes weapons
    without a skill tag.

    Results are ordered by match score, then rarity (both descending);
    ties keep catalogue order.
    """
    matched = [w for w in weapons if _matches(w, main_tag, stat_tag, skill_tag)]
    return sorted(
        matched,
        key=lambda w: (-match_score(w, main_tag, stat_tag, skill_tag), -w.rarity),
    )


def tag_options(
    weapons: Sequence[Weapon],
    index: int,
    language: Language = Language.EN,
) -> list[tuple[str, str]]:
    """Distinct (label, tag) pairs for one tag slot, sorted by label.

    Empty tags are skipped.
    """
    if index not in (MAIN_SLOT, STAT_SLOT, SKILL_SLOT):
        raise ValueError(f"Tag slot index must be 0, 1 or 2, got {index}")
    pairs = {
        (w.tag_label(index, language), w.tags[index])
        for w in weapons
        if w.tags[index].strip()
    }
    return sorted(pairs)


def unique_tags(
    weapons: Sequence[Weapon],
    index: int,
    language: Language = Language.EN,
) -> list[str]:
    """Sorted distinct non-empty tag labels in one slot."""
    return sorted({label for label, _ in tag_options(weapons, index, language)})


def filter_by_rarity_and_type(
    weapons: Sequence[Weapon],
    rarity: Optional[int] = None,
    weapon_type: Optional[WeaponType] = None,
) -> list[Weapon]:
    """Weapons of the given rarity and type; None means all."""
    return [
        w for w in weapons
        if (rarity is None or w.rarity == rarity)
        and (weapon_type is None or w.weapon_type is weapon_type)
    ]
