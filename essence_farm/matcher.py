"""Area matcher: picks the best farming area for a weapon.

An area qualifies when it can roll all of the weapon's tags: the main tag
in slot 0, and both the stat and skill tags in slot 1 or slot 2.

Each qualifying area is scored by locking either secondary tag in turn.
For a lock L and every main value M the area offers, a "perfect" weapon is
any other weapon with main M, L among its secondaries, and its remaining
secondary also rollable here. The area with the most perfect weapons
across both locks wins; ties go to the earlier area in catalogue order.

Empty tags impose no constraint: an empty secondary on the selected weapon
is not a lock, and an empty remaining secondary on another weapon counts
as farmable. An empty main tag never matches a slot.
"""

from typing import Optional, Sequence

from essence_farm.log import get_logger
from essence_farm.models import (
    MAIN_SLOT,
    STAT_SLOT,
    SKILL_SLOT,
    Area,
    BestAreaResult,
    LockedTagResult,
    MainTagGroup,
    Weapon,
)

logger = get_logger(__name__)


def _lock_slots(weapon: Weapon) -> list[int]:
    """Slots of the weapon's secondary tags that can be locked."""
    return [slot for slot in (STAT_SLOT, SKILL_SLOT) if weapon.tags[slot]]


def is_candidate(weapon: Weapon, area: Area) -> bool:
    """Whether an area can roll every tag the weapon needs."""
    if not area.can_roll_main(weapon.main_tag):
        return False
    return all(
        area.can_roll_secondary(weapon.tags[slot])
        for slot in _lock_slots(weapon)
    )


def _other_secondary(weapon: Weapon, locked_tag: str) -> Optional[str]:
    """The secondary tag that is not ``locked_tag``, or None if neither is."""
    if weapon.stat_tag == locked_tag:
        return weapon.skill_tag
    if weapon.skill_tag == locked_tag:
        return weapon.stat_tag
    return None


def _is_perfect(candidate: Weapon, main_tag: str, locked_tag: str, area: Area) -> bool:
    if candidate.main_tag != main_tag:
        return False
    other = _other_secondary(candidate, locked_tag)
    if other is None:
        return False
    return not other or area.can_roll_secondary(other)


def evaluate_lock(
    selected_weapon: Weapon,
    lock_slot: int,
    weapons: Sequence[Weapon],
    area: Area,
) -> LockedTagResult:
    """Perfect matches in ``area`` when the weapon's tag at ``lock_slot`` is locked."""
    locked_tag = selected_weapon.tags[lock_slot]
    groups: list[MainTagGroup] = []

    for main_tag in area.main_tags:
        matched = tuple(
            w for w in weapons
            if w.id != selected_weapon.id and _is_perfect(w, main_tag, locked_tag, area)
        )
        if matched:
            groups.append(MainTagGroup(
                main_tag=main_tag,
                weapons=matched,
                main_tag_jp=matched[0].tags_jp[MAIN_SLOT],
            ))

    return LockedTagResult(
        locked_tag=locked_tag,
        perfect_count=sum(len(g.weapons) for g in groups),
        groups=groups,
        locked_tag_jp=selected_weapon.tags_jp[lock_slot],
    )


def score_area(
    selected_weapon: Weapon,
    weapons: Sequence[Weapon],
    area: Area,
) -> BestAreaResult:
    """Evaluate the secondary locks for one area, sorted by perfect count (stable).

    One lock is evaluated per non-empty secondary tag of the selected
    weapon: two for a full weapon, one when the stat or skill tag is
    empty, none when both are. An empty tag is no constraint, so it is
    never locked.
    """
    locked = [
        evaluate_lock(selected_weapon, slot, weapons, area)
        for slot in _lock_slots(selected_weapon)
    ]
    locked.sort(key=lambda lt: lt.perfect_count, reverse=True)
    return BestAreaResult(area=area, locked_tags=locked)


def rank_areas(
    selected_weapon: Weapon,
    weapons: Sequence[Weapon],
    areas: Sequence[Area],
) -> list[BestAreaResult]:
    """Score every qualifying area, in catalogue order."""
    results = []
    for area in areas:
        if not is_candidate(selected_weapon, area):
            logger.debug("%s: %s cannot roll its tags", selected_weapon.id, area.id)
            continue
        result = score_area(selected_weapon, weapons, area)
        logger.debug(
            "%s: %s scores %d perfect", selected_weapon.id, area.id, result.perfect_total
        )
        results.append(result)
    return results


def recommend(
    selected_weapon: Weapon,
    weapons: Sequence[Weapon],
    areas: Sequence[Area],
) -> Optional[BestAreaResult]:
    """Best farming area for a weapon, or None if no area can roll its tags.

    Args:
        selected_weapon: The weapon the player wants essences for
        weapons: Full weapon catalogue (may include the selected weapon)
        areas: Area catalogue; order decides ties

    Returns:
        BestAreaResult for the area with the highest perfect total
    """
    best: Optional[BestAreaResult] = None
    for result in rank_areas(selected_weapon, weapons, areas):
        # Strictly greater keeps the first area on ties
        if best is None or result.perfect_total > best.perfect_total:
            best = result

    if best is None:
        logger.debug("%s: no qualifying area", selected_weapon.id)
    return best
