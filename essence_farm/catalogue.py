"""Catalogue loading and validation.

Builds typed Weapon and Area records from plain mappings (the built-in
data modules or a JSON file). Malformed records are rejected here, at load
time, so the matcher never sees a weapon without three tag slots.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Union

from essence_farm.config import RARITIES
from essence_farm.data import AREA_RECORDS, WEAPON_RECORDS, tag_label_jp
from essence_farm.log import get_logger
from essence_farm.models import Area, Weapon, WeaponType

logger = get_logger(__name__)

TAG_SLOT_COUNT = 3


class CatalogueError(ValueError):
    """A catalogue record is malformed."""


def _check_record(record, kind: str) -> None:
    if not isinstance(record, dict):
        raise CatalogueError(f"{kind} record must be an object, got {record!r}")


def _require(record: dict, key: str, kind: str):
    if key not in record:
        raise CatalogueError(f"{kind} record {record.get('id', '?')!r} is missing {key!r}")
    return record[key]


def _tag_triple(values, owner: str, field_name: str) -> tuple[str, str, str]:
    if not isinstance(values, (list, tuple)) or len(values) != TAG_SLOT_COUNT:
        raise CatalogueError(
            f"{owner}: {field_name} must have exactly {TAG_SLOT_COUNT} entries, got {values!r}"
        )
    if not all(isinstance(v, str) for v in values):
        raise CatalogueError(f"{owner}: {field_name} entries must be strings, got {values!r}")
    return (values[0], values[1], values[2])


def build_weapon(record: dict) -> Weapon:
    """Build one Weapon from a mapping record.

    Expected keys: id, name, rarity, type, tags; optional name_jp, tags_jp.
    Missing Japanese tag labels are filled from the label table.
    """
    _check_record(record, "Weapon")
    weapon_id = _require(record, "id", "Weapon")
    if not isinstance(weapon_id, str) or not weapon_id:
        raise CatalogueError(f"Weapon id must be a non-empty string, got {weapon_id!r}")
    owner = f"Weapon {weapon_id!r}"

    tags = _tag_triple(_require(record, "tags", "Weapon"), owner, "tags")

    if "tags_jp" in record:
        tags_jp = _tag_triple(record["tags_jp"], owner, "tags_jp")
    else:
        tags_jp = tuple(tag_label_jp(t) if t else "" for t in tags)

    rarity = _require(record, "rarity", "Weapon")
    if rarity not in RARITIES:
        raise CatalogueError(f"{owner}: rarity must be one of {RARITIES}, got {rarity!r}")

    type_value = _require(record, "type", "Weapon")
    try:
        weapon_type = WeaponType(type_value)
    except ValueError:
        raise CatalogueError(f"{owner}: unknown weapon type {type_value!r}") from None

    return Weapon(
        id=weapon_id,
        name=_require(record, "name", "Weapon"),
        rarity=rarity,
        weapon_type=weapon_type,
        tags=tags,
        name_jp=record.get("name_jp", ""),
        tags_jp=tags_jp,
    )


def build_area(record: dict) -> Area:
    """Build one Area from a mapping record (id, name, tag_slots; optional name_jp)."""
    _check_record(record, "Area")
    area_id = _require(record, "id", "Area")
    owner = f"Area {area_id!r}"
    slots = _require(record, "tag_slots", "Area")

    if not isinstance(slots, (list, tuple)) or len(slots) != TAG_SLOT_COUNT:
        raise CatalogueError(f"{owner}: tag_slots must have exactly {TAG_SLOT_COUNT} slots")
    for slot in slots:
        if not isinstance(slot, (list, tuple)) or not all(isinstance(v, str) for v in slot):
            raise CatalogueError(f"{owner}: every slot must be a list of strings, got {slot!r}")
    if not slots[0]:
        raise CatalogueError(f"{owner}: main attribute slot is empty")

    return Area(
        id=area_id,
        name=_require(record, "name", "Area"),
        tag_slots=(tuple(slots[0]), tuple(slots[1]), tuple(slots[2])),
        name_jp=record.get("name_jp", ""),
    )


def _check_unique(ids: Iterable[str], kind: str) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise CatalogueError(f"Duplicate {kind} id {item_id!r}")
        seen.add(item_id)


def _record_list(records, section: str) -> Iterable[dict]:
    if not isinstance(records, (list, tuple)):
        raise CatalogueError(f"'{section}' must be an array of records, got {type(records).__name__}")
    return records


def build_weapons(records: Iterable[dict]) -> tuple[Weapon, ...]:
    """Build the weapon catalogue, keeping record order."""
    records = _record_list(records, "weapons")
    weapons = tuple(build_weapon(r) for r in records)
    _check_unique((w.id for w in weapons), "weapon")
    return weapons


def build_areas(records: Iterable[dict]) -> tuple[Area, ...]:
    """Build the area catalogue, keeping record order."""
    records = _record_list(records, "areas")
    areas = tuple(build_area(r) for r in records)
    _check_unique((a.id for a in areas), "area")
    return areas


@lru_cache(maxsize=None)
def default_weapons() -> tuple[Weapon, ...]:
    """Built-in weapon catalogue (built once)."""
    weapons = build_weapons(WEAPON_RECORDS)
    logger.info("Loaded %d built-in weapons", len(weapons))
    return weapons


@lru_cache(maxsize=None)
def default_areas() -> tuple[Area, ...]:
    """Built-in area catalogue (built once)."""
    areas = build_areas(AREA_RECORDS)
    logger.info("Loaded %d built-in areas", len(areas))
    return areas


def load_catalogue(
    path: Optional[Union[str, Path]] = None,
) -> tuple[tuple[Weapon, ...], tuple[Area, ...]]:
    """Load weapons and areas.

    Args:
        path: Optional JSON file with a "weapons" array and an optional
            "areas" array. Sections it omits fall back to the built-in data.

    Returns:
        (weapons, areas)

    Raises:
        CatalogueError: The file is not valid JSON or a record is malformed
    """
    if path is None:
        return default_weapons(), default_areas()

    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CatalogueError(f"{path}: invalid JSON ({exc})") from exc

    if not isinstance(payload, dict):
        raise CatalogueError(f"{path}: expected an object with 'weapons' and 'areas'")

    weapons = build_weapons(payload["weapons"]) if "weapons" in payload else default_weapons()
    areas = build_areas(payload["areas"]) if "areas" in payload else default_areas()
    logger.info("Loaded catalogue from %s: %d weapons, %d areas", path, len(weapons), len(areas))
    return weapons, areas


def find_weapon(weapons: Iterable[Weapon], weapon_id: str) -> Optional[Weapon]:
    """Look up a weapon by id."""
    for weapon in weapons:
        if weapon.id == weapon_id:
            return weapon
    return None
