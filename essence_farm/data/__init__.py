"""Built-in weapon and area catalogues."""

from .areas import AREA_RECORDS
from .labels import TAG_LABELS_JP, WEAPON_TYPE_LABELS_JP, tag_label_jp
from .weapons import WEAPON_RECORDS

__all__ = [
    "AREA_RECORDS",
    "TAG_LABELS_JP",
    "WEAPON_RECORDS",
    "WEAPON_TYPE_LABELS_JP",
    "tag_label_jp",
]
