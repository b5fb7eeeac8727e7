"""Tests for tag-based weapon browsing."""

import itertools

import pytest

from essence_farm.catalogue import default_weapons
from essence_farm.models import Language, WeaponType
from essence_farm.tag_filter import (
    filter_by_rarity_and_type,
    filter_weapons,
    match_score,
    tag_options,
    unique_tags,
)


def ids(weapons) -> list[str]:
    return [w.id for w in weapons]


class TestFilterWeapons:

    def test_no_constraints_sorts_by_rarity(self, weapons):
        result = filter_weapons(weapons)

        assert ids(result) == ["striker", "cleaver", "warden", "hunter", "rookie"]

    def test_main_constraint(self, weapons):
        result = filter_weapons(weapons, main_tag="Strength")

        assert ids(result) == ["striker", "cleaver", "rookie"]

    def test_all_constraints(self, weapons):
        result = filter_weapons(weapons, "Strength", "Attack", "Flow")

        assert ids(result) == ["cleaver"]

    def test_skill_constraint_excludes_missing_skill(self, weapons):
        result = filter_weapons(weapons, stat_tag="Attack", skill_tag="Pursuit")

        assert "rookie" not in ids(result)
        assert ids(result) == ["striker"]

    def test_missing_skill_kept_without_skill_constraint(self, weapons):
        result = filter_weapons(weapons, main_tag="Strength", stat_tag="Attack")

        assert "rookie" in ids(result)

    def test_empty_string_means_any(self, weapons):
        assert filter_weapons(weapons, "", "", "") == filter_weapons(weapons)

    def test_no_match(self, weapons):
        assert filter_weapons(weapons, main_tag="Intellect") == []

    def test_higher_rarity_first(self, weapons):
        result = filter_weapons(weapons, skill_tag="Pursuit")

        assert ids(result) == ["striker", "warden", "hunter"]

    def test_rarity_ties_keep_catalogue_order(self, weapons):
        result = filter_weapons(weapons)

        assert ids(result).index("cleaver") < ids(result).index("warden")


def test_match_score(by_id):
    striker = by_id["striker"]

    assert match_score(striker) == 0
    assert match_score(striker, "Strength") == 1
    assert match_score(striker, "Strength", "Attack", "Pursuit") == 3
    assert match_score(striker, "Agility", "Attack") == 1


def _constraint_values(weapons, index):
    return [None] + sorted({w.tags[index] for w in weapons if w.tags[index]})


def test_filter_exactness_on_builtin_catalogue():
    """Output is exactly the weapons satisfying every set constraint."""
    weapons = default_weapons()
    mains = _constraint_values(weapons, 0)[:3]
    stats = _constraint_values(weapons, 1)[:4]
    skills = _constraint_values(weapons, 2)[:4]

    for main, stat, skill in itertools.product(mains, stats, skills):
        result = filter_weapons(weapons, main, stat, skill)
        expected = {
            w.id for w in weapons
            if (main is None or w.main_tag == main)
            and (stat is None or w.stat_tag == stat)
            and (skill is None or w.skill_tag == skill)
        }
        assert set(ids(result)) == expected
        rarities = [w.rarity for w in result]
        assert rarities == sorted(rarities, reverse=True)


class TestTagOptions:

    def test_unique_tags_skips_empty(self, weapons):
        assert unique_tags(weapons, 2) == ["Flow", "Pursuit"]

    def test_unique_tags_japanese(self, weapons):
        assert unique_tags(weapons, 0, Language.JP) == sorted(["筋力", "敏捷", "意志"])

    def test_tag_options_pair_label_with_tag(self, weapons):
        assert ("攻撃力", "Attack") in tag_options(weapons, 1, Language.JP)

    def test_invalid_slot(self, weapons):
        with pytest.raises(ValueError):
            unique_tags(weapons, 3)


class TestRarityAndType:

    def test_all(self, weapons):
        assert filter_by_rarity_and_type(weapons) == list(weapons)

    def test_rarity(self, weapons):
        assert ids(filter_by_rarity_and_type(weapons, rarity=5)) == ["cleaver", "warden"]

    def test_type(self, weapons):
        result = filter_by_rarity_and_type(weapons, weapon_type=WeaponType.SWORD)

        assert ids(result) == ["striker", "rookie"]

    def test_rarity_and_type(self, weapons):
        result = filter_by_rarity_and_type(weapons, 3, WeaponType.SWORD)

        assert ids(result) == ["rookie"]
