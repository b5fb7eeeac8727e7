"""Command-line interface for the essence farm planner."""
import argparse
import json
import sys
from typing import Optional, Sequence

from essence_farm.catalogue import CatalogueError, find_weapon, load_catalogue
from essence_farm.config import DEFAULT_LANGUAGE, DEFAULT_LOG_LEVEL, RARITIES, ui_text
from essence_farm.log import get_logger, setup_logging
from essence_farm.matcher import rank_areas, recommend
from essence_farm.models import Area, BestAreaResult, Language, Weapon, WeaponType
from essence_farm.tag_filter import filter_by_rarity_and_type, filter_weapons
from essence_farm.utils import format_rarity, format_tags, weapon_type_label

logger = get_logger(__name__)


def print_weapon_table(weapons: Sequence[Weapon], language: Language) -> None:
    """Print weapons as an aligned table."""
    if not weapons:
        print(ui_text("none", language.value))
        return

    print(f"{'ID':<28} {'Rarity':<7} {'Type':<12} {'Name':<28} Tags")
    print("-" * 100)
    for w in weapons:
        print(
            f"{w.id:<28} {format_rarity(w.rarity):<7} "
            f"{weapon_type_label(w.weapon_type, language):<12} "
            f"{w.label(language):<28} {format_tags(w, language)}"
        )


def print_areas(areas: Sequence[Area], language: Language) -> None:
    """Print every area with its tag slots."""
    slot_names = ("main_tag", "stat_tag", "skill_tag")
    for area in areas:
        print("\n" + "=" * 60)
        print(f"  {area.label(language)}  ({area.id})")
        print("=" * 60)
        for key, slot in zip(slot_names, area.tag_slots):
            print(f"  {ui_text(key, language.value) + ':':<16} {', '.join(slot)}")
    print()


def print_recommendation(
    weapon: Weapon,
    result: Optional[BestAreaResult],
    language: Language,
) -> None:
    """Pretty print the best area for a weapon."""
    lang = language.value
    print("\n" + "=" * 60)
    print(f"  {format_rarity(weapon.rarity)} {weapon.label(language)}")
    print(f"  {format_tags(weapon, language)}")
    print("=" * 60)

    if result is None:
        print(f"\n  {ui_text('no_area', lang)}\n")
        return

    print(f"\n{ui_text('best_farming_area', lang)}: {result.area.label(language)}")

    for locked in result.locked_tags:
        print("\n" + "-" * 60)
        print(f"  {ui_text('lock_secondary', lang)}: {locked.label(language)}"
              f"  ({locked.perfect_count} {ui_text('perfect', lang)})")
        print("-" * 60)
        for group in locked.ordered_groups(weapon.main_tag):
            names = ", ".join(w.label(language) for w in group.weapons)
            print(f"  {group.label(language) + ':':<16} {names}")

    print("\n" + "=" * 60)


def print_area_ranking(
    weapon: Weapon,
    results: Sequence[BestAreaResult],
    language: Language,
) -> None:
    """Print every qualifying area with its perfect totals."""
    print(f"\nQualifying areas for {weapon.label(language)}:")
    print("-" * 70)
    print(f"{'Area':<52} {'Perfect':<8}")
    print("-" * 70)
    for result in results:
        print(f"{result.area.label(language):<52} {result.perfect_total:<8}")
    print("-" * 70)
    if not results:
        print(ui_text("no_area", language.value))
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Essence Farm Planner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --weapon grand-vision          # Best farming area for a weapon
  %(prog)s --weapon grand-vision --all-areas
  %(prog)s --main Agility --stat Attack   # Weapons matching tags
  %(prog)s --list-weapons --rarity 6 --type Sword
  %(prog)s --list-areas --lang jp
        """,
    )

    parser.add_argument(
        "--weapon", "-w",
        help="Weapon ID to find the best farming area for",
    )
    parser.add_argument(
        "--all-areas",
        action="store_true",
        help="With --weapon, list every qualifying area and its score",
    )
    parser.add_argument("--main", help="Main tag constraint")
    parser.add_argument("--stat", help="Stat tag constraint")
    parser.add_argument("--skill", help="Skill tag constraint")
    parser.add_argument(
        "--rarity", "-r",
        type=int,
        choices=list(RARITIES),
        help="Only weapons of this rarity",
    )
    parser.add_argument(
        "--type",
        dest="weapon_type",
        choices=[t.value for t in WeaponType],
        help="Only weapons of this type",
    )
    parser.add_argument(
        "--list-weapons",
        action="store_true",
        help="List weapons (after --rarity/--type)",
    )
    parser.add_argument(
        "--list-areas",
        action="store_true",
        help="List farming areas and their tag slots",
    )
    parser.add_argument(
        "--lang",
        choices=[lang.value for lang in Language],
        default=DEFAULT_LANGUAGE,
        help=f"Display language (default: {DEFAULT_LANGUAGE})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )
    parser.add_argument(
        "--catalogue",
        help="JSON file with 'weapons' and optional 'areas' arrays",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Log level (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser


def main(argv: Optional[list[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    language = Language(args.lang)

    try:
        weapons, areas = load_catalogue(args.catalogue)
    except (CatalogueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.list_areas:
        if args.json:
            print(json.dumps([a.to_dict() for a in areas], indent=2, ensure_ascii=False))
        else:
            print_areas(areas, language)
        return

    if args.weapon:
        weapon = find_weapon(weapons, args.weapon)
        if weapon is None:
            print(f"Error: Unknown weapon '{args.weapon}'", file=sys.stderr)
            sys.exit(1)

        if args.all_areas:
            results = rank_areas(weapon, weapons, areas)
            if args.json:
                print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
            else:
                print_area_ranking(weapon, results, language)
            return

        result = recommend(weapon, weapons, areas)
        if args.json:
            payload = result.to_dict() if result is not None else None
            print(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            print_recommendation(weapon, result, language)
        return

    weapon_type = WeaponType(args.weapon_type) if args.weapon_type else None
    selection = filter_by_rarity_and_type(weapons, args.rarity, weapon_type)

    if args.main or args.stat or args.skill:
        selection = filter_weapons(selection, args.main, args.stat, args.skill)
    elif not args.list_weapons:
        parser.print_help()
        return

    logger.debug("%d weapons selected", len(selection))
    if args.json:
        print(json.dumps([w.to_dict() for w in selection], indent=2, ensure_ascii=False))
    else:
        print_weapon_table(selection, language)


if __name__ == "__main__":
    main()
