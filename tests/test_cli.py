"""Tests for the command-line interface."""

import json

import pytest

from essence_farm.cli import main


def run(capsys, *argv) -> str:
    main(list(argv))
    return capsys.readouterr().out


def test_recommend_weapon(capsys):
    out = run(capsys, "--weapon", "grand-vision")

    assert "Best Farming Area" in out
    assert "Lock secondary: Attack" in out
    assert "Lock secondary: Infliction" in out


def test_recommend_weapon_japanese(capsys):
    out = run(capsys, "--weapon", "grand-vision", "--lang", "jp")

    assert "最適な厳選エリア" in out
    assert "グランドビジョン" in out


def test_recommend_json(capsys):
    payload = json.loads(run(capsys, "--weapon", "grand-vision", "--json"))

    assert payload["area"]["id"].startswith("area")
    assert {lt["locked_tag"] for lt in payload["locked_tags"]} == {"Attack", "Infliction"}
    assert payload["perfect_total"] == sum(lt["perfect_count"] for lt in payload["locked_tags"])


def test_all_areas_json(capsys):
    payload = json.loads(run(capsys, "--weapon", "grand-vision", "--all-areas", "--json"))

    assert payload
    assert all("perfect_total" in entry for entry in payload)


def test_unknown_weapon_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--weapon", "no-such-weapon"])

    assert exc_info.value.code == 1
    assert "Unknown weapon" in capsys.readouterr().err


def test_tag_filter_json(capsys):
    payload = json.loads(run(capsys, "--main", "Agility", "--stat", "Attack", "--json"))

    assert payload
    for weapon in payload:
        assert weapon["tags"][0] == "Agility"
        assert weapon["tags"][1] == "Attack"


def test_list_weapons_with_rarity_and_type(capsys):
    payload = json.loads(run(capsys, "--list-weapons", "--rarity", "6", "--type", "Sword", "--json"))

    assert payload
    assert all(w["rarity"] == 6 and w["type"] == "Sword" for w in payload)


def test_list_areas(capsys):
    out = run(capsys, "--list-areas")

    assert "Severe Energy Alluvium: Wuling City" in out


def test_no_action_prints_help(capsys):
    out = run(capsys)

    assert "usage:" in out


def test_bad_catalogue_exits(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"weapons": [{"id": "x"}]}), encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["--catalogue", str(path), "--list-weapons"])

    assert exc_info.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_missing_catalogue_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--catalogue", str(tmp_path / "missing.json"), "--list-weapons"])

    assert exc_info.value.code == 1


def test_non_utf8_catalogue_exits(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_bytes(b"\xff\xfe")

    with pytest.raises(SystemExit) as exc_info:
        main(["--catalogue", str(path), "--list-weapons"])

    assert exc_info.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_non_object_record_exits(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"weapons": ["striker"]}), encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["--catalogue", str(path), "--list-weapons"])

    assert exc_info.value.code == 1
    assert "Error:" in capsys.readouterr().err
