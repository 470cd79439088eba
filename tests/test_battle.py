import io

import pytest

from armybattle.battle import (
    ArmyError,
    apply_damage,
    attack,
    format_army,
    format_units,
    load_army,
    main,
    parse_unit,
    read_armies,
    simulate,
)
from armybattle.data import Unit, find_item


def test_parse_unit_with_items():
    unit = parse_unit("hero sword shield\n")
    assert unit.name == "hero"
    assert unit.item1 is find_item("sword")
    assert unit.item2 is find_item("shield")
    assert unit.hp == 100


def test_parse_unit_without_items():
    unit = parse_unit("lonely")
    assert unit.name == "lonely" and unit.items == ()


def test_parse_unit_extra_spaces():
    unit = parse_unit("hero   sword")
    assert unit.item1 is find_item("sword") and unit.item2 is None


def test_parse_unit_wrong_item():
    with pytest.raises(ArmyError, match="^ERR_WRONG_ITEM: laser$"):
        parse_unit("hero laser")


def test_parse_unit_too_many_items():
    with pytest.raises(ArmyError, match="^ERR_ITEM_COUNT$"):
        parse_unit("hero sword shield dagger")


def test_parse_unit_wrong_item_reported_before_count():
    with pytest.raises(ArmyError, match="ERR_WRONG_ITEM: laser"):
        parse_unit("hero sword shield laser")


def test_parse_unit_too_many_slots():
    with pytest.raises(ArmyError, match="^ERR_SLOTS$"):
        parse_unit("hero cannon sword")


def test_parse_unit_name_truncated():
    assert len(parse_unit("n" * 150).name) == 100


@pytest.mark.parametrize("count", [0, 6, -1])
def test_load_army_bad_count(count):
    with pytest.raises(ArmyError, match="^ERR_UNIT_COUNT$"):
        load_army(["a sword"] * 6, count)


def test_load_army_reads_only_count_lines():
    lines = iter(["a sword\n", "b\n", "c\n"])
    army = load_army(lines, 2)
    assert [unit.name for unit in army] == ["a", "b"]
    assert next(lines) == "c\n"


def test_read_armies_skips_blank_lines():
    army1, army2 = read_armies(io.StringIO("\n2\na\nb sword\n1\nc\n"))
    assert [u.name for u in army1] == ["a", "b"]
    assert [u.name for u in army2] == ["c"]


def test_read_armies_bad_count():
    with pytest.raises(ArmyError, match="ERR_UNIT_COUNT"):
        read_armies(io.StringIO("abc\n"))


def test_format_units():
    army = [Unit("a"), Unit("b", hp=5)]
    assert format_units(army, 1) == "1: a,100 b,5\n"


def test_format_army():
    text = format_army([Unit("a", find_item("sword"))], "ARMY 1")
    assert text == (
        "ARMY 1\n    Unit: 0\n    Name: a\n    HP: 100\n"
        "    Item 1: sword,9,2,1,0,0\n\n"
    )


def test_attack_undefended_target():
    damage, log = attack([Unit("a", find_item("sword"))], [Unit("b")], 1)
    assert damage == [9]
    assert log == "1,a,sword:".ljust(20) + " [b,9]\n"


def test_attack_minimum_damage():
    damage, _ = attack([Unit("a", find_item("dagger"))], [Unit("b", find_item("aura"))], 2)
    assert damage == [1]


def test_attack_out_of_range():
    damage, log = attack([Unit("a"), Unit("b", find_item("sword"))], [Unit("c")], 1)
    assert damage == [0]
    assert log == ""


def test_attack_radius():
    fireball = find_item("fireball")
    defenders = [Unit(f"d{i}") for i in range(5)]
    damage, log = attack([Unit("a", fireball)], defenders, 2)
    assert damage == [fireball.att] * 4 + [0]
    assert log.startswith("2,a,fireball:")


def test_apply_damage():
    army = [Unit("a"), Unit("b", hp=5)]
    survivors = apply_damage(army, [10, 5])
    assert [u.name for u in survivors] == ["a"]
    assert survivors[0].hp == 90
    assert army[0].hp == 100


def _sword_duel():
    return [Unit("a", find_item("sword"))], [Unit("b", find_item("sword"))]


def test_simulate_even_duel_ends_without_winner():
    reports = list(simulate(*_sword_duel()))
    assert "NO WINNER\n" in reports[-1]
    assert all("NO WINNER" not in report for report in reports[:-1])
    for number, report in enumerate(reports, start=1):
        assert report.startswith(f"Round {number}\n")


def test_simulate_round_limit():
    assert len(list(simulate(*_sword_duel(), 3))) == 3


def test_simulate_non_positive_limit_is_unlimited():
    assert list(simulate(*_sword_duel(), 0)) == list(simulate(*_sword_duel()))


def test_simulate_stronger_side_wins():
    reports = list(simulate([Unit("a", find_item("wand"))], [Unit("b", find_item("dagger"))]))
    assert reports[-1].endswith("WINNER: 1\n")


def test_main_single_round(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\na sword\n1\nb dagger\n"))
    assert main(["1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(
        "ARMY 1\n    Unit: 0\n    Name: a\n    HP: 100\n"
        "    Item 1: sword,9,2,1,0,0\n\nARMY 2\n"
    )
    assert "Round 1\n" in out and "Round 2" not in out


def test_main_unit_count_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == "ERR_UNIT_COUNT\n"


def test_main_wrong_item(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\na laser\n1\nb\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == "ERR_WRONG_ITEM: laser\n"