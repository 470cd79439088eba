"""Army loading, combat rounds and the command-line battle runner."""

from __future__ import annotations

import re
import sys
from dataclasses import replace
from typing import Iterable, Iterator, TextIO

from armybattle.data import MAX_ARMY, MAX_NAME, MIN_ARMY, Item, Unit, find_item

MAX_SLOTS = 2
MAX_ITEMS = 2
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ArmyError(Exception):
    """Raised when army input is invalid; the message is the error code."""


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_unit(line: str) -> Unit:
    """Parse a line 'name [item [item]]' into a unit."""
    tokens = [token for token in line.rstrip("\n").split(" ") if token]
    if not tokens:
        raise ArmyError("missing unit name")
    name, *item_names = tokens
    items: list[Item] = []
    for item_name in item_names:
        item = find_item(item_name)
        if item is None:
            raise ArmyError(f"ERR_WRONG_ITEM: {item_name}")
        if len(items) >= MAX_ITEMS:
            raise ArmyError("ERR_ITEM_COUNT")
        items.append(item)
    if sum(item.slots for item in items) > MAX_SLOTS:
        raise ArmyError("ERR_SLOTS")
    items.extend([None] * (MAX_ITEMS - len(items)))
    return Unit(name[:MAX_NAME], items[0], items[1])


def load_army(lines: Iterable[str], count: int) -> list[Unit]:
    """Read `count` unit lines from `lines` into an army."""
    if not MIN_ARMY <= count <= MAX_ARMY:
        raise ArmyError("ERR_UNIT_COUNT")
    source = iter(lines)
    army = []
    for _ in range(count):
        line = next(source, None)
        if line is None:
            raise ArmyError("unexpected end of input")
        army.append(parse_unit(line))
    return army


def _read_count(lines: Iterator[str]) -> int:
    for line in lines:
        if line.strip():
            return _leading_int(line)
    return 0


def read_armies(stream: Iterable[str]) -> tuple[list[Unit], list[Unit]]:
    """Read both armies, each a count line followed by unit lines."""
    lines = iter(stream)
    army1 = load_army(lines, _read_count(lines))
    army2 = load_army(lines, _read_count(lines))
    return army1, army2


def _describe(item: Item) -> str:
    return f"{item.name},{item.att},{item.defense},{item.slots},{item.range},{item.radius}"


def format_army(army: list[Unit], label: str) -> str:
    """Detailed listing of an army under a label."""
    out = [f"{label}\n"]
    for index, unit in enumerate(army):
        out.append(f"    Unit: {index}\n")
        out.append(f"    Name: {unit.name}\n")
        out.append(f"    HP: {unit.hp}\n")
        for slot, item in enumerate((unit.item1, unit.item2), start=1):
            if item is not None:
                out.append(f"    Item {slot}: {_describe(item)}\n")
        out.append("\n")
    return "".join(out)


def format_units(army: list[Unit], army_number: int) -> str:
    """One-line summary of unit names and hit points."""
    units = "".join(f" {unit.name},{unit.hp}" for unit in army)
    return f"{army_number}:{units}\n"


def attack(attackers: list[Unit], defenders: list[Unit], side: int) -> tuple[list[int], str]:
    """Resolve one side's attacks; return damage per defender and the attack log."""
    damage = [0] * len(defenders)
    log = []
    for position, unit in enumerate(attackers):
        for item in unit.items:
            if item.range < position:
                continue
            parts = [f"{side},{unit.name},{item.name}:".ljust(20)]
            for target_index, target in enumerate(defenders[: item.radius + 1]):
                hit = max(1, item.att - target.defense())
                damage[target_index] += hit
                parts.append(f" [{target.name},{hit}]")
            log.append("".join(parts) + "\n")
    return damage, "".join(log)


def apply_damage(army: list[Unit], damage: list[int]) -> list[Unit]:
    """Return the surviving units after subtracting damage."""
    wounded = (replace(unit, hp=unit.hp - hit) for unit, hit in zip(army, damage))
    return [unit for unit in wounded if unit.hp > 0]


def simulate(army1: list[Unit], army2: list[Unit], rounds: int | None = None) -> Iterator[str]:
    """Yield the report of each round; a non-positive or absent limit means no limit."""
    army1, army2 = list(army1), list(army2)
    limit = rounds if rounds is not None and rounds > 0 else None
    round_number = 1
    while True:
        parts = [f"Round {round_number}\n", format_units(army1, 1), format_units(army2, 2)]
        damage2, log1 = attack(army1, army2, 1)
        damage1, log2 = attack(army2, army1, 2)
        parts += [log1, log2]
        army1 = apply_damage(army1, damage1)
        army2 = apply_damage(army2, damage2)
        parts += [format_units(army1, 1), format_units(army2, 2), "\n"]
        over = False
        if not army1 and not army2:
            parts.append("NO WINNER\n")
            over = True
        if not army1:
            parts.append("WINNER: 2\n")
            over = True
        if not army2:
            parts.append("WINNER: 1\n")
            over = True
        yield "".join(parts)
        if over or (limit is not None and round_number >= limit):
            return
        round_number += 1


def main(argv: list[str] | None = None) -> int:
    """Read two armies from standard input and run the battle."""
    args = sys.argv[1:] if argv is None else argv
    rounds = _leading_int(args[0]) if args else None
    out: TextIO = sys.stdout
    try:
        army1, army2 = read_armies(sys.stdin)
    except ArmyError as error:
        out.write(f"{error}\n")
        return 1
    out.write(format_army(army1, "ARMY 1"))
    out.write(format_army(army2, "ARMY 2"))
    for report in simulate(army1, army2, rounds):
        out.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())