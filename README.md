# armybattle

A small turn-based battle simulator. Two armies of one to five units fight.
Each unit carries up to two items from a fixed catalogue of sixteen items.
The units trade blows round by round until one side or both sides are wiped
out.

## Installation

```
pip install .
```

## Usage

The `armybattle` command reads both armies from standard input. Each army
starts with a line that holds its unit count. One line per unit follows. A
unit line gives the unit's name and then the names of its items, separated
by spaces:

```
2
Alice sword shield
Bob cannon
1
Carol axe
```

Run the whole battle:

```
armybattle < battle.txt
```

Give a number to stop after that many rounds. Zero or a negative number
means no limit:

```
armybattle 3 < battle.txt
```

The command first prints both armies in detail. It then prints every round.
A round shows each unit's name and hit points before the round, one line for
each attack with the damage it dealt to each target, and the units still
standing after the round. The battle ends with `WINNER: 1`, `WINNER: 2` or
`NO WINNER`.

### Rules

- Every unit starts with 100 HP.
- A unit carries at most two items, and together they may take up at most
  two slots.
- Both armies attack at the same time, from their state at the start of the
  round.
- An item can attack only when its range is at least the unit's position in
  its army (counting from 0).
- An attack hits the enemy units at positions `0` to the item's radius.
- Damage is the item's attack minus the target's total defence, and is
  always at least 1.
- Units left with 0 HP or less are removed at the end of the round.

### Errors

Bad input prints one of these lines, and the command exits with status 1:

- `ERR_UNIT_COUNT`: an army count outside 1 to 5
- `ERR_WRONG_ITEM: <name>`: an item name not in the catalogue
- `ERR_ITEM_COUNT`: more than two items on a unit
- `ERR_SLOTS`: items that need more than two slots
- `missing unit name`: an empty unit line
- `unexpected end of input`: fewer unit lines than the count says

## Library use

```python
from armybattle.data import find_item
from armybattle.battle import load_army, simulate

army1 = load_army(["Alice sword shield", "Bob cannon"], 2)
army2 = load_army(["Carol axe"], 1)
for report in simulate(army1, army2, None):
    print(report, end="")
```

- `armybattle.data` holds the `Item` and `Unit` classes, the `ITEMS`
  catalogue and `find_item`, which returns the item with a given name or
  `None`.
- `armybattle.battle` holds `parse_unit`, `load_army` and `read_armies` for
  reading armies, `format_army` and `format_units` for the printed listings,
  `attack` and `apply_damage` for a single exchange, `simulate`, which yields
  the report of each round as text, and `main`, the command above.
  Invalid input raises `ArmyError`, whose message is the error line.