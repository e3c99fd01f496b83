# rackets/cube.py
# Cell arithmetic for the 3x3x3 racket cube.
#   X power_bias:      1=Control  2=Balanced 3=Power
#   Y maneuverability: 1=Light    2=Medium   3=Heavy
#   Z feel:            1=Soft     2=Medium   3=Firm

import re
from itertools import product
from typing import Iterable, List, NamedTuple, Optional

AXIS_VALUES = (1, 2, 3)

CELL_CODE_REGEX = re.compile(r"X([123])Y([123])Z([123])")


class Cell(NamedTuple):
    power_bias: int
    maneuverability: int
    feel: int

    @property
    def code(self) -> str:
        return cell_code(*self)


def cell_code(power_bias: int, maneuverability: int, feel: int) -> str:
    """(1, 2, 3) -> "X1Y2Z3"."""
    return f"X{power_bias}Y{maneuverability}Z{feel}"


def parse_cell_code(code: str) -> Optional[Cell]:
    """"X1Y2Z3" -> Cell(1, 2, 3); None for anything else."""
    match = CELL_CODE_REGEX.fullmatch(code or "")
    if not match:
        return None
    return Cell(*(int(group) for group in match.groups()))


def adjacent_cells(cell: Cell) -> List[str]:
    """Codes of the (up to 6) cells one step away on exactly one axis."""
    adjacent = []
    for axis in range(3):
        for step in (-1, 1):
            moved = list(cell)
            moved[axis] += step
            if moved[axis] in AXIS_VALUES:
                adjacent.append(cell_code(*moved))
    return adjacent


def cell_distance(a: Cell, b: Cell) -> int:
    """Manhattan distance."""
    return sum(abs(x - y) for x, y in zip(a, b))


def find_nearest_cells(target: Cell, populated: Iterable[Cell], limit: int = 3) -> List[Cell]:
    """Populated cells closest to target, target itself excluded. Ties keep input order."""
    candidates = [cell for cell in populated if cell_distance(target, cell) > 0]
    candidates.sort(key=lambda cell: cell_distance(target, cell))
    return candidates[:limit]


def all_cells() -> List[Cell]:
    return [Cell(*coords) for coords in product(AXIS_VALUES, repeat=3)]


def _clamp(value: int) -> int:
    return max(1, min(3, value))


def adjust_cell(cell: Cell, power_bias: int = 0, maneuverability: int = 0, feel: int = 0) -> Cell:
    """Move by the given steps, clamped to the cube."""
    return Cell(
        _clamp(cell.power_bias + power_bias),
        _clamp(cell.maneuverability + maneuverability),
        _clamp(cell.feel + feel),
    )
