from django.test import SimpleTestCase

from rackets.cube import (
    Cell,
    adjacent_cells,
    adjust_cell,
    all_cells,
    cell_code,
    cell_distance,
    find_nearest_cells,
    parse_cell_code,
)
from rackets.personas import PERSONA_NAMES, axis_label, get_persona


class CubeTestCase(SimpleTestCase):

    def test_cell_codes(self):
        self.assertEqual(cell_code(1, 2, 3), "X1Y2Z3")
        self.assertEqual(parse_cell_code("X1Y2Z3"), Cell(1, 2, 3))
        self.assertEqual(Cell(3, 1, 2).code, "X3Y1Z2")

        for bad in ("X0Y2Z3", "X1Y2", "x1y2z3", "X1Y2Z3 ", "X1Y2Z3\n", "X1Y2Z3X1", ""):
            self.assertIsNone(parse_cell_code(bad), bad)

    def test_adjacent_cells(self):
        self.assertEqual(len(adjacent_cells(Cell(2, 2, 2))), 6)
        self.assertEqual(
            sorted(adjacent_cells(Cell(1, 1, 1))),
            ["X1Y1Z2", "X1Y2Z1", "X2Y1Z1"],
        )

    def test_distance_and_nearest(self):
        target = Cell(1, 1, 1)
        self.assertEqual(cell_distance(target, Cell(3, 3, 3)), 6)

        populated = [Cell(3, 3, 3), Cell(1, 1, 1), Cell(1, 2, 1), Cell(2, 2, 1)]
        nearest = find_nearest_cells(target, populated, limit=2)
        self.assertEqual(nearest, [Cell(1, 2, 1), Cell(2, 2, 1)])

    def test_all_cells(self):
        cells = all_cells()
        self.assertEqual(len(cells), 27)
        self.assertEqual(len(set(cells)), 27)

    def test_adjust_is_clamped(self):
        self.assertEqual(adjust_cell(Cell(3, 1, 2), power_bias=1, maneuverability=-1, feel=1), Cell(3, 1, 3))
        self.assertEqual(adjust_cell(Cell(2, 2, 2), feel=-1), Cell(2, 2, 1))


class PersonaTestCase(SimpleTestCase):

    def test_every_cell_has_a_distinct_persona(self):
        names = {get_persona(cell).name for cell in all_cells()}
        self.assertEqual(len(names), 27)
        self.assertEqual(len(PERSONA_NAMES), 27)

    def test_center_persona(self):
        persona = get_persona(Cell(2, 2, 2))
        self.assertEqual(persona.name, "Perfect Balance")
        self.assertEqual(persona.short_description, "The ultimate versatile racket for players who want it all.")
        self.assertEqual(persona.ideal_for, ["All-court players"])

    def test_corner_persona(self):
        persona = get_persona(Cell(1, 1, 1))
        self.assertEqual(persona.name, "Comfort Control")
        self.assertEqual(
            persona.short_description,
            "Excellent control and touch, easy to swing, forgiving and comfortable.",
        )
        self.assertEqual(
            persona.ideal_for,
            ["Defensive players", "Touch players", "Beginners", "Players with arm concerns"],
        )
        self.assertEqual(len(persona.detailed_description.split(". ")), 3)

    def test_axis_labels(self):
        self.assertEqual(axis_label("power", 3), "Power")
        self.assertEqual(axis_label("weight", 1), "Light")
        self.assertEqual(axis_label("feel", 2), "Medium")
