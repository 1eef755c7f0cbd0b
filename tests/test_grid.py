import random
import unittest
from collections import Counter

from game import (
    CELL_COUNT,
    Grid,
    GridBoundsError,
    from_index,
    to_index,
)


class TestCoordinates(unittest.TestCase):
    def test_given_every_coordinate_when_round_tripping_then_bijection_holds(self):
        seen = set()
        for x in range(5):
            for y in range(5):
                i = to_index(x, y)
                self.assertTrue(0 <= i < CELL_COUNT)
                self.assertEqual(from_index(i), (x, y))
                seen.add(i)
        self.assertEqual(seen, set(range(CELL_COUNT)))

    def test_given_corners_when_indexing_then_top_row_comes_first(self):
        self.assertEqual(to_index(0, 4), 0)
        self.assertEqual(to_index(4, 4), 4)
        self.assertEqual(to_index(0, 0), 20)
        self.assertEqual(to_index(4, 0), 24)
        self.assertEqual(to_index(2, 2), 12)
        self.assertEqual(from_index(7), (2, 3))

    def test_given_out_of_range_input_when_converting_then_bounds_error(self):
        for x, y in [(-1, 0), (0, -1), (5, 0), (0, 5)]:
            with self.assertRaises(GridBoundsError):
                to_index(x, y)
        for i in (-1, 25):
            with self.assertRaises(GridBoundsError):
                from_index(i)
        # Still an IndexError for callers that catch the builtin.
        with self.assertRaises(IndexError):
            to_index(7, 7)


class TestGrid(unittest.TestCase):
    def setUp(self):
        self.grid = Grid(random.Random(1234))

    def test_get_set_and_is_empty(self):
        self.assertTrue(self.grid.is_empty(3, 1))
        self.grid.set(3, 1, 2)
        self.assertEqual(self.grid.get(3, 1), 2)
        self.assertFalse(self.grid.is_empty(3, 1))
        self.assertEqual(self.grid.cells[to_index(3, 1)], 2)
        self.assertEqual(self.grid.get_index(to_index(3, 1)), 2)

    def test_get_out_of_range_raises(self):
        with self.assertRaises(GridBoundsError):
            self.grid.get(5, 0)
        with self.assertRaises(GridBoundsError):
            self.grid.set(0, -1, 1)
        with self.assertRaises(GridBoundsError):
            self.grid.get_index(25)

    def test_reset_clears_every_cell(self):
        for i in range(CELL_COUNT):
            self.grid.set_index(i, (i % 4) + 1)
        self.grid.reset()
        for x in range(5):
            for y in range(5):
                self.assertEqual(self.grid.get(x, y), 0)

    def test_empty_cells_are_in_flat_index_order(self):
        self.grid.set_index(0, 1)
        self.grid.set_index(3, 2)
        cells = self.grid.empty_cells()
        self.assertEqual(len(cells), 23)
        self.assertEqual([to_index(*c) for c in cells], [i for i in range(CELL_COUNT) if i not in (0, 3)])

    def test_random_empty_cell_is_always_empty(self):
        rng = random.Random(99)
        for _ in range(200):
            self.grid.reset()
            for i in range(CELL_COUNT):
                if rng.random() < 0.7:
                    self.grid.set_index(i, rng.randint(1, 4))
            if self.grid.is_full():
                continue
            x, y = self.grid.random_empty_cell()
            self.assertTrue(self.grid.is_empty(x, y))

    def test_random_empty_cell_on_full_board_resets_first(self):
        for i in range(CELL_COUNT):
            self.grid.set_index(i, 3)
        x, y = self.grid.random_empty_cell()
        self.assertTrue(self.grid.is_empty(x, y))
        self.assertEqual(self.grid.cells, [0] * CELL_COUNT)

    def test_random_empty_cell_is_roughly_uniform(self):
        self.grid.set_index(0, 2)
        trials = 10000
        counts = Counter(to_index(*self.grid.random_empty_cell()) for _ in range(trials))
        self.assertNotIn(0, counts)
        self.assertEqual(set(counts), set(range(1, CELL_COUNT)))
        expected = trials / 24
        for i, n in counts.items():
            # ~417 expected; +-35% is far outside normal sampling noise
            self.assertGreater(n, expected * 0.65, f"index {i} under-sampled")
            self.assertLess(n, expected * 1.35, f"index {i} over-sampled")

    def test_spawn_random_places_robot_on_returned_cell(self):
        coord = self.grid.spawn_random(4)
        self.assertEqual(self.grid.get(*coord), 4)
        self.assertEqual(sum(1 for s in self.grid.cells if s), 1)

    def test_color_at_uses_size_table(self):
        self.grid.set(1, 1, 3)
        self.assertEqual(self.grid.color_at(1, 1), "blue")
        self.assertEqual(self.grid.color_at(0, 0), "black")

    def test_pretty_marks_controlled_robot(self):
        self.grid.set(0, 4, 1)
        self.grid.set(4, 0, 4)
        txt = self.grid.pretty(controlled=to_index(4, 0))
        lines = txt.splitlines()
        self.assertEqual(len(lines), 6)
        self.assertTrue(lines[0].startswith("4 "))
        self.assertIn(" 1 ", lines[0])
        self.assertIn("[4]", lines[4])
        self.assertNotIn("[", lines[0])


if __name__ == "__main__":
    unittest.main(verbosity=2)
