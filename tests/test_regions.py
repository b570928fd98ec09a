# tests/test_regions.py

import unittest

from sweeper.board import BoardGenerator
from sweeper.grid import Grid
from sweeper.regions import RegionAnalyzer


class TestRegionAnalyzer(unittest.TestCase):

    def setUp(self):
        self.analyzer = RegionAnalyzer()

    def test_single_center_mine_has_no_blanks(self):
        grid = Grid.from_mines(3, [(1, 1)])
        result = self.analyzer.analyze(grid)
        self.assertEqual(result.region_count, 0)
        self.assertEqual(result.remaining_clicks, 8)
        self.assertEqual(result.bbbv, 8)

    def test_empty_board_is_one_click(self):
        grid = Grid(4, 0)
        result = self.analyzer.analyze(grid)
        self.assertEqual(result.region_count, 1)
        self.assertEqual(result.dilated_cells, 16)
        self.assertEqual(result.bbbv, 1)

    def test_isolated_edge_needs_its_own_click(self):
        # a wall of mines in column 2 leaves (0, 2) touching no blank cell
        grid = Grid.from_mines(5, [(1, 2), (2, 2), (3, 2), (4, 2)])
        result = self.analyzer.analyze(grid)
        self.assertEqual(result.region_count, 2)
        self.assertEqual(result.dilated_cells, 20)
        self.assertEqual(result.remaining_clicks, 1)
        self.assertEqual(result.bbbv, 3)
        self.assertIsNone(grid.cell(0, 2).region_id)
        self.assertEqual(grid.cell(3, 1).region_id, 0)
        self.assertEqual(grid.cell(3, 3).region_id, 1)

    def test_shared_edge_goes_to_first_region_in_scan_order(self):
        grid = Grid.from_mines(3, [(0, 2), (2, 0)])
        result = self.analyzer.analyze(grid)
        self.assertEqual(result.region_count, 2)
        self.assertEqual(result.bbbv, 2)
        self.assertEqual(grid.cell(0, 0).region_id, 0)
        self.assertEqual(grid.cell(1, 1).region_id, 0)
        self.assertEqual(grid.cell(2, 2).region_id, 1)
        self.assertEqual(grid.cell(1, 2).region_id, 1)
        self.assertEqual(grid.cell(2, 1).region_id, 1)

    def test_analyzing_twice_gives_same_result(self):
        for grid in (Grid(4, 0), Grid.from_mines(3, [(0, 2), (2, 0)])):
            first = self.analyzer.analyze(grid)
            tags = [[cell.region_id for cell in row] for row in grid.cells]
            second = self.analyzer.analyze(grid)
            self.assertEqual(second, first)
            self.assertEqual([[cell.region_id for cell in row] for row in grid.cells], tags)

    def test_mines_never_get_a_region(self):
        grid = BoardGenerator(seed=11).generate(16, 40)
        self.analyzer.analyze(grid)
        for row in grid.cells:
            for cell in row:
                if cell.is_mine:
                    self.assertIsNone(cell.region_id)
                if cell.is_blank:
                    self.assertIsNotNone(cell.region_id)

    def test_bbbv_bounds_on_random_boards(self):
        generator = BoardGenerator(seed=2024)
        for size, mines in [(12, 12), (16, 48), (16, 72), (20, 192), (5, 24)]:
            grid = generator.generate(size, mines)
            result = self.analyzer.analyze(grid)
            self.assertEqual(result.bbbv, result.region_count + result.remaining_clicks)
            self.assertGreater(result.bbbv, 0)
            self.assertLessEqual(result.bbbv, size * size - mines)


if __name__ == "__main__":
    unittest.main()
