import unittest

from game import BOARD_SIZE, Board, OutOfBounds, Player, Tile, TileType


def make_board(code='I0', extra='I1'):
    rows = [[Tile(TileType(code[0]), int(code[1]), id=f'{x},{y}') for x in range(BOARD_SIZE)]
            for y in range(BOARD_SIZE)]
    return Board.from_rows(rows, Tile(TileType(extra[0]), int(extra[1]), id='extra'))


class TestBoard(unittest.TestCase):
    def test_given_board_when_reading_cells_then_indexed_by_x_then_y(self):
        board = make_board()
        self.assertEqual(board.tile_at(2, 5).id, '2,5')
        self.assertEqual(board.extra_tile().id, 'extra')

    def test_given_outside_coordinates_when_accessing_then_out_of_bounds(self):
        board = make_board()
        for x, y in [(-1, 0), (0, -1), (7, 0), (0, 7)]:
            with self.assertRaises(OutOfBounds):
                board.tile_at(x, y)
            with self.assertRaises(OutOfBounds):
                board.set_tile_at(x, y, Tile(TileType.TEE))

    def test_given_new_tiles_when_setting_then_grid_and_extra_updated(self):
        board = make_board()
        t = Tile(TileType.TEE, id='new')
        board.set_tile_at(3, 4, t)
        self.assertIs(board.tile_at(3, 4), t)
        e = Tile(TileType.CORNER, id='new-extra')
        board.set_extra_tile(e)
        self.assertIs(board.extra_tile(), e)

    def test_given_wrong_shape_when_building_from_rows_then_value_error(self):
        rows = [[Tile(TileType.STRAIGHT) for _ in range(7)] for _ in range(6)]
        with self.assertRaises(ValueError):
            Board.from_rows(rows, Tile(TileType.STRAIGHT))

    def test_given_board_when_iterating_tiles_then_fifty_with_extra_last(self):
        board = make_board()
        tiles = list(board.tiles())
        self.assertEqual(len(tiles), 50)
        self.assertIs(tiles[-1], board.extra_tile())
        self.assertEqual(len(board.rows()), 7)

    def test_given_players_and_treasure_when_pretty_then_tokens_rendered(self):
        board = make_board()
        board.tile_at(3, 3).treasure = 'gem'
        txt = board.pretty([Player(id=0, x=0, y=0, token='1')])
        lines = txt.split('\n')
        self.assertEqual(len(lines), 7)
        self.assertTrue(lines[0].startswith('│1'))
        self.assertIn('$', lines[3])


if __name__ == '__main__':
    unittest.main(verbosity=2)
