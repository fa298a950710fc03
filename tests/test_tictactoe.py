from gridgames.tictactoe import TIE, Mark, TicTacToe


def fill(rows):
    game = TicTacToe()
    for x, row in enumerate(rows, start=1):
        for y, symbol in enumerate(row, start=1):
            if symbol != " ":
                assert game.place(x, y, symbol)
    return game


def test_place_only_on_empty_cells():
    game = TicTacToe()
    assert game.place(2, 2, "X")
    assert not game.place(2, 2, "O")
    assert not game.place(1, 1, "Z")
    assert not game.place(4, 1, "O")
    assert game.grid.get_cell(2, 2) is Mark.X


def test_no_winner_yet():
    assert TicTacToe().check_winner() is None
    assert fill(["XO ", " X ", "  O"]).check_winner() is None


def test_row_column_and_diagonal_wins():
    assert fill(["XXX", "OO ", "   "]).check_winner() is Mark.X
    assert fill(["XO ", "XO ", " O "]).check_winner() is Mark.O
    assert fill(["X O", " XO", "  X"]).check_winner() is Mark.X
    assert fill(["XXO", " O ", "OX "]).check_winner() is Mark.O


def test_centre_taken_with_blanks_left_is_not_a_tie():
    assert fill(["XO ", "OXX", "XOO"]).check_winner() is None


def test_full_board_is_a_tie():
    assert fill(["XOX", "XOO", "OXX"]).check_winner() == TIE
