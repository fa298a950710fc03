from gridgames.game import Game, GameState, OthelloBoard, Piece, as_player, opponent

B, W = Piece.BLACK, Piece.WHITE

EMPTY_ROW = "        "


def board_with_first_row(row: str) -> OthelloBoard:
    return OthelloBoard.from_rows([row] + [EMPTY_ROW] * 7)


def test_initial_position():
    board = OthelloBoard()
    assert board.grid.get_contents(exclude_default=True) == [
        (4, 4, B), (4, 5, W), (5, 4, W), (5, 5, B),
    ]
    assert board.score(B) == 2 and board.score(W) == 2


def test_opponent():
    assert opponent(B) is W
    assert opponent(W) is B
    assert opponent("#") is W
    assert opponent(Piece.EMPTY) is None
    assert opponent("X") is None
    assert as_player("O") is W


def test_initial_valid_moves():
    board = OthelloBoard()
    assert board.legal_moves(B) == {(3, 5), (4, 6), (5, 3), (6, 4)}
    assert board.legal_moves(W) == {(3, 4), (4, 3), (5, 6), (6, 5)}
    assert board.is_legal_move(3, 5, B)
    assert not board.is_legal_move(3, 4, B)
    assert not board.is_legal_move(4, 4, B)


def test_invalid_player_has_no_moves():
    board = OthelloBoard()
    assert board.legal_moves("X") == set()
    assert not board.has_legal_moves(Piece.EMPTY)
    assert board.score("X") == 0


def test_move_flips_opponent():
    board = OthelloBoard()
    flipped = board.place(3, 5, B)
    assert flipped == [(4, 5)]
    assert board.grid.get_cell(3, 5) is B
    assert board.grid.get_cell(4, 5) is B
    assert board.score(B) == 4
    assert board.score(W) == 1


def test_cell_counted_once_for_several_directions():
    board = OthelloBoard.from_rows([
        "#       ",
        " O      ",
        "#O      ",
    ] + [EMPTY_ROW] * 5)
    # (3, 3) captures both along its row and along the diagonal.
    assert board.legal_moves(B) == {(1, 3), (3, 3)}


def test_anchor_behind_empty_cell_is_not_legal():
    board = board_with_first_row("  O #   ")
    assert board.legal_moves(B) == set()


def test_run_ending_at_empty_cell_is_not_flipped():
    board = board_with_first_row(" OO #   ")
    assert board.place(1, 1, B) == []
    assert board.rows()[0] == "#OO #   "


def test_run_ending_at_edge_is_not_flipped():
    board = board_with_first_row("     OOO")
    assert board.place(1, 5, B) == []
    assert board.rows()[0] == "    #OOO"


def test_place_flips_several_directions():
    board = OthelloBoard.from_rows([
        " O#     ",
        "O       ",
        "#       ",
    ] + [EMPTY_ROW] * 5)
    flipped = board.place(1, 1, B)
    assert sorted(flipped) == [(1, 2), (2, 1)]
    assert board.score(W) == 0
    assert board.score(B) == 5


def test_place_rejects_invalid_input():
    board = OthelloBoard()
    before = board.rows()
    assert board.place(9, 9, B) == []
    assert board.place(3, 5, "X") == []
    assert board.rows() == before


def test_copy_is_independent():
    board = OthelloBoard()
    sim = board.copy()
    sim.place(3, 5, B)
    assert board.score(B) == 2
    assert board.grid.get_cell(3, 5) is Piece.EMPTY


def test_from_rows_rejects_bad_input():
    assert OthelloBoard.from_rows(["        "] * 7) is None
    assert OthelloBoard.from_rows(["       "] * 8) is None
    assert OthelloBoard.from_rows(["X       "] + [EMPTY_ROW] * 7) is None
    assert OthelloBoard.from_rows(None) is None


def test_game_play_switches_turn():
    game = Game()
    assert game.state is GameState.BLACK_TURN
    assert game.last_move is None
    assert game.play(3, 5)
    assert game.last_move == (3, 5)
    assert game.state is GameState.WHITE_TURN
    assert game.scores() == (4, 1)


def test_rejected_move_leaves_game_unchanged():
    game = Game()
    before = game.to_dict()
    assert not game.play(1, 1)
    assert not game.play(0, 9)
    assert game.to_dict() == before
    assert game.current is B


def test_player_without_moves_passes():
    board = board_with_first_row("#O      ")
    game = Game(board, W)
    assert game.current is B
    assert game.passes == 1
    assert game.valid_moves() == [(1, 3)]
    assert game.play(1, 3)
    assert game.state is GameState.TERMINAL
    assert game.winner() is B
    assert not game.is_tie()


def test_full_board_tie():
    game = Game(OthelloBoard.from_rows(["####OOOO"] * 8))
    assert game.state is GameState.TERMINAL
    assert game.winner() is None
    assert game.is_tie()
    assert game.valid_moves() == []
    assert not game.play(1, 1)


def test_terminal_iff_nobody_can_move():
    game = Game()
    while game.current is not None:
        assert game.board.has_legal_moves(game.current)
        assert game.play(*game.valid_moves()[0])
    assert not game.board.has_legal_moves(B)
    assert not game.board.has_legal_moves(W)


def test_dict_round_trip():
    game = Game()
    game.play(3, 5)
    loaded = Game.from_dict(game.to_dict())
    assert loaded.board.rows() == game.board.rows()
    assert loaded.current is W
    assert loaded.last_move == (3, 5)
    assert Game.from_dict({"board": "nope"}) is None
    assert Game.from_dict([]) is None


def test_game_copy_is_independent():
    game = Game()
    clone = game.copy()
    assert clone.play(3, 5)
    assert game.current is B
    assert game.board.score(B) == 2
    assert clone.last_move == (3, 5) and game.last_move is None


def test_unknown_starting_player_defaults_to_black():
    game = Game(OthelloBoard(), "X")
    assert game.state is GameState.BLACK_TURN
    assert game.current is B
    assert game.winner() is None
    assert not game.is_tie()
    assert game.valid_moves() == [(3, 5), (4, 6), (5, 3), (6, 4)]
