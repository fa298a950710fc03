import json

import pytest

from gridgames.game import Game
from run_bot import load_game, main


def write(tmp_path, data):
    path = tmp_path / "game.json"
    path.write_text(json.dumps(data))
    return path


def test_load_game_uses_last_history_entry(tmp_path):
    first = Game().to_dict()
    second = Game()
    second.play(3, 5)
    path = write(tmp_path, {"history": [first, second.to_dict()]})
    game = load_game(path)
    assert game.board.rows() == second.board.rows()
    assert game.last_move == (3, 5)


def test_prints_hard_move(tmp_path, capsys):
    path = write(tmp_path, Game().to_dict())
    main([str(path)])
    assert capsys.readouterr().out == "Next move: 3 5\n"


def test_player_override(tmp_path, capsys):
    path = write(tmp_path, Game().to_dict())
    main([str(path), "--player", "O"])
    assert capsys.readouterr().out == "Next move: 3 4\n"


def test_no_moves(tmp_path, capsys):
    path = write(tmp_path, {"board": ["########"] * 8, "current": "O"})
    main([str(path), "--difficulty", "easy", "--seed", "1"])
    assert capsys.readouterr().out == "No valid moves available.\n"


def test_bad_file_exits(tmp_path):
    path = write(tmp_path, {"board": ["#"]})
    with pytest.raises(SystemExit):
        main([str(path)])
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.json")])
