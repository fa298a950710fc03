"""FastAPI adapter exposing the Othello and tic-tac-toe rules over HTTP.

The server keeps no game state: every request carries the position it is
about and every response describes the resulting position.
"""
from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from .bots import BOTS, Difficulty
from .game import Game, OthelloBoard, Piece, as_player, opponent
from .tictactoe import SIZE, Mark, TicTacToe

logger = logging.getLogger(__name__)

app = FastAPI(title="gridgames")


class BoardRequest(BaseModel):
    board: List[str]


class MovesRequest(BoardRequest):
    player: str


class PlaceRequest(MovesRequest):
    x: int
    y: int


class ComputerRequest(MovesRequest):
    difficulty: Difficulty = Difficulty.HARD
    seed: Optional[int] = None


def _parse_board(rows: List[str]) -> OthelloBoard:
    board = OthelloBoard.from_rows(rows)
    if board is None:
        raise HTTPException(status_code=422, detail="Board must be 8 rows of 8 of ' ', '#', 'O'")
    return board


def _parse_player(symbol: str) -> Piece:
    player = as_player(symbol)
    if player is None:
        raise HTTPException(status_code=400, detail=f"Unknown piece: {symbol!r}")
    return player


def _position(game: Game) -> Dict[str, Any]:
    black, white = game.scores()
    winner = game.winner()
    return {
        **game.to_dict(),
        "state": game.state.value,
        "scores": {Piece.BLACK.value: black, Piece.WHITE.value: white},
        "moves": [list(m) for m in game.valid_moves()],
        "winner": winner.value if winner is not None else None,
        "tie": game.is_tie(),
    }


@app.get("/othello/new")
async def new_game() -> dict:
    return _position(Game())


@app.post("/othello/moves")
async def legal_moves(req: MovesRequest) -> dict:
    board = _parse_board(req.board)
    player = _parse_player(req.player)
    return {"moves": [list(m) for m in sorted(board.legal_moves(player))]}


@app.post("/othello/place")
async def place(req: PlaceRequest) -> dict:
    board = _parse_board(req.board)
    player = _parse_player(req.player)
    if not board.is_legal_move(req.x, req.y, player):
        raise HTTPException(status_code=400, detail={"error": "Invalid move", "x": req.x, "y": req.y})
    flipped = board.place(req.x, req.y, player)
    logger.info("%s played %d,%d flipping %d", player.name, req.x, req.y, len(flipped))
    game = Game(board, opponent(player))
    game.last_move = (req.x, req.y)
    return {**_position(game), "flipped": [list(c) for c in flipped]}


@app.post("/othello/computer")
async def computer_move(req: ComputerRequest) -> dict:
    board = _parse_board(req.board)
    player = _parse_player(req.player)
    move = BOTS[req.difficulty.value](board, player, random.Random(req.seed))
    logger.info("Computer (%s, %s) chose %s", player.name, req.difficulty.value, move)
    return {"move": list(move) if move is not None else None}


@app.post("/tictactoe/winner")
async def tictactoe_winner(req: BoardRequest) -> dict:
    if len(req.board) != SIZE or any(len(row) != SIZE for row in req.board):
        raise HTTPException(status_code=422, detail="Board must be 3 rows of 3")
    ttt = TicTacToe()
    for x, row in enumerate(req.board, start=1):
        for y, symbol in enumerate(row, start=1):
            if symbol != " " and not ttt.place(x, y, symbol):
                raise HTTPException(status_code=422, detail=f"Unknown mark: {symbol!r}")
    winner = ttt.check_winner()
    return {"winner": winner.value if isinstance(winner, Mark) else winner}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
