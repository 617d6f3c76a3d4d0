from __future__ import annotations

import os
from typing import Any, Callable, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from labyrinth_core.logging_config import setup_logging
from game import (
    DIRECTION_NAMES,
    Board,
    EventContext,
    GameState,
    LabyrinthError,
    LabyrinthGame,
    Phase,
    Player,
    ShiftRecord,
    Tile,
    new_game,
    side_from_name,
    validate_layout,
)

DEFAULT_PLAYERS = int(os.getenv("LABYRINTH_PLAYERS", "1"))
DEFAULT_SEED = os.getenv("LABYRINTH_SEED")

app = Flask(__name__)


# ---------- JSON <-> state ----------

def _tile_to_json(t: Tile) -> Dict[str, Any]:
    return {"type": t.type.value, "rotation": int(t.rotation), "fixed": bool(t.fixed),
            "treasure": t.treasure, "id": t.id}


def _tile_from_json(obj: Dict[str, Any]) -> Tile:
    return Tile(type=obj["type"], rotation=int(obj.get("rotation", 0)), fixed=bool(obj.get("fixed", False)),
                treasure=obj.get("treasure"), id=str(obj.get("id", "")))


def state_to_json(s: GameState) -> Dict[str, Any]:
    last = s.last_shift
    return {
        "board": {
            "grid": [[_tile_to_json(t) for t in row] for row in s.board.rows()],
            "extra": _tile_to_json(s.board.extra_tile()),
        },
        "players": [
            {"id": p.id, "x": p.x, "y": p.y, "token": p.token, "color": p.color, "score": p.score}
            for p in s.players
        ],
        "phase": s.phase.value,
        "currentPlayerIndex": int(s.current_player_index),
        "lastShift": {"side": DIRECTION_NAMES[last.side], "index": last.index} if last else None,
        "totalTreasures": int(s.total_treasures),
        "winner": s.winner,
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    b = obj["board"]
    board = Board.from_rows(
        [[_tile_from_json(t) for t in row] for row in b["grid"]],
        _tile_from_json(b["extra"]),
    )
    validate_layout(board)
    ids = [t.id for t in board.tiles()]
    if len(set(ids)) != len(ids):
        raise ValueError("tile ids must be distinct")
    players = [
        Player(id=int(p["id"]), x=int(p["x"]), y=int(p["y"]), token=str(p.get("token", p["id"])),
               color=str(p.get("color", "#ffffff")), score=int(p.get("score", 0)))
        for p in obj["players"]
    ]
    if not players:
        raise ValueError("no players")
    for p in players:
        board.tile_at(p.x, p.y)  # bounds check
    last = obj.get("lastShift")
    index = int(obj.get("currentPlayerIndex", 0))
    if not 0 <= index < len(players):
        raise ValueError(f"currentPlayerIndex {index} out of range")
    return GameState(
        board=board,
        players=players,
        phase=Phase(obj.get("phase", Phase.SHIFT.value)),
        current_player_index=index,
        last_shift=ShiftRecord(side_from_name(last["side"]), int(last["index"])) if last else None,
        total_treasures=int(obj.get("totalTreasures", 0)),
        winner=obj.get("winner"),
    )


def _reachable_json(game: LabyrinthGame) -> List[List[int]]:
    return [[int(x), int(y)] for (x, y) in sorted(game.reachable())]


def _run_command(command: Callable[[LabyrinthGame, Dict[str, Any]], None]) -> Tuple[Any, int]:
    body = request.get_json(force=True, silent=True) or {}
    s_in = body.get("state")
    if not s_in:
        return jsonify({"ok": False, "error": "missing state"}), 400
    try:
        state = json_to_state(s_in)
    except Exception as e:
        return jsonify({"ok": False, "error": f"bad state: {e}"}), 400

    game = LabyrinthGame(state)
    collected: List[EventContext] = []
    game.events.subscribe(collected.append)
    try:
        command(game, body)
    except LabyrinthError as e:
        return jsonify({
            "ok": False,
            "error": str(e),
            "kind": e.kind,
            "events": [c.to_json() for c in collected],
        }), 400
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad request: {e}"}), 400
    return jsonify({
        "ok": True,
        "state": state_to_json(game.state),
        "events": [c.to_json() for c in collected],
        "reachable": _reachable_json(game),
    }), 200


# ---------- API routes ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    seed: Optional[Any] = body.get("seed", DEFAULT_SEED)
    try:
        players = int(body.get("players", DEFAULT_PLAYERS))
        state = new_game(seed=int(seed) if seed is not None else None, num_players=players)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    game = LabyrinthGame(state)
    return jsonify({"ok": True, "state": state_to_json(state), "reachable": _reachable_json(game)})


@app.post("/api/reachable")
def api_reachable() -> Any:
    return _run_command(lambda game, body: None)


@app.post("/api/rotate")
def api_rotate() -> Any:
    return _run_command(lambda game, body: game.rotate_extra_tile())


@app.post("/api/shift")
def api_shift() -> Any:
    return _run_command(lambda game, body: game.shift(body["side"], int(body["index"])))


@app.post("/api/move")
def api_move() -> Any:
    def _move(game: LabyrinthGame, body: Dict[str, Any]) -> None:
        x, y = body["move"]
        game.attempt_move(int(x), int(y))
    return _run_command(_move)


# Entrypoint for "python app.py"
if __name__ == "__main__":
    setup_logging(os.getenv("LABYRINTH_LOG_LEVEL", "INFO"))
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
