from __future__ import annotations

import os
import sys
from typing import Any, Dict, Iterable, List, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        COORDS,
        Board,
        Coord,
        GameState,
        Marker,
        MoveRing,
        PlaceMarker,
        PlaceRing,
        Player,
        RemoveRing,
        Ring,
        TurnPhase,
        UnsupportedPhaseError,
        advance,
        closest_coordinate,
        highlighted_markers,
        is_valid_point,
        legal_choices,
        legal_moves,
        preview,
        reachable,
        screen_point,
        state_for_layout,
    )
except ImportError:
    from game import (  # type: ignore
        COORDS,
        Board,
        Coord,
        GameState,
        Marker,
        MoveRing,
        PlaceMarker,
        PlaceRing,
        Player,
        RemoveRing,
        Ring,
        TurnPhase,
        UnsupportedPhaseError,
        advance,
        closest_coordinate,
        highlighted_markers,
        is_valid_point,
        legal_choices,
        legal_moves,
        preview,
        reachable,
        screen_point,
        state_for_layout,
    )

DEFAULT_LAYOUT = os.getenv("YINSH_LAYOUT", "demo")

app = Flask(__name__)

_PHASES = {
    "PlaceRing": PlaceRing,
    "PlaceMarker": PlaceMarker,
    "RemoveRing": RemoveRing,
}

# Errors raised by malformed request bodies
_BAD_INPUT = (KeyError, ValueError, TypeError, IndexError, OverflowError)


# ---------- JSON codec ----------

def coord_to_json(c: Coord) -> List[int]:
    return [int(c[0]), int(c[1])]


def json_to_coord(obj: Any) -> Coord:
    a, b = obj
    c = (int(a), int(b))
    if not is_valid_point(c):
        raise ValueError(f"not a board point: {c}")
    return c


def json_to_point(obj: Any) -> Tuple[float, float]:
    x, y = obj
    return float(x), float(y)


def coords_to_json(cs: Iterable[Coord]) -> List[List[int]]:
    return [coord_to_json(c) for c in sorted(cs)]


def piece_to_json(p: Any) -> Dict[str, Any]:
    kind = "ring" if isinstance(p, Ring) else "marker"
    return {"kind": kind, "owner": p.owner.value, "coord": coord_to_json(p.coord)}


def json_to_piece(obj: Dict[str, Any]) -> Any:
    owner = Player(obj["owner"])
    c = json_to_coord(obj["coord"])
    kind = obj["kind"]
    if kind == "ring":
        return Ring(owner, c)
    if kind == "marker":
        return Marker(owner, c)
    raise ValueError(f"unknown piece kind: {kind!r}")


def board_to_json(b: Board) -> List[Dict[str, Any]]:
    return [piece_to_json(p) for p in sorted(b, key=lambda p: p.coord)]


def json_to_board(obj: Any) -> Board:
    pieces = [json_to_piece(p) for p in obj]
    seen = set()
    for p in pieces:
        if p.coord in seen:
            raise ValueError(f"more than one piece on {p.coord}")
        seen.add(p.coord)
    return Board.from_pieces(pieces)


def phase_to_json(phase: TurnPhase) -> Dict[str, Any]:
    if isinstance(phase, MoveRing):
        return {"name": "MoveRing", "origin": coord_to_json(phase.origin)}
    return {"name": type(phase).__name__}


def json_to_phase(obj: Dict[str, Any]) -> TurnPhase:
    name = obj["name"]
    if name == "MoveRing":
        return MoveRing(json_to_coord(obj["origin"]))
    if name not in _PHASES:
        raise ValueError(f"unknown phase: {name!r}")
    return _PHASES[name]()


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "activePlayer": s.active_player.value,
        "phase": phase_to_json(s.phase),
        "board": board_to_json(s.board),
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    return GameState(
        active_player=Player(obj["activePlayer"]),
        phase=json_to_phase(obj["phase"]),
        board=json_to_board(obj["board"]),
    )


def _json_body() -> Dict[str, Any]:
    """The request body as a JSON object; a missing or unparsable body counts as empty."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValueError("request body must be a JSON object")
    return body


def _error(message: str, status: int, **extra: Any) -> Any:
    body = {"ok": False, "error": message}
    body.update(extra)
    return jsonify(body), status


def _highlights_json(b: Board) -> Dict[str, List[List[int]]]:
    return {p.value: coords_to_json(highlighted_markers(b, p)) for p in Player}


def _state_response(s: GameState, **extra: Any) -> Any:
    try:
        choices = coords_to_json(legal_choices(s))
    except UnsupportedPhaseError:
        choices = []
    body = {
        "ok": True,
        "state": state_to_json(s),
        "legalChoices": choices,
        "highlights": _highlights_json(s.board),
    }
    body.update(extra)
    return jsonify(body)


def _play(state: GameState, point: Coord) -> Any:
    try:
        choices = legal_choices(state)
    except UnsupportedPhaseError as e:
        app.logger.warning("rejected %s: %s", point, e)
        return _error(str(e), 409)
    if point not in choices:
        app.logger.info("illegal choice %s in %s", point, type(state.phase).__name__)
        return _error("Illegal choice", 400, legalChoices=coords_to_json(choices))
    next_state = advance(state, point)
    app.logger.info("%s played %s: %s -> %s", state.active_player.value, point,
                    type(state.phase).__name__, type(next_state.phase).__name__)
    return _state_response(next_state, coord=coord_to_json(point))


# ---------- Lattice API ----------

@app.get("/api/lattice")
def api_lattice() -> Any:
    points = [{"coord": coord_to_json(c), "screen": list(screen_point(c))} for c in COORDS]
    return jsonify({"ok": True, "points": points})


@app.post("/api/resolve")
def api_resolve() -> Any:
    try:
        body = _json_body()
        xy = json_to_point(body["point"])
    except _BAD_INPUT as e:
        return _error(f"bad point: {e}", 400)
    return jsonify({"ok": True, "coord": coord_to_json(closest_coordinate(xy))})


@app.post("/api/reachable")
def api_reachable() -> Any:
    try:
        body = _json_body()
        c = json_to_coord(body["coord"])
    except _BAD_INPUT as e:
        return _error(f"bad coord: {e}", 400)
    return jsonify({"ok": True, "reachable": coords_to_json(reachable(c))})


# ---------- Core Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    try:
        body = _json_body()
        state = state_for_layout(str(body.get("layout", DEFAULT_LAYOUT)))
    except ValueError as e:
        return _error(str(e), 400)
    return _state_response(state)


@app.post("/api/legal")
def api_legal() -> Any:
    try:
        body = _json_body()
        state = json_to_state(body["state"])
    except _BAD_INPUT as e:
        return _error(f"bad state: {e}", 400)
    try:
        choices = legal_choices(state)
    except UnsupportedPhaseError as e:
        return _error(str(e), 409)
    return jsonify({"ok": True, "legalChoices": coords_to_json(choices)})


@app.post("/api/moves")
def api_moves() -> Any:
    try:
        body = _json_body()
        board = json_to_board(body["board"])
        origin = json_to_coord(body["origin"])
    except _BAD_INPUT as e:
        return _error(f"bad request: {e}", 400)
    return jsonify({"ok": True, "legalMoves": coords_to_json(legal_moves(board, origin))})


@app.post("/api/highlights")
def api_highlights() -> Any:
    try:
        body = _json_body()
        board = json_to_board(body["board"])
    except _BAD_INPUT as e:
        return _error(f"bad board: {e}", 400)
    return jsonify({"ok": True, "highlights": _highlights_json(board)})


@app.post("/api/preview")
def api_preview() -> Any:
    try:
        body = _json_body()
        state = json_to_state(body["state"])
        xy = json_to_point(body["point"])
    except _BAD_INPUT as e:
        return _error(f"bad request: {e}", 400)
    c = closest_coordinate(xy)
    pv = preview(state, c)
    return jsonify({
        "ok": True,
        "coord": coord_to_json(c),
        "ghost": piece_to_json(pv.ghost) if pv.ghost is not None else None,
        "dots": coords_to_json(pv.dots),
    })


@app.post("/api/advance")
def api_advance() -> Any:
    try:
        body = _json_body()
        state = json_to_state(body["state"])
        point = json_to_coord(body["coord"])
    except _BAD_INPUT as e:
        return _error(f"bad request: {e}", 400)
    return _play(state, point)


@app.post("/api/click")
def api_click() -> Any:
    try:
        body = _json_body()
        state = json_to_state(body["state"])
        xy = json_to_point(body["point"])
    except _BAD_INPUT as e:
        return _error(f"bad request: {e}", 400)
    return _play(state, closest_coordinate(xy))


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
