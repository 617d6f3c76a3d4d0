import json
import unittest

from app import app as flask_app
from app import json_to_state, state_to_json
from game import BOARD_SIZE, Board, GameState, Player, Tile, TileType, new_game


def corridor_state():
    rows = [[Tile(TileType.STRAIGHT, 0, id=f"{x},{y}") for x in range(BOARD_SIZE)] for y in range(BOARD_SIZE)]
    board = Board.from_rows(rows, Tile(TileType.STRAIGHT, 0, id="extra"))
    return GameState(board=board, players=[Player(id=0, x=0, y=0, token="1")])


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _post(self, path, payload):
        return self.client.post(path, data=json.dumps(payload), content_type="application/json")

    def _new(self, **payload):
        payload.setdefault("seed", 123)
        r = self._post("/api/new", payload)
        self.assertEqual(r.status_code, 200)
        return r.get_json()

    def test_given_new_game_when_posted_then_returns_state_and_reachable(self):
        d = self._new(players=2)
        self.assertTrue(d["ok"])
        state = d["state"]
        self.assertEqual(state["phase"], "SHIFT")
        self.assertIsNone(state["lastShift"])
        self.assertEqual(len(state["board"]["grid"]), 7)
        self.assertEqual(len(state["players"]), 2)
        self.assertEqual(state["totalTreasures"], 12)
        self.assertIn([0, 0], d["reachable"])

    def test_given_bad_player_count_when_new_then_400(self):
        r = self._post("/api/new", {"players": 9})
        self.assertEqual(r.status_code, 400)
        self.assertFalse(r.get_json()["ok"])

    def test_given_state_when_rotating_shifting_and_moving_then_full_turn_completes(self):
        state = self._new()["state"]
        rot0 = state["board"]["extra"]["rotation"]

        r = self._post("/api/rotate", {"state": state})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertEqual(d["state"]["board"]["extra"]["rotation"], (rot0 + 1) % 4)
        self.assertEqual(d["events"][0]["event"], "tile_rotated")

        r = self._post("/api/shift", {"state": d["state"], "side": "N", "index": 1})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertEqual(d["state"]["phase"], "MOVE")
        self.assertEqual(d["state"]["lastShift"], {"side": "N", "index": 1})
        target = d["reachable"][-1]

        r = self._post("/api/move", {"state": d["state"], "move": target})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertEqual(d["state"]["phase"], "SHIFT")
        p = d["state"]["players"][0]
        self.assertEqual([p["x"], p["y"]], target)

    def test_given_reversal_when_shifting_then_400_with_kind_and_event(self):
        state = self._new()["state"]
        d = self._post("/api/shift", {"state": state, "side": "E", "index": 3}).get_json()
        p = d["state"]["players"][0]
        d = self._post("/api/move", {"state": d["state"], "move": [p["x"], p["y"]]}).get_json()
        r = self._post("/api/shift", {"state": d["state"], "side": "W", "index": 3})
        self.assertEqual(r.status_code, 400)
        body = r.get_json()
        self.assertFalse(body["ok"])
        self.assertEqual(body["kind"], "illegal_reversal")
        self.assertEqual([e["event"] for e in body["events"]], ["reversal_rejected"])

    def test_given_illegal_requests_when_posted_then_400(self):
        state = self._new()["state"]
        r = self._post("/api/shift", {"state": state, "side": "N", "index": 2})
        self.assertEqual(r.get_json()["kind"], "invalid_line")
        r = self._post("/api/move", {"state": state, "move": [0, 0]})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json()["kind"], "wrong_phase")
        r = self._post("/api/shift", {"state": state, "side": "N"})
        self.assertEqual(r.status_code, 400)
        r = self._post("/api/reachable", {})
        self.assertEqual(r.get_json()["error"], "missing state")
        r = self._post("/api/reachable", {"state": {"board": {"grid": []}}})
        self.assertTrue(r.get_json()["error"].startswith("bad state"))

    def test_given_unreachable_target_when_moving_then_400_and_state_kept(self):
        # Vertical straights everywhere: the player at (0,0) can only walk column 0.
        state = state_to_json(corridor_state())
        d = self._post("/api/shift", {"state": state, "side": "N", "index": 5}).get_json()
        self.assertEqual(d["reachable"], [[0, y] for y in range(7)])
        r = self._post("/api/move", {"state": d["state"], "move": [3, 3]})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json()["kind"], "unreachable_cell")
        r = self._post("/api/move", {"state": d["state"], "move": [0, 6]})
        self.assertEqual(r.status_code, 200)
        p = r.get_json()["state"]["players"][0]
        self.assertEqual([p["x"], p["y"], p["score"]], [0, 6, 0])

    def test_given_fixed_tile_on_shiftable_line_when_posted_then_bad_state(self):
        state = state_to_json(new_game(seed=1))
        state["board"]["grid"][0][1]["fixed"] = True
        r = self._post("/api/shift", {"state": state, "side": "N", "index": 1})
        self.assertEqual(r.status_code, 400)
        self.assertTrue(r.get_json()["error"].startswith("bad state"))

    def test_given_duplicated_tile_when_posted_then_bad_state(self):
        state = state_to_json(new_game(seed=1))
        grid = state["board"]["grid"]
        grid[3][3] = dict(grid[3][4])
        r = self._post("/api/reachable", {"state": state})
        self.assertEqual(r.status_code, 400)
        self.assertIn("distinct", r.get_json()["error"])
        with self.assertRaises(ValueError):
            json_to_state(state)

    def test_given_non_numeric_options_when_new_then_400(self):
        for payload in ({"players": None}, {"seed": {}}, {"players": [2]}):
            r = self._post("/api/new", payload)
            self.assertEqual(r.status_code, 400, payload)
            self.assertFalse(r.get_json()["ok"])

    def test_given_state_when_round_tripping_json_then_equivalent(self):
        state = new_game(seed=9, num_players=2)
        obj = state_to_json(state)
        self.assertEqual(state_to_json(json_to_state(obj)), obj)


if __name__ == "__main__":
    unittest.main(verbosity=2)
