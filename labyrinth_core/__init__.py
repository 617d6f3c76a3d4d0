"""
Labyrinth core Python package.

Game-state logic for the tile-sliding maze. Only cli.py does I/O.
Modules:
- tiles.py: Tile, tile types and the rotation/connection algebra
- board.py: Board (7x7 grid plus the extra tile)
- shift.py: row/column insertion, anti-reversal rule, player carry
- moves.py: reachability search over tile connections
- state.py, engine.py: GameState and the LabyrinthGame turn controller
- deal.py: fixed layout, shuffled deck and treasure placement
- events.py, errors.py: advisory event bus and the rejection errors
- cli.py: terminal front-end
"""
