"""
Yinsh core Python package.

Pure rule logic for Yinsh on its 85-point triangular lattice; no I/O.
Modules:
- lattice.py: coordinates, directions, connectivity
- board.py: Player, Ring, Marker, Board
- moves.py: legal ring moves (slide and jump over markers)
- combination.py: five-in-a-row detection
- state.py / turn.py: GameState, turn phases, advance()
- screen.py: lattice <-> screen mapping, closest_coordinate()
- layouts.py, preview.py, session.py, cli.py: seeds, hover preview, session cell, text UI
"""
