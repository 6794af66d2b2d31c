from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Union

from .lattice import COORDS, Coord, is_valid_point


class Player(Enum):
    B = 'B'
    W = 'W'

    def other(self) -> 'Player':
        return Player.W if self is Player.B else Player.B


@dataclass(frozen=True)
class Ring:
    owner: Player
    coord: Coord


@dataclass(frozen=True)
class Marker:
    owner: Player
    coord: Coord


Piece = Union[Ring, Marker]


@dataclass(frozen=True)
class Board:
    """Immutable occupancy map: at most one piece per lattice point.

    `place` returns a new board; the cell dict is never mutated
    after construction.
    """
    cells: Dict[Coord, Piece] = field(default_factory=dict, hash=False)

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> 'Board':
        """Builds a board from pieces; a later piece on the same point wins."""
        return cls({p.coord: p for p in pieces})

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.cells.values())

    def __len__(self) -> int:
        return len(self.cells)

    def at(self, c: Coord) -> Optional[Piece]:
        return self.cells.get(c)

    def is_free(self, c: Coord) -> bool:
        return c not in self.cells

    def has_ring(self, c: Coord) -> bool:
        return isinstance(self.cells.get(c), Ring)

    def has_marker(self, c: Coord) -> bool:
        return isinstance(self.cells.get(c), Marker)

    def place(self, piece: Piece) -> 'Board':
        """Returns a new board with piece on its point, replacing any occupant."""
        cells = dict(self.cells)
        cells[piece.coord] = piece
        return Board(cells)

    def rings(self) -> List[Ring]:
        return [p for p in self.cells.values() if isinstance(p, Ring)]

    def markers(self) -> List[Marker]:
        return [p for p in self.cells.values() if isinstance(p, Marker)]

    def ring_coords(self, player: Player) -> FrozenSet[Coord]:
        return frozenset(r.coord for r in self.rings() if r.owner is player)

    def marker_coords(self, player: Player) -> FrozenSet[Coord]:
        return frozenset(m.coord for m in self.markers() if m.owner is player)

    def free_coords(self) -> List[Coord]:
        return [c for c in COORDS if c not in self.cells]

    def pretty(self, highlight: Optional[Set[Coord]] = None) -> str:
        """Renders the board as text, one line per b-row from top to bottom."""
        hset = highlight or set()
        b_values = sorted({b for _, b in COORDS}, reverse=True)
        a_values = sorted({a for a, _ in COORDS})
        lines: List[str] = []
        for b in b_values:
            row: List[str] = []
            for a in a_values:
                c = (a, b)
                if not is_valid_point(c):
                    row.append(' ')
                    continue
                piece = self.cells.get(c)
                if piece is None:
                    row.append('.')
                elif c in hset:
                    row.append('*')
                elif isinstance(piece, Ring):
                    row.append(piece.owner.value)
                else:
                    row.append(piece.owner.value.lower())
            lines.append(f"{b:2d} " + ' '.join(row).rstrip())
        lines.append('   ' + ' '.join(str(a % 10) for a in a_values))
        return '\n'.join(lines)
