"""Generic 2D grid of elements parsed from text lines, plus coordinate helpers."""

from enum import Enum
from typing import NamedTuple

from pathsearch.astar import astar_all_paths
from pathsearch.common import manhattan


class Direction(Enum):
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def turn_right(self):
        order = list(Direction)
        return order[(order.index(self) + 1) % 4]

    def turn_left(self):
        order = list(Direction)
        return order[(order.index(self) - 1) % 4]

    def reverse(self):
        return self.turn_right().turn_right()

    def as_char(self):
        return {"NORTH": "^", "EAST": ">", "SOUTH": "v", "WEST": "<"}[self.name]


class Coordinates(NamedTuple):
    row: int
    col: int

    def __add__(self, direction):
        if isinstance(direction, Direction):
            dr, dc = direction.value
            return Coordinates(self.row + dr, self.col + dc)
        return NotImplemented

    def neighbours(self):
        """The four orthogonally adjacent positions (N, E, S, W)."""
        return [self + d for d in Direction]

    def manhattan(self, other):
        return manhattan(self, other)


class Grid:
    """A rectangular grid built from equally long text lines.

    Subclasses set `null_element` and implement `to_element(char)`. Reads
    outside the grid return `null_element`.
    """

    null_element = None

    def __init__(self, lines):
        lines = list(lines)
        self.height = len(lines)
        self.width = len(lines[0]) if lines else 0
        self._cells = [[self.null_element] * self.width for _ in range(self.height)]
        for row, line in enumerate(lines):
            for col, char in enumerate(line):
                self._cells[row][col] = self.to_element(char)

    def to_element(self, char):
        raise NotImplementedError

    def __getitem__(self, position):
        row, col = position
        if 0 <= row < self.height and 0 <= col < self.width:
            return self._cells[row][col]
        return self.null_element

    def get_at(self, position):
        return self[position.row, position.col]

    def set_at(self, position, element):
        if not (0 <= position.row < self.height and 0 <= position.col < self.width):
            raise IndexError(f"{position} is outside the {self.height}x{self.width} grid")
        self._cells[position.row][position.col] = element

    def for_each_index(self, action):
        for row in range(self.height):
            for col in range(self.width):
                yield action(row, col)

    def for_each_element(self, action):
        for row in range(self.height):
            for col in range(self.width):
                yield action(row, col, self._cells[row][col])

    def for_each_coordinates(self, action):
        for row in range(self.height):
            for col in range(self.width):
                yield action(Coordinates(row, col), self._cells[row][col])

    def render(self, overrides=(), override_char='#', highlight_position=None,
               highlight_direction=None, path=None):
        """Render the grid as text.

        Precedence per cell: highlighted position, path character, override
        character, then the element itself.
        """
        path = path or {}
        overrides = set(overrides)
        rows = []
        for row in range(self.height):
            chars = []
            for col in range(self.width):
                position = Coordinates(row, col)
                if position == highlight_position and highlight_direction is not None:
                    chars.append(highlight_direction.as_char())
                elif position in path:
                    chars.append(str(path[position]))
                elif position in overrides:
                    chars.append(override_char)
                else:
                    chars.append(str(self._cells[row][col]))
            rows.append("".join(chars))
        return "\n".join(rows)


class CharGrid(Grid):
    """Grid whose elements are the characters themselves; outside reads as a wall."""

    null_element = '#'

    def to_element(self, char):
        return char


def grid_shortest_paths(grid, start, goal, wall='#', step_cost=None):
    """All cheapest orthogonal walks from start to goal avoiding wall cells.

    step_cost(a, b) defaults to 1 per move; the Manhattan distance is used as
    heuristic, so custom step costs must be at least 1.
    """
    start = Coordinates(*start)
    goal = Coordinates(*goal)

    def neighbors(position):
        return [n for n in position.neighbours() if grid.get_at(n) != wall]

    return astar_all_paths(
        start,
        lambda p: p == goal,
        neighbors,
        step_cost or (lambda a, b: 1),
        lambda p: p.manhattan(goal),
    )
