"""Package exposing the all-shortest-paths search and its helpers."""

from .astar import ShortestPath, astar_all_paths, run_astar_all
from .errors import NoPathFound
from .grid import CharGrid, Coordinates, Direction, Grid, grid_shortest_paths
from .prefix_tree import PrefixTree

__all__ = [
    "ShortestPath",
    "astar_all_paths",
    "run_astar_all",
    "NoPathFound",
    "CharGrid",
    "Coordinates",
    "Direction",
    "Grid",
    "grid_shortest_paths",
    "PrefixTree",
]
