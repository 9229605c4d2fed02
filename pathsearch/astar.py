import heapq
import itertools
from typing import Any, Callable, Hashable, Iterable, List, NamedTuple, Optional

from pathsearch.common import euclidean, reconstruct_paths
from pathsearch.errors import NoPathFound


class ShortestPath(NamedTuple):
    """One optimal route: the node sequence from start to a goal and its cost."""
    path: List[Any]
    cost: float


Observer = Callable[[Iterable[Hashable], Hashable, Callable[[], str]], None]


def astar_all_paths(start, is_goal, neighbors, cost, heuristic,
                    observer: Optional[Observer] = None) -> List[ShortestPath]:
    """
    Modified A* search that returns every minimum-cost path from start to a goal.

    Predecessors are tracked as a set per node so that equally cheap routes are
    all kept. The search stops once a goal has been popped and no frontier node
    has an f-score that could still tie or beat it, which is only sound for an
    admissible heuristic.

    Args:
        start: start node (any hashable value)
        is_goal: predicate deciding if a node is a goal
        neighbors: returns the nodes directly reachable from a node
        cost: cost(a, b) is the non-negative weight of the edge a -> b
        heuristic: heuristic(n) estimates the remaining cost from n to a goal
        observer: optional callback(visited, current, describe) invoked after
            every edge relaxation attempt; describe() builds a diagnostic line
    Returns:
        list of ShortestPath, all sharing the minimum cost
    Raises:
        NoPathFound: if the frontier empties before a goal is reached
    """
    g_score = {start: 0}
    f_score = {start: heuristic(start)}
    came_from = {}  # {node: {predecessor: None, ...}} insertion-ordered set

    counter = itertools.count()
    heap = [(f_score[start], next(counter), start)]
    open_set = {start}

    bound = None  # cost of the accepted goal(s)
    goals = {}

    def describe(current, neighbor):
        def _line():
            frontier = ", ".join(f"{n}={f_score[n]}" for n in open_set)
            return (f"current: {current}={f_score.get(current)}, "
                    f"neighbor: {neighbor}={f_score.get(neighbor)}, open: {frontier}")
        return _line

    while True:
        # Drop stale entries (node already popped or re-pushed with a lower f)
        while heap and (heap[0][2] not in open_set or heap[0][0] != f_score[heap[0][2]]):
            heapq.heappop(heap)

        if bound is not None and (not heap or heap[0][0] > bound):
            break
        if not heap:
            raise NoPathFound(start)

        _f, _cnt, current = heapq.heappop(heap)
        open_set.discard(current)

        if is_goal(current):
            g = g_score[current]
            if bound is None or g < bound:
                bound = g
                goals = {}
            if g == bound:
                goals[current] = None
            continue

        for neighbor in neighbors(current):
            tentative = g_score[current] + cost(current, neighbor)
            known = g_score.get(neighbor)
            if known is None or tentative < known:
                # Strictly better path to neighbor, forget older predecessors
                came_from[neighbor] = {current: None}
                g_score[neighbor] = tentative
                f_score[neighbor] = tentative + heuristic(neighbor)
                open_set.add(neighbor)
                heapq.heappush(heap, (f_score[neighbor], next(counter), neighbor))
            elif tentative == known:
                came_from.setdefault(neighbor, {})[current] = None
            if observer is not None:
                observer(came_from.keys(), current, describe(current, neighbor))

    return [ShortestPath(path, bound)
            for goal in goals
            for path in reconstruct_paths(came_from, goal, start)]


def _as_node_id(value):
    """Node ids read as strings become ints where they look like ints."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return value


def _ways_to_edges(ways_df):
    """Cheapest cost per (from, to) pair and the sorted successor lists it implies."""
    cost_column = 'final_time' if 'final_time' in ways_df.columns else 'base_time'
    cheapest = (ways_df.assign(cost=ways_df[cost_column].astype(float))
                .groupby(['from', 'to'])['cost'].min())
    edge_costs = {(_as_node_id(a), _as_node_id(b)): float(cost) for (a, b), cost in cheapest.items()}
    adjacency = {}
    for a, b in sorted(edge_costs):
        adjacency.setdefault(a, []).append(b)
    return edge_costs, adjacency


def run_astar_all(nodes_df, ways_df, start, goals, use_heuristic=True):
    """
    Finds all cheapest paths from start to the nearest of the goal nodes.
    Args:
        nodes_df: DataFrame of nodes (index: node id, columns: lat, lon, label)
        ways_df: DataFrame of ways (columns: from, to, base_time and optionally final_time)
        start: start node id (string or int)
        goals: list or set of goal node ids (string or int)
        use_heuristic: Euclidean distance to the nearest goal when True, 0 otherwise
    Returns:
        (goal_nodes, nodes_expanded, paths) or None
    """
    start = _as_node_id(start)
    goals = {_as_node_id(g) for g in goals}
    if start is None or not goals:
        return None

    edge_costs, adjacency = _ways_to_edges(ways_df)
    coordinates = dict(zip(map(_as_node_id, nodes_df.index), zip(nodes_df['lat'], nodes_df['lon'])))
    goal_coords = [coordinates[g] for g in goals if g in coordinates]

    def heuristic(node):
        coord = coordinates.get(node) if use_heuristic else None
        if coord is None or not goal_coords:
            return 0
        return min(euclidean(coord, gc) for gc in goal_coords)

    expanded = set()

    def neighbors(node):
        expanded.add(node)
        return adjacency.get(node, [])

    try:
        paths = astar_all_paths(
            start,
            lambda n: n in goals,
            neighbors,
            lambda a, b: edge_costs[(a, b)],
            heuristic,
        )
    except NoPathFound:
        return None

    goal_nodes = list(dict.fromkeys(p.path[-1] for p in paths))
    return goal_nodes, len(expanded), paths
