import math


def euclidean(a, b):
    """Euclidean distance between coordinate tuples a and b."""
    (x1, y1), (x2, y2) = a, b
    return math.hypot(x1 - x2, y1 - y2)


def manhattan(a, b):
    """Manhattan distance between coordinate tuples a and b."""
    (x1, y1), (x2, y2) = a, b
    return abs(x1 - x2) + abs(y1 - y2)


_EXHAUSTED = object()


def reconstruct_paths(came_from, goal, start):
    """Reconstructs every path (list of nodes) from start to goal in came_from.

    came_from maps a node to the collection of its predecessors on a cheapest
    path, so the result is the cross-product of all predecessor choices.
    Backtracks over one shared path with an explicit stack of predecessor
    iterators, so each step costs O(1) and each emitted path O(len(path)).
    """
    if goal == start:
        return [[start]]

    paths = []
    path = [goal]        # goal first, grows towards start
    on_path = {goal}
    frames = [iter(came_from.get(goal, ()))]
    while frames:
        pred = next(frames[-1], _EXHAUSTED)
        if pred is _EXHAUSTED:
            frames.pop()
            on_path.discard(path.pop())
            continue
        # zero-cost cycles can record a node as its own ancestor
        if pred in on_path:
            continue
        if pred == start:
            paths.append([start] + path[::-1])
            continue
        path.append(pred)
        on_path.add(pred)
        frames.append(iter(came_from.get(pred, ())))
    return paths


def path_cost(path, cost):
    """Sum of cost(a, b) over consecutive node pairs of path."""
    total = 0
    for i in range(len(path) - 1):
        total += cost(path[i], path[i + 1])
    return total
