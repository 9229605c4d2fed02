import sys
import time
import tracemalloc

import psutil

from pathsearch.astar import astar_all_paths
from pathsearch.common import euclidean
from pathsearch.errors import NoPathFound
from pathsearch.util import GraphReader, format_bytes


def _heuristics(graph):
    """Heuristic functions by method name."""
    goal_coords = [c for c in (graph.get_coordinates(d) for d in graph.destinations) if c is not None]

    def straight_line(node_id):
        coord = graph.get_coordinates(node_id)
        if coord is None or not goal_coords:
            return 0
        return min(euclidean(coord, gc) for gc in goal_coords)

    return {
        "AS": straight_line,
        "CUS1": lambda node_id: 0,
    }


def run_all_paths(graph, heuristic):
    """Runs the all-shortest-paths search on a problem graph.

    Returns the list of ShortestPath, or None when no destination is reachable.
    """
    if graph.origin is None or not graph.destinations:
        return None
    try:
        return astar_all_paths(
            graph.origin,
            lambda n: n in graph.destinations,
            graph.neighbors,
            graph.edge_cost,
            heuristic,
        )
    except NoPathFound:
        return None


def _execute_with_metrics(graph, heuristic):
    """Run the search and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    """
    tracemalloc.start()
    proc = psutil.Process()
    t0 = time.perf_counter()
    result = run_all_paths(graph, heuristic)
    dt = time.perf_counter() - t0
    _cur, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return result, dt, peak, proc.memory_info().rss


def main(filename, method, metrics_mode="none"):
    """Main function to run the search.

    metrics_mode: "none" | "stderr" | "stdout"
    """
    try:
        graph = GraphReader(filename).read_problem()
    except FileNotFoundError:
        print(f"Error: File not found: {filename}")
        return 1

    method = method.upper()
    heuristic = _heuristics(graph).get(method)
    if heuristic is None:
        print(f"Unknown method: {method}")
        return 1

    result, runtime_s, peak_bytes, rss_after = _execute_with_metrics(graph, heuristic)

    # <filename> <method>
    # <path>           (one line per optimal path)
    # Total path cost:<cost>
    print(f"{filename} {method}")
    if not result:
        print("No path found")
    else:
        for shortest in result:
            print(" -> ".join(str(n) for n in shortest.path))
        print(f"Number of optimal paths:{len(result)}")
        print(f"Total path cost:{result[0].cost}")

    if metrics_mode in ("stderr", "stdout"):
        metrics_line = (
            f"Metrics: method={method} paths={len(result) if result else 0} "
            f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={format_bytes(peak_bytes)} "
            f"rss_now={format_bytes(rss_after)}"
        )
        if metrics_mode == "stdout":
            print(metrics_line)
        else:
            print(metrics_line, file=sys.stderr)
    return 0 if result else 2


USAGE = "Usage: python search.py <filename> <method> [--metrics | --metrics-stdout]\nMethods: AS, CUS1"

METRICS_FLAGS = {"--metrics": "stderr", "-m": "stderr", "--metrics-stdout": "stdout"}


def parse_args(argv):
    """Splits argv (without the program name) into (filename, method, metrics_mode).

    Returns None when the argument count is wrong. An unknown metrics flag is
    reported on stderr and disables metrics.
    """
    if len(argv) not in (2, 3):
        return None
    filename, method = argv[0], argv[1]
    metrics_mode = "none"
    if len(argv) == 3:
        metrics_mode = METRICS_FLAGS.get(argv[2].lower())
        if metrics_mode is None:
            print(f"Warning: unknown flag '{argv[2]}'. Metrics disabled.", file=sys.stderr)
            metrics_mode = "none"
    return filename, method, metrics_mode


if __name__ == "__main__":
    # e.g., python search.py problem.txt AS --metrics
    args = parse_args(sys.argv[1:])
    if args is None:
        print(USAGE)
        sys.exit(1)
    sys.exit(main(*args))
