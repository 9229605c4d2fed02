import sys


class Graph:
    """Directed, weighted graph whose nodes carry integer (x, y) positions."""
    def __init__(self):
        self.coordinates = {}     # {node_id: (x, y)}
        self.adjacency = {}       # {from_node_id: [(to_node_id, cost), ...]}
        self.origin = None
        self.destinations = set()

    def add_node(self, node_id, x, y):
        self.coordinates[int(node_id)] = (int(x), int(y))
        self.adjacency.setdefault(int(node_id), [])

    def add_edge(self, from_id, to_id, cost):
        """Adds a directed edge and its cost."""
        self.adjacency.setdefault(from_id, []).append((to_id, cost))

    def neighbors(self, node_id):
        """Successor ids of node_id in ascending order, without duplicates."""
        return sorted({to_id for to_id, _ in self.adjacency.get(node_id, [])})

    def edge_cost(self, from_id, to_id):
        """Cheapest cost of the edge from_id -> to_id, or None if there is none."""
        costs = [cost for neighbor, cost in self.adjacency.get(from_id, []) if neighbor == to_id]
        return min(costs) if costs else None

    def get_coordinates(self, node_id):
        return self.coordinates.get(node_id)

    def path_cost(self, path):
        """Calculate total cost of edges in the given path."""
        total = 0
        for i in range(len(path) - 1):
            edge_cost = self.edge_cost(path[i], path[i + 1])
            if edge_cost is None:
                return None  # Edge not found
            total += edge_cost
        return total


class GraphReader:
    """Reads a Nodes/Edges/Origin/Destinations problem file into a Graph."""

    # header -> (section name used in error messages, parser method)
    SECTIONS = {
        "Nodes:": ("node", "_parse_node"),
        "Edges:": ("edge", "_parse_edge"),
        "Origin:": ("origin", "_parse_origin"),
        "Destinations:": ("destinations", "_parse_destinations"),
    }

    def __init__(self, filename):
        self.filename = filename
        self.graph = Graph()

    def read_problem(self):
        """Reads the file and populates the Graph object.

        Malformed lines are reported on stderr and skipped. A missing file
        raises FileNotFoundError.
        """
        with open(self.filename, 'r') as f:
            return self.read_lines(f)

    def read_lines(self, lines):
        section = None
        for line in (raw.strip() for raw in lines):
            header = next((h for h in self.SECTIONS if line.startswith(h)), None)
            if header is not None:
                section = self.SECTIONS[header]
                # a value may follow the header on the same line
                line = line[len(header):].strip()
            if not line or section is None:
                continue
            name, parser = section
            try:
                getattr(self, parser)(line)
            except (IndexError, ValueError) as e:
                print(f"Error parsing {name} line '{line}': {e}", file=sys.stderr)
        return self.graph

    def _parse_node(self, line):
        # 1: (4,1)
        node_id, coords = line.split(':', 1)
        x, y = coords.strip().strip('()').split(',')
        self.graph.add_node(int(node_id), int(x), int(y))

    def _parse_edge(self, line):
        # (2,1): 4
        ends, cost = line.split(':', 1)
        from_id, to_id = ends.strip().strip('()').split(',')
        self.graph.add_edge(int(from_id), int(to_id), int(cost))

    def _parse_origin(self, line):
        self.graph.origin = int(line)

    def _parse_destinations(self, line):
        # 5; 4
        self.graph.destinations.update([int(d) for d in line.split(";") if d.strip()])


def format_bytes(n_bytes):
    """Human readable size, e.g. 512 -> '512 B', 2048 -> '2.00 KB'."""
    if n_bytes < 1024:
        return f"{n_bytes} B"
    size = float(n_bytes)
    for unit in ("KB", "MB", "GB"):
        size /= 1024.0
        if size < 1024 or unit == "GB":
            break
    return f"{size:.2f} {unit}"
