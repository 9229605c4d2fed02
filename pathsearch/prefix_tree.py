_END = object()


class PrefixTree:
    """Trie of building blocks used to count how a word can be composed from them."""

    def __init__(self):
        self.root = {}

    def add(self, word):
        """Adds a single building block to the trie."""
        node = self.root
        for char in word:
            node = node.setdefault(char, {})
        node[_END] = True

    def prefix_lengths(self, text, start=0):
        """Yields the lengths of every stored block that text[start:] begins with."""
        node = self.root
        for i in range(start, len(text)):
            node = node.get(text[i])
            if node is None:
                return
            if _END in node:
                yield i - start + 1

    def count(self, design):
        """Number of ways design can be written as a sequence of stored blocks."""
        # ways[i] = number of compositions of design[i:]
        ways = [0] * (len(design) + 1)
        ways[len(design)] = 1
        for i in range(len(design) - 1, -1, -1):
            ways[i] = sum(ways[i + n] for n in self.prefix_lengths(design, i))
        return ways[0]

    def insert(self, design, towels):
        """Stores towels and returns the number of ways to compose design from them."""
        for towel in towels:
            if towel:
                self.add(towel)
        return self.count(design)

    def is_possible(self, design, towels):
        return self.insert(design, towels) > 0
