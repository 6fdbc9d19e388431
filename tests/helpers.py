"""Shared helpers for the test suite."""


class FixedRng:
    """Stand-in random source that replays a fixed list of draws."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def integers(self, low, high):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        assert low <= value < high
        return value


def play(engine, columns):
    """Drop disks into the given columns in order, returning the landing rows."""
    return [engine.drop_disk(col) for col in columns]


# Full-board sequence with no four in a row anywhere, Yellow moving first
DRAW_SEQUENCE = [6] * 6 + [
    col
    for a, b in [(0, 3), (1, 4), (2, 5)]
    for col in [a, b, b, a, a, b, b, a, a, b, b, a]
]
