"""Classic data structures and graph algorithms: trees, lists, stack, queue, max-heap and graphs."""

__version__ = "0.1.0"