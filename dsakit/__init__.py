"""Classic data structures and algorithms: stacks, queues, trees, graphs, hashing and number routines."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "expressions",
    "graphs",
    "hanoi",
    "hashing",
    "numbers",
    "priority",
    "queues",
    "stack",
    "trees",
]