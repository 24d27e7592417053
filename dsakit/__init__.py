"""Classic algorithm and data-structure routines: arrays, graphs, trees, recursion, stacks and an LRU cache."""

__version__ = "0.1.0"
__all__ = ["arrays", "graphs", "lru", "recursion", "stack", "trees"]