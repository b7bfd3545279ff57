"""Data-structure and algorithm drills: arrays, lists, matrices, recursion, strings and trees."""

__version__ = "0.1.0"