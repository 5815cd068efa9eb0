"""Classic data structures and algorithms: sorting, searching, stacks, queues, lists, mazes and trees."""

__version__ = "0.1.0"