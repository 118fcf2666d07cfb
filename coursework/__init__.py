"""A mutable string type, a turn-based vehicle travel simulation and statistics-tracking stacks and queues."""

__version__ = "0.1.0"