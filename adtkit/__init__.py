"""Classic abstract data types: counters, array, linked and sorted lists, a queue, a stack, a calendar date and complex numbers."""

__version__ = "0.1.0"