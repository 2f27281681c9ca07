"""Classic data structures and algorithms in plain Python.

Linked lists, binary trees, list and string algorithms, dynamic programming,
shortest paths, small record types and a file-backed flight booking system.
"""

__version__ = "0.1.0"