"""
todokeeper: a small todo list HTTP service backed by a JSON file.
"""

__version__ = "1.0.0"
