"""
College Directory.

Read-only HTTP directory over a College -> Department -> Class -> Student
hierarchy held in memory.
"""

__version__ = "0.1.0"
