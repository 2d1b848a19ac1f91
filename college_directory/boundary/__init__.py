"""
Boundary layer.

Data access for the in-memory hierarchy.
"""
