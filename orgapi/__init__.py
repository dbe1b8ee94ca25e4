"""
orgapi: read-only public API serving organisations assembled from a graph store.
"""

__version__ = '1.0.0'
