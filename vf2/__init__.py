"""VF2 graph, subgraph and induced subgraph isomorphism search."""

__version__ = "1.0.1"

__all__ = ["builder", "graph", "iter", "state"]