"""Iteration tools: accumulate, chain, compress, groupby, permutations, product, and reversed and sorted views."""

__version__ = "0.1.0"

__all__ = [
    "accumulate",
    "chain",
    "compress",
    "groupby",
    "permutations",
    "product",
    "reversed",
    "sorted",
]