"""Directed hypergraphs, pattern matching, canonical forms, rewriting rules, a thread-safe deque and per-thread object pools."""

__version__ = "1.0.0"
__all__ = ["canonicalization", "deque", "hypergraph", "patterns", "pool", "rewriting"]