"""Canonical forms of hypergraphs, found by searching all vertex relabelings."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import permutations
from typing import Sequence

from .hypergraph import Hypergraph, VertexId


@dataclass
class CanonicalForm:
    """Sorted edges over vertices labelled 0..vertex_count-1."""

    edges: list[list[int]] = field(default_factory=list)
    vertex_count: int = 0

    def to_string(self) -> str:
        parts = ", ".join("[" + ",".join(str(v) for v in edge) + "]" for edge in self.edges)
        return f"CanonicalForm(vertices={self.vertex_count}, edges=[{parts}])"

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class VertexMapping:
    """Correspondence between canonical labels and original vertex ids."""

    canonical_to_original: list[VertexId] = field(default_factory=list)
    original_to_canonical: dict[VertexId, int] = field(default_factory=dict)


@dataclass
class CanonicalizationResult:
    canonical_form: CanonicalForm = field(default_factory=CanonicalForm)
    vertex_mapping: VertexMapping = field(default_factory=VertexMapping)


def wolfram_canonical_hypergraph(
    edges: Sequence[Sequence[VertexId]],
) -> tuple[list[list[int]], VertexMapping]:
    """Return the lexicographically smallest sorted relabeling of ``edges`` and its mapping.

    Every permutation of the vertices (taken in order of first appearance) is
    tried; on ties the first permutation found wins.
    """
    vertices = list(dict.fromkeys(v for edge in edges for v in edge))

    best_edges: list[list[int]] | None = None
    best_order: list[VertexId] = []
    for perm in permutations(range(len(vertices))):
        relabel = {vertices[p]: i for i, p in enumerate(perm)}
        candidate = sorted([relabel[v] for v in edge] for edge in edges)
        if best_edges is None or candidate < best_edges:
            best_edges = candidate
            best_order = [vertices[p] for p in perm]

    mapping = VertexMapping(
        canonical_to_original=best_order,
        original_to_canonical={v: i for i, v in enumerate(best_order)},
    )
    return best_edges if best_edges is not None else [], mapping


class Canonicalizer:
    """Computes canonical forms of hypergraphs and raw edge lists."""

    def canonicalize(self, hypergraph: Hypergraph) -> CanonicalizationResult:
        if hypergraph.num_vertices() == 0:
            return CanonicalizationResult()
        return self._from_edges([list(edge.vertices) for edge in hypergraph.edges])

    def canonicalize_edges(self, edges: Sequence[Sequence[VertexId]]) -> CanonicalizationResult:
        if not edges:
            return CanonicalizationResult()
        return self._from_edges(edges)

    @staticmethod
    def _from_edges(edges: Sequence[Sequence[VertexId]]) -> CanonicalizationResult:
        canonical_edges, mapping = wolfram_canonical_hypergraph(edges)
        form = CanonicalForm(
            edges=canonical_edges, vertex_count=len(mapping.canonical_to_original)
        )
        return CanonicalizationResult(canonical_form=form, vertex_mapping=mapping)