"""Pattern hypergraphs with variables, and matching them against concrete hypergraphs."""

from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional, Sequence

from .hypergraph import INVALID_VERTEX, EdgeId, Hyperedge, Hypergraph, VertexId

VertexLabel = int

_MASK = 2**64 - 1
_GOLDEN = 0x9E3779B9


def _hash_combine(seed: int, value: int) -> int:
    """Mix ``value`` into ``seed`` the way a 64-bit hash_combine does."""
    return (seed ^ ((value + _GOLDEN + (seed << 6) + (seed >> 2)) & _MASK)) & _MASK


class VertexKind(enum.Enum):
    CONCRETE = "concrete"
    VARIABLE = "variable"


@dataclass(frozen=True)
class PatternVertex:
    """A vertex in a pattern: either a fixed vertex id or a variable."""

    id: VertexId
    kind: VertexKind = VertexKind.CONCRETE

    @classmethod
    def variable(cls, vertex_id: VertexId) -> "PatternVertex":
        return cls(vertex_id, VertexKind.VARIABLE)

    @classmethod
    def concrete(cls, vertex_id: VertexId) -> "PatternVertex":
        return cls(vertex_id, VertexKind.CONCRETE)

    def is_variable(self) -> bool:
        return self.kind is VertexKind.VARIABLE

    def is_concrete(self) -> bool:
        return self.kind is VertexKind.CONCRETE

    def __str__(self) -> str:
        return f"x{self.id}" if self.is_variable() else str(self.id)


class PatternEdge:
    """An ordered sequence of pattern vertices."""

    __slots__ = ("vertices",)

    def __init__(self, vertices: Iterable[PatternVertex]) -> None:
        self.vertices: tuple[PatternVertex, ...] = tuple(vertices)

    def arity(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[PatternVertex]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternEdge):
            return NotImplemented
        return self.vertices == other.vertices

    def __hash__(self) -> int:
        return hash(self.vertices)

    def __str__(self) -> str:
        return "{" + ",".join(str(v) for v in self.vertices) + "}"

    def __repr__(self) -> str:
        return f"PatternEdge({list(self.vertices)!r})"


class PatternHypergraph:
    """A list of pattern edges together with the variables they use."""

    def __init__(self, edges: Iterable[PatternEdge] = ()) -> None:
        self._edges: list[PatternEdge] = []
        self._variables: dict[VertexId, None] = {}
        for edge in edges:
            self.add_edge(edge)

    def add_edge(self, edge: PatternEdge) -> None:
        self._edges.append(edge)
        for vertex in edge.vertices:
            if vertex.is_variable():
                self._variables[vertex.id] = None

    def edges(self) -> tuple[PatternEdge, ...]:
        return tuple(self._edges)

    def num_edges(self) -> int:
        return len(self._edges)

    def variable_vertices(self) -> frozenset[VertexId]:
        return frozenset(self._variables)

    def num_variable_vertices(self) -> int:
        return len(self._variables)

    def __str__(self) -> str:
        return "{" + ",".join(str(e) for e in self._edges) + "}"

    def __repr__(self) -> str:
        return f"PatternHypergraph({self})"


@dataclass
class VariableAssignment:
    """Bindings from pattern variables to concrete vertex ids."""

    variable_to_concrete: dict[VertexId, VertexId] = field(default_factory=dict)

    def assign(self, variable: VertexId, vertex: VertexId) -> bool:
        """Bind ``variable`` to ``vertex``; False if it is already bound elsewhere."""
        bound = self.variable_to_concrete.get(variable)
        if bound is not None:
            return bound == vertex
        self.variable_to_concrete[variable] = vertex
        return True

    def resolve(self, pattern_vertex: PatternVertex) -> Optional[VertexId]:
        if pattern_vertex.is_concrete():
            return pattern_vertex.id
        return self.variable_to_concrete.get(pattern_vertex.id)

    def is_complete(self, variables: Iterable[VertexId]) -> bool:
        return all(v in self.variable_to_concrete for v in variables)

    def copy(self) -> "VariableAssignment":
        return VariableAssignment(dict(self.variable_to_concrete))


@dataclass
class PatternMatch:
    matched_edges: list[EdgeId] = field(default_factory=list)
    assignment: VariableAssignment = field(default_factory=VariableAssignment)
    anchor_vertex: VertexId = INVALID_VERTEX
    edge_map: dict[int, EdgeId] = field(default_factory=dict)


class PatternMatcher:
    """Finds occurrences of a pattern hypergraph inside a concrete hypergraph."""

    def edge_matches(
        self,
        concrete_edge: Hyperedge,
        pattern_edge: PatternEdge,
        assignment: VariableAssignment,
    ) -> Optional[VariableAssignment]:
        """Return ``assignment`` extended by matching the edges position by position, or None."""
        if concrete_edge.arity() != pattern_edge.arity():
            return None
        trial = assignment.copy()
        for pattern_vertex, concrete_vertex in zip(pattern_edge.vertices, concrete_edge.vertices):
            if pattern_vertex.is_concrete():
                if pattern_vertex.id != concrete_vertex:
                    return None
            elif not trial.assign(pattern_vertex.id, concrete_vertex):
                return None
        return trial

    def generate_assignments(
        self,
        concrete_edge: Hyperedge,
        pattern_edge: PatternEdge,
        base_assignment: VariableAssignment,
    ) -> list[VariableAssignment]:
        extended = self.edge_matches(concrete_edge, pattern_edge, base_assignment)
        return [] if extended is None else [extended]

    def _match_remaining(
        self,
        target: Hypergraph,
        remaining: Sequence[PatternEdge],
        available: frozenset[EdgeId],
        assignment: VariableAssignment,
    ) -> Optional[tuple[list[EdgeId], VariableAssignment]]:
        if not remaining:
            return [], assignment
        current, rest = remaining[0], remaining[1:]
        for edge_id in sorted(available):
            edge = target.get_edge(edge_id)
            if edge is None:
                continue
            extended = self.edge_matches(edge, current, assignment)
            if extended is None:
                continue
            found = self._match_remaining(target, rest, available - {edge_id}, extended)
            if found is not None:
                edges, final = found
                return [edge_id, *edges], final
        return None

    def _find_matches_from_anchor(
        self,
        target: Hypergraph,
        pattern: PatternHypergraph,
        anchor_vertex: VertexId,
        search_radius: int,
    ) -> list[PatternMatch]:
        if not target.has_vertex(anchor_vertex):
            return []
        nearby = frozenset(target.edges_within_radius(anchor_vertex, search_radius))
        if len(nearby) < pattern.num_edges():
            return []
        pattern_edges = pattern.edges()
        if not pattern_edges:
            return []

        matches: list[PatternMatch] = []
        first, rest = pattern_edges[0], pattern_edges[1:]
        for edge_id in sorted(nearby):
            edge = target.get_edge(edge_id)
            if edge is None:
                continue
            for initial in self.generate_assignments(edge, first, VariableAssignment()):
                found = self._match_remaining(target, rest, nearby - {edge_id}, initial)
                if found is None:
                    continue
                tail, assignment = found
                matched = [edge_id, *tail]
                matches.append(
                    PatternMatch(
                        matched_edges=matched,
                        assignment=assignment,
                        anchor_vertex=anchor_vertex,
                        edge_map=dict(enumerate(matched)),
                    )
                )
        return matches

    def find_matches_around(
        self,
        target: Hypergraph,
        pattern: PatternHypergraph,
        anchor_vertex: VertexId,
        search_radius: int,
    ) -> list[PatternMatch]:
        return self._find_matches_from_anchor(target, pattern, anchor_vertex, search_radius)

    def find_all_matches(self, target: Hypergraph, pattern: PatternHypergraph) -> list[PatternMatch]:
        """Exhaustively match from every vertex; one match per distinct edge sequence."""
        found: list[PatternMatch] = []
        for vertex in sorted(target.vertices):
            found.extend(
                self._find_matches_from_anchor(target, pattern, vertex, target.num_edges())
            )
        found.sort(key=lambda m: m.matched_edges)
        unique: list[PatternMatch] = []
        for match in found:
            if not unique or unique[-1].matched_edges != match.matched_edges:
                unique.append(match)
        return unique

    def matches_at(
        self,
        target: Hypergraph,
        pattern: PatternHypergraph,
        assignment: VariableAssignment,
    ) -> bool:
        """Check that every pattern edge, under ``assignment``, exists in ``target``."""
        if not assignment.is_complete(pattern.variable_vertices()):
            return False
        existing = {edge.vertices for edge in target.edges}
        for pattern_edge in pattern.edges():
            resolved = [assignment.resolve(v) for v in pattern_edge.vertices]
            if any(v is None for v in resolved):
                return False
            if tuple(resolved) not in existing:
                return False
        return True

    def find_first_match_around(
        self,
        target: Hypergraph,
        pattern: PatternHypergraph,
        anchor_vertex: VertexId,
        search_radius: int,
    ) -> Optional[PatternMatch]:
        matches = self.find_matches_around(target, pattern, anchor_vertex, search_radius)
        return matches[0] if matches else None


@dataclass(frozen=True, order=True)
class PatternSignature:
    """The shape of variable reuse along an edge, e.g. (0, 1, 0)."""

    variable_pattern: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "variable_pattern", tuple(self.variable_pattern))

    def hash(self) -> int:
        h = 0
        for var in self.variable_pattern:
            h = _hash_combine(h, var)
        return h


@dataclass(eq=False)
class EdgeSignature:
    """Arity, variable count and label multiset of an edge, used to prune candidates."""

    arity: int = 0
    num_variables: int = 0
    concrete_labels: tuple[VertexLabel, ...] = ()
    vertex_incidence: dict[VertexId, list[EdgeId]] = field(default_factory=dict)
    vertex_degrees: dict[VertexId, int] = field(default_factory=dict)
    variable_positions: tuple[int, ...] = ()

    @classmethod
    def from_concrete_edge(
        cls,
        edge: Hyperedge,
        label_func: Callable[[VertexId], VertexLabel],
        hypergraph: Optional[Hypergraph] = None,
    ) -> "EdgeSignature":
        sig = cls(arity=edge.arity())
        sig.concrete_labels = tuple(sorted(label_func(v) for v in edge.vertices))
        if hypergraph is not None:
            for v in edge.vertices:
                incident = hypergraph.edges_containing(v)
                sig.vertex_incidence[v] = incident
                sig.vertex_degrees[v] = len(incident)
        return sig

    @classmethod
    def from_pattern_edge(
        cls, edge: PatternEdge, label_func: Callable[[VertexId], VertexLabel]
    ) -> "EdgeSignature":
        positions = tuple(i for i, v in enumerate(edge.vertices) if v.is_variable())
        labels = sorted(label_func(v.id) for v in edge.vertices if v.is_concrete())
        return cls(
            arity=edge.arity(),
            num_variables=len(positions),
            concrete_labels=tuple(labels),
            variable_positions=positions,
        )

    def is_compatible_with_pattern(self, pattern: "EdgeSignature") -> bool:
        if self.arity != pattern.arity:
            return False
        remaining = Counter(self.concrete_labels)
        for label in pattern.concrete_labels:
            if remaining[label] == 0:
                return False
            remaining[label] -= 1
        return sum(remaining.values()) <= pattern.num_variables

    def generate_pattern_signatures(self) -> list[PatternSignature]:
        """All variable patterns of this arity that the edge's labels can realise."""
        if self.arity == 0:
            return []
        sorted_labels = list(self.concrete_labels)

        def extend(prefix: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
            if len(prefix) == self.arity:
                yield prefix
                return
            top = max(prefix, default=0)
            for var in range(top + 2):
                yield from extend(prefix + (var,))

        return [
            PatternSignature(p)
            for p in extend(())
            if self.is_pattern_compatible(p, sorted_labels)
        ]

    def is_pattern_compatible(
        self, pattern: Sequence[int], sorted_labels: Sequence[VertexLabel]
    ) -> bool:
        """Whether variables in ``pattern`` bind one-to-one onto ``sorted_labels``."""
        if len(pattern) != len(sorted_labels):
            return False
        binding: dict[int, VertexLabel] = {}
        used: set[VertexLabel] = set()
        for var, label in zip(pattern, sorted_labels):
            if var in binding:
                if binding[var] != label:
                    return False
            else:
                if label in used:
                    return False
                binding[var] = label
                used.add(label)
        return True

    def hash(self) -> int:
        h = _hash_combine(0, self.arity)
        h = _hash_combine(h, self.num_variables)
        for label in self.concrete_labels:
            h = _hash_combine(h, label & _MASK)
        return h

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeSignature):
            return NotImplemented
        return (
            self.arity == other.arity
            and self.num_variables == other.num_variables
            and self.concrete_labels == other.concrete_labels
        )

    def __hash__(self) -> int:
        return self.hash()


@dataclass
class _PatternPartition:
    signature_to_edges: dict[int, list[EdgeId]] = field(default_factory=dict)
    hash_to_signature: dict[int, EdgeSignature] = field(default_factory=dict)


class EdgeSignatureIndex:
    """Edges partitioned by arity, then by pattern signature, then by edge signature."""

    def __init__(self) -> None:
        self._by_arity: dict[int, dict[int, _PatternPartition]] = {}

    def add_edge(self, edge_id: EdgeId, signature: EdgeSignature) -> None:
        arity_partition = self._by_arity.setdefault(signature.arity, {})
        sig_hash = signature.hash()
        for pattern_sig in signature.generate_pattern_signatures():
            partition = arity_partition.setdefault(pattern_sig.hash(), _PatternPartition())
            partition.signature_to_edges.setdefault(sig_hash, []).append(edge_id)
            partition.hash_to_signature[sig_hash] = signature

    def find_compatible_edges(self, pattern: EdgeSignature) -> list[EdgeId]:
        arity_partition = self._by_arity.get(pattern.arity)
        if arity_partition is None:
            return []
        partition = arity_partition.get(PatternSignature(pattern.variable_positions).hash())
        if partition is None:
            return []
        result: list[EdgeId] = []
        for sig_hash, edges in partition.signature_to_edges.items():
            if partition.hash_to_signature[sig_hash].is_compatible_with_pattern(pattern):
                result.extend(edges)
        return result

    def get_edges_with_signature(self, signature: EdgeSignature) -> list[EdgeId]:
        arity_partition = self._by_arity.get(signature.arity)
        if arity_partition is None:
            return []
        sig_hash = signature.hash()
        result: list[EdgeId] = []
        for partition in arity_partition.values():
            result.extend(partition.signature_to_edges.get(sig_hash, ()))
        return result

    def clear(self) -> None:
        self._by_arity.clear()

    def size(self) -> int:
        """Number of distinct edges indexed."""
        return len(
            {
                eid
                for arity_partition in self._by_arity.values()
                for partition in arity_partition.values()
                for edges in partition.signature_to_edges.values()
                for eid in edges
            }
        )