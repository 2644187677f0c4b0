"""Directed hypergraphs with ordered hyperedges and vertex incidence lookup."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

VertexId = int
EdgeId = int
GlobalVertexId = int
GlobalEdgeId = int
StateId = int
EventId = int

_SIZE_MAX = 2**64 - 1

INVALID_VERTEX: VertexId = _SIZE_MAX
INVALID_EDGE: EdgeId = _SIZE_MAX
INVALID_GLOBAL_VERTEX: GlobalVertexId = _SIZE_MAX
INVALID_GLOBAL_EDGE: GlobalEdgeId = _SIZE_MAX
INVALID_STATE: StateId = _SIZE_MAX
INVALID_EVENT: EventId = _SIZE_MAX


class Vertex:
    """A vertex identified by an integer id."""

    __slots__ = ("id",)

    def __init__(self, vertex_id: VertexId = INVALID_VERTEX) -> None:
        self.id = vertex_id

    def is_valid(self) -> bool:
        return self.id != INVALID_VERTEX

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: "Vertex") -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Vertex({self.id})"


class Hyperedge:
    """A directed hyperedge: an ordered, non-empty sequence of vertex ids."""

    __slots__ = ("id", "vertices")

    def __init__(
        self, edge_id: EdgeId = INVALID_EDGE, vertices: Optional[Iterable[VertexId]] = None
    ) -> None:
        if vertices is None:
            verts: tuple[VertexId, ...] = ()
        else:
            verts = tuple(vertices)
            if not verts:
                raise ValueError("Hyperedge must have at least one vertex")
        self.id = edge_id
        self.vertices = verts

    def arity(self) -> int:
        return len(self.vertices)

    def is_valid(self) -> bool:
        return self.id != INVALID_EDGE and bool(self.vertices)

    def vertex(self, index: int) -> VertexId:
        """Return the vertex at ``index``, checking bounds."""
        if not 0 <= index < len(self.vertices):
            raise IndexError("Vertex index out of range")
        return self.vertices[index]

    def contains(self, vertex_id: VertexId) -> bool:
        return vertex_id in self.vertices

    def structurally_equal(self, other: "Hyperedge") -> bool:
        """Compare vertex sequences, ignoring edge ids."""
        return self.vertices == other.vertices

    def __getitem__(self, index: int) -> VertexId:
        return self.vertices[index]

    def __iter__(self) -> Iterator[VertexId]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self.vertices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hyperedge):
            return NotImplemented
        return self.id == other.id and self.vertices == other.vertices

    def __lt__(self, other: "Hyperedge") -> bool:
        if not isinstance(other, Hyperedge):
            return NotImplemented
        if self.arity() != other.arity():
            return self.arity() < other.arity()
        return self.vertices < other.vertices

    def __hash__(self) -> int:
        return hash(self.vertices)

    def __repr__(self) -> str:
        return f"Hyperedge(id={self.id}, vertices={list(self.vertices)})"


class Hypergraph:
    """Directed hypergraph with an index from vertices to the edges holding them."""

    def __init__(self) -> None:
        self._edges: dict[EdgeId, Hyperedge] = {}
        # Insertion-ordered set of vertices.
        self._vertices: dict[VertexId, None] = {}
        self._vertex_to_edges: dict[VertexId, list[EdgeId]] = {}
        self._next_edge_id: EdgeId = 0
        self._next_vertex_id: VertexId = 0

    def _index_edge(self, edge: Hyperedge) -> None:
        for vertex_id in edge.vertices:
            self._vertex_to_edges.setdefault(vertex_id, []).append(edge.id)
            self._vertices[vertex_id] = None

    def _unindex_edge(self, edge: Hyperedge) -> None:
        for vertex_id in edge.vertices:
            remaining = [e for e in self._vertex_to_edges.get(vertex_id, []) if e != edge.id]
            if remaining:
                self._vertex_to_edges[vertex_id] = remaining
            else:
                self._vertex_to_edges.pop(vertex_id, None)
                self._vertices.pop(vertex_id, None)

    def add_edge(self, vertices: Iterable[VertexId]) -> EdgeId:
        """Add an edge over ``vertices`` and return its new id."""
        verts = tuple(vertices)
        if not verts:
            raise ValueError("Cannot add edge with no vertices")
        edge_id = self._next_edge_id
        self._next_edge_id += 1
        edge = Hyperedge(edge_id, verts)
        self._edges[edge_id] = edge
        self._index_edge(edge)
        self._next_vertex_id = max(self._next_vertex_id, max(verts) + 1)
        return edge_id

    def remove_edge(self, edge_id: EdgeId) -> bool:
        """Remove the edge with ``edge_id``; return whether it existed."""
        edge = self._edges.pop(edge_id, None)
        if edge is None:
            return False
        self._unindex_edge(edge)
        return True

    def remove_edges_matching(self, vertices: Iterable[VertexId]) -> list[EdgeId]:
        """Remove every edge whose vertex sequence equals ``vertices``."""
        target = tuple(vertices)
        removed = [eid for eid, edge in self._edges.items() if edge.vertices == target]
        for eid in removed:
            self._unindex_edge(self._edges.pop(eid))
        return removed

    def create_vertex(self) -> VertexId:
        """Return a fresh vertex id beyond any seen so far."""
        vertex_id = self._next_vertex_id
        self._next_vertex_id += 1
        return vertex_id

    @property
    def edges(self) -> tuple[Hyperedge, ...]:
        return tuple(self._edges.values())

    @property
    def vertices(self) -> frozenset[VertexId]:
        return frozenset(self._vertices)

    def num_edges(self) -> int:
        return len(self._edges)

    def num_vertices(self) -> int:
        return len(self._vertices)

    def get_edge(self, edge_id: EdgeId) -> Optional[Hyperedge]:
        return self._edges.get(edge_id)

    def edges_containing(self, vertex_id: VertexId) -> list[EdgeId]:
        return list(self._vertex_to_edges.get(vertex_id, ()))

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return vertex_id in self._vertices

    def has_edge(self, edge_id: EdgeId) -> bool:
        return edge_id in self._edges

    def edges_within_radius(self, center_vertex: VertexId, radius: int) -> set[EdgeId]:
        """Collect edges reachable from ``center_vertex`` within ``radius`` edge hops."""
        result: set[EdgeId] = set()
        visited: set[VertexId] = set()
        frontier: set[VertexId] = {center_vertex}
        for _ in range(radius):
            if not frontier:
                break
            next_frontier: set[VertexId] = set()
            for vertex in frontier:
                if vertex in visited:
                    continue
                visited.add(vertex)
                for edge_id in self.edges_containing(vertex):
                    result.add(edge_id)
                    edge = self._edges.get(edge_id)
                    if edge is not None:
                        next_frontier.update(v for v in edge.vertices if v not in visited)
            frontier = next_frontier
        return result

    def clone(self) -> "Hypergraph":
        """Return a copy with vertices renumbered from zero."""
        copy = Hypergraph()
        vertex_map = {old: copy.create_vertex() for old in self._vertices}
        for edge in self._edges.values():
            copy.add_edge(vertex_map[v] for v in edge.vertices)
        return copy

    def clear(self) -> None:
        self._edges.clear()
        self._vertices.clear()
        self._vertex_to_edges.clear()
        self._next_edge_id = 0
        self._next_vertex_id = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hypergraph):
            return NotImplemented
        if len(self._edges) != len(other._edges) or len(self._vertices) != len(other._vertices):
            return False
        ours = sorted(e.vertices for e in self._edges.values())
        theirs = sorted(e.vertices for e in other._edges.values())
        return ours == theirs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        edges = ", ".join(str(list(e.vertices)) for e in self._edges.values())
        return f"Hypergraph([{edges}])"